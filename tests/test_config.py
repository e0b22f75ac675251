"""Tests for doclint.config: doclint.yml loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from doclint.config import DoclintConfig, load_config


class TestLoadConfig:
    def test_missing_file_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == DoclintConfig()

    def test_full_section(self, tmp_path: Path) -> None:
        (tmp_path / "doclint.yml").write_text(
            "doclint:\n"
            "  docs_dir: docs/api\n"
            "  check_toc: false\n"
            "  toc_max_depth: 3\n"
        )
        config = load_config(tmp_path)
        assert config == DoclintConfig(
            docs_dir=Path("docs/api"), check_toc=False, toc_max_depth=3
        )

    def test_partial_section(self, tmp_path: Path) -> None:
        (tmp_path / "doclint.yml").write_text("doclint:\n  check_toc: false\n")
        config = load_config(tmp_path)
        assert config.check_toc is False
        assert config.docs_dir == Path("docs")
        assert config.toc_max_depth == 6

    @pytest.mark.parametrize(
        "content",
        [
            "just a string\n",
            "other: {}\n",
            "doclint: [1, 2]\n",
        ],
    )
    def test_unexpected_shape_defaults(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "doclint.yml").write_text(content)
        assert load_config(tmp_path) == DoclintConfig()

    def test_invalid_values_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "doclint.yml").write_text(
            "doclint:\n  check_toc: 'yes'\n  toc_max_depth: 9\n  docs_dir: ''\n"
        )
        assert load_config(tmp_path) == DoclintConfig()

    def test_malformed_yaml_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / "doclint.yml").write_text("doclint: [unclosed\n")
        with caplog.at_level(logging.WARNING, logger="doclint.config"):
            assert load_config(tmp_path) == DoclintConfig()
        assert "doclint.yml" in caplog.text


class TestResolveDocsDir:
    def test_relative(self, tmp_path: Path) -> None:
        config = DoclintConfig(docs_dir=Path("docs/api"))
        assert config.resolve_docs_dir(tmp_path) == tmp_path / "docs" / "api"

    def test_absolute(self, tmp_path: Path) -> None:
        config = DoclintConfig(docs_dir=tmp_path / "elsewhere")
        assert config.resolve_docs_dir(Path("/unused")) == tmp_path / "elsewhere"
