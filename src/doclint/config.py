"""Project configuration: the ``doclint`` section of ``doclint.yml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from doclint.toc import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

CONFIG_FILE = "doclint.yml"
DEFAULT_DOCS_DIR = "docs"


@dataclass(frozen=True)
class DoclintConfig:
    """Lint settings. Relative ``docs_dir`` is resolved against the project root."""

    docs_dir: Path = Path(DEFAULT_DOCS_DIR)
    check_toc: bool = True
    toc_max_depth: int = DEFAULT_MAX_DEPTH

    def resolve_docs_dir(self, project_root: Path) -> Path:
        if self.docs_dir.is_absolute():
            return self.docs_dir
        return project_root / self.docs_dir


def load_config(project_root: Path) -> DoclintConfig:
    """Load settings from ``<project_root>/doclint.yml``.

    Falls back to defaults for missing keys or a missing file.  A file that
    cannot be read or parsed is reported as a warning and ignored.
    """
    config_path = project_root / CONFIG_FILE
    if not config_path.is_file():
        return DoclintConfig()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using default settings", CONFIG_FILE)
        return DoclintConfig()

    if not isinstance(data, dict):
        return DoclintConfig()

    section = data.get("doclint")
    if not isinstance(section, dict):
        return DoclintConfig()

    defaults = DoclintConfig()
    docs_dir = section.get("docs_dir")
    check_toc = section.get("check_toc")
    max_depth = section.get("toc_max_depth")

    return DoclintConfig(
        docs_dir=Path(docs_dir) if isinstance(docs_dir, str) and docs_dir else defaults.docs_dir,
        check_toc=check_toc if isinstance(check_toc, bool) else defaults.check_toc,
        toc_max_depth=(
            max_depth
            if isinstance(max_depth, int) and not isinstance(max_depth, bool) and 1 <= max_depth <= 6
            else defaults.toc_max_depth
        ),
    )
