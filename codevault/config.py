from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("codevault")

DEFAULT_DATA_FILE = Path("data") / "codevault.json"
DEFAULT_EXPORT_DIR = Path("snippet_exports")


@dataclass(slots=True)
class VaultConfig:
    """Runtime configuration for the snippet vault."""

    data_file: Path = DEFAULT_DATA_FILE
    export_dir: Path = DEFAULT_EXPORT_DIR
    highlight_style: str = "monokai"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "VaultConfig":
        def _path_env(name: str, default: Path) -> Path:
            raw = os.getenv(name)
            if not raw:
                return default
            return Path(raw).expanduser()

        log_level = os.getenv("CODEVAULT_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning("Invalid log level for CODEVAULT_LOG_LEVEL: %s", log_level)
            log_level = "WARNING"

        return cls(
            data_file=_path_env("CODEVAULT_DATA_FILE", DEFAULT_DATA_FILE),
            export_dir=_path_env("CODEVAULT_EXPORT_DIR", DEFAULT_EXPORT_DIR),
            highlight_style=os.getenv("CODEVAULT_STYLE", "monokai"),
            log_level=log_level,
        )


__all__ = ["DEFAULT_DATA_FILE", "DEFAULT_EXPORT_DIR", "VaultConfig"]
