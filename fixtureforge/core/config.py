"""
FixtureForge — Configuration
Reads FIXTUREFORGE_* settings from the environment, falling back to a .env
file found from the working directory. The .env file is only read; its
values are never copied into os.environ.
"""

import os
from dataclasses import dataclass

from dotenv import dotenv_values, find_dotenv

from fixtureforge.errors import ConfigurationError

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


@dataclass(frozen=True)
class FactoryConfig:
    """Top-level factory configuration."""
    catalog_module: str
    log_level: str
    tempfile_prefix: str
    tempfile_dir: str | None


def _load_config(dotenv_path: str | os.PathLike | None = None) -> FactoryConfig:
    file_values = dotenv_values(dotenv_path or find_dotenv(usecwd=True))

    def getenv(key: str, default: str | None = None) -> str | None:
        value = os.environ.get(key)
        if value is None:
            value = file_values.get(key)
        return default if value is None else value

    return FactoryConfig(
        catalog_module=getenv(
            "FIXTUREFORGE_CATALOG",
            "tests.support.model_factories",
        ).strip(),
        log_level=getenv("FIXTUREFORGE_LOG_LEVEL", "WARNING").strip().upper(),
        tempfile_prefix=getenv("FIXTUREFORGE_TEMPFILE_PREFIX", "tmpfile"),
        tempfile_dir=getenv("FIXTUREFORGE_TEMPFILE_DIR") or None,
    )


def _validate_config(cfg: FactoryConfig) -> None:
    """Fail fast on settings the logger or tempfile helper cannot use."""
    if cfg.log_level not in LOG_LEVELS:
        raise ConfigurationError("FIXTUREFORGE_LOG_LEVEL", cfg.log_level, LOG_LEVELS)
    if cfg.tempfile_dir is not None and not os.path.isdir(cfg.tempfile_dir):
        raise ConfigurationError("FIXTUREFORGE_TEMPFILE_DIR", cfg.tempfile_dir)


settings = _load_config()
_validate_config(settings)
