"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from newsfeed.config.models import NewsfeedConfig

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")


def load_config(path: Path | str | None = None) -> NewsfeedConfig:
    """Load configuration from a YAML file.

    An empty file yields the defaults of every section.

    Args:
        path: Path to YAML config file (default: the packaged default.yaml).

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    raw = yaml.safe_load(Path(path or DEFAULT_CONFIG_PATH).read_text())
    return NewsfeedConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Path of the default config shipped inside the package."""
    return DEFAULT_CONFIG_PATH
