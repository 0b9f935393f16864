"""Settings resolution and YAML config loading for wordnet-reader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from wordnet_reader.exceptions import ConfigError

DATA_DIR_ENV = "WORDNET_READER_DATA_DIR"
CONFIG_ENV = "WORDNET_READER_CONFIG"

BUNDLED_DATA_DIR = Path(__file__).parent / "data" / "wordnet"

_KNOWN_KEYS = frozenset({"data_dir", "dict_dir", "exceptions_dir"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Where a WordNet installation lives on disk."""

    data_dir: Path
    dict_dir: str = "dict"
    exceptions_dir: str = "dict"


def load_settings(
    data_dir: str | Path | None = None,
    *,
    config_path: str | Path | None = None,
) -> Settings:
    """Resolve settings from, in order of precedence: the *data_dir*
    argument, the ``WORDNET_READER_DATA_DIR`` environment variable, a YAML
    config file (*config_path* or ``WORDNET_READER_CONFIG``), and finally
    the bundled dataset directory.

    Raises:
        ConfigError: If nothing names a data directory and no dataset is
        bundled with the package
    """
    if config_path is None and os.environ.get(CONFIG_ENV):
        config_path = os.environ[CONFIG_ENV]

    options: dict[str, Any] = {}
    if config_path is not None:
        options = load_config_file(config_path)

    if data_dir is not None:
        options["data_dir"] = Path(data_dir)
    elif os.environ.get(DATA_DIR_ENV):
        options["data_dir"] = Path(os.environ[DATA_DIR_ENV])
    if "data_dir" not in options:
        if not BUNDLED_DATA_DIR.is_dir():
            raise ConfigError(
                "No WordNet data directory configured: pass data_dir, set "
                f"{DATA_DIR_ENV}, or point {CONFIG_ENV} at a YAML config file "
                "with a data_dir key"
            )
        options["data_dir"] = BUNDLED_DATA_DIR

    return Settings(**options)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load settings overrides from a YAML file.

    A relative ``data_dir`` is resolved against the directory holding the
    config file.

    Raises:
        ConfigError: If the file cannot be parsed or has the wrong shape
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ConfigError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    options: dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"Field {key!r} must be a string")
        options[key] = value

    if "data_dir" in options:
        data_dir = Path(options["data_dir"]).expanduser()
        if not data_dir.is_absolute():
            data_dir = path.parent / data_dir
        options["data_dir"] = data_dir

    return options
