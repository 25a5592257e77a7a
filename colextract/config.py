import logging
import re
from collections import ChainMap
from pathlib import Path
from typing import Any, Dict, Optional

from colextract.exceptions import ConfigError
from colextract.line_extractor import DEFAULT_DELIMITER, DEFAULT_SEPARATOR

# Try to import yaml
try:
    from ruamel.yaml import YAML

    yaml = YAML(typ="safe")
except ImportError as e:
    raise ImportError("ruamel.yaml not available. Install with: pip install ruamel.yaml") from e

DEFAULTS: Dict[str, str] = {
    "delimiter": DEFAULT_DELIMITER,
    "separator": DEFAULT_SEPARATOR,
}

SETTING_KEYS = set(DEFAULTS)

_SIMPLE_ESCAPES = {
    "\\": "\\",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_ESCAPE_SEQUENCE = re.compile(r"\\(x[0-9A-Fa-f]{2}|.)", re.DOTALL)


def expand_escapes(text: str) -> str:
    """Expand backslash escape sequences such as ``\\t`` in *text*.

    Unknown escapes are left as they are, backslash included.
    """

    def _replace(found: "re.Match[str]") -> str:
        sequence = found.group(1)
        if sequence.startswith("x") and len(sequence) == 3:
            return chr(int(sequence[1:], 16))
        return _SIMPLE_ESCAPES.get(sequence, found.group(0))

    return _ESCAPE_SEQUENCE.sub(_replace, text)


class Settings:
    """Class to load and layer run settings

    Values given on the command line win over the configuration file, which wins over the built-in defaults.
    """

    def __init__(self):
        """Initialize a new Settings instance holding only the defaults"""
        self.file_data: Dict[str, Any] = {}
        self.overrides: Dict[str, Any] = {}

    def load(self, file: Path):
        """Load settings from a YAML file"""

        if not file.is_file():
            raise ConfigError(f"Config file not found: {file}")
        try:
            with file.open(encoding="utf-8") as f:
                data = yaml.load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load config file: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {file} must contain a mapping")

        unknown_keys = set(data) - SETTING_KEYS
        if unknown_keys:
            raise ConfigError(f"Unknown keys in config file {file}: {', '.join(sorted(map(str, unknown_keys)))}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ConfigError(f"Config key '{key}' must be a string")

        logging.debug(f"Loaded config file {file}: {data}")
        self.file_data = dict(data)

    def override(self, delimiter: Optional[str] = None, separator: Optional[str] = None):
        """Record values given on the command line; None means not given"""
        for key, value in (("delimiter", delimiter), ("separator", separator)):
            if value is not None:
                self.overrides[key] = value

    @property
    def scope(self) -> ChainMap[str, Any]:
        return ChainMap(self.overrides, self.file_data, DEFAULTS)

    @property
    def delimiter(self) -> str:
        return self.scope["delimiter"]

    @property
    def separator(self) -> str:
        return expand_escapes(self.scope["separator"])
