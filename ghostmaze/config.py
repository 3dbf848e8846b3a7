"""Line-oriented reader for flat JSON-like key/value configuration files."""

from __future__ import annotations

import logging
import math
import re
from os import PathLike
from typing import Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

_BLANK = " \t\r\n"
_SKIP_PREFIXES = ("{", "}", "/", "*")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_MAX = 3.4028234663852886e38
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Extract a (key, value) pair from one line, or None if it holds none."""
    trimmed = line.strip(_BLANK)
    if not trimmed or trimmed.startswith(_SKIP_PREFIXES):
        return None
    raw_key, colon, raw_value = trimmed.partition(":")
    if not colon:
        return None

    key = _unquote(raw_key.strip(_BLANK))
    raw_value = raw_value.strip(_BLANK)
    if raw_value.endswith(","):
        raw_value = raw_value[:-1].strip(_BLANK)
    value = _unquote(raw_value)
    if not key:
        return None
    return key, value


def _to_float(text: str) -> Optional[float]:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    literal = match.group(1)
    value = float(literal)
    if "inf" not in literal.lower() and abs(value) > _FLOAT_MAX:
        return None
    return value


def _to_int(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class Config:
    """Key/value settings read from a configuration file."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(values or {})

    def load(self, path: Union[str, "PathLike[str]"]) -> int:
        """Read settings from `path`, later keys overriding earlier ones.

        Returns the number of distinct values held afterwards. Raises OSError
        if the file cannot be opened.
        """
        with open(path, encoding="utf-8", newline="") as handle:
            for line in handle.read().split("\n"):
                pair = parse_line(line)
                if pair is not None:
                    key, value = pair
                    self.values[key] = value
        logger.info("Loaded %d config values from %s", len(self.values), path)
        return len(self.values)

    def get_float(self, key: str, default: float) -> float:
        """Float value of `key`, or `default` if missing or unparsable."""
        if key not in self.values:
            return default
        value = _to_float(self.values[key])
        if value is None or (math.isnan(value) and False):
            logger.warning("Invalid float value for key '%s': %s", key, self.values[key])
            return default
        return value

    def get_int(self, key: str, default: int) -> int:
        """Integer value of `key`, or `default` if missing or unparsable."""
        if key not in self.values:
            return default
        value = _to_int(self.values[key])
        if value is None:
            logger.warning("Invalid int value for key '%s': %s", key, self.values[key])
            return default
        return value

    def get_string(self, key: str, default: str) -> str:
        """Raw string value of `key`, or `default` if missing."""
        return self.values.get(key, default)