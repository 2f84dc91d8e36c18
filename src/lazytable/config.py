"""Style configuration from environment variables and YAML files."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import yaml

from .exceptions import InvalidConfig
from .models import DEFAULT_STYLE, TableStyle

logger = logging.getLogger(__name__)

ENV_PREFIX = "LAZYTABLE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidConfig(name, raw, "expected one of 1/0, true/false, yes/no, on/off")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfig(name, raw, "must be an integer") from None


def style_from_mapping(data: Mapping[str, Any], base: TableStyle = DEFAULT_STYLE) -> TableStyle:
    """
    Build a style from a mapping of style fields.

    Keys that are missing keep the value from ``base``.

    Raises:
        InvalidConfig: On non-string or unknown keys, or values the style rejects
    """
    for key in data:
        if not isinstance(key, str):
            raise InvalidConfig("style", key, "keys must be strings")
    known = {f.name for f in fields(TableStyle)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidConfig("style", unknown, f"unknown keys (expected {sorted(known)})")
    return replace(base, **dict(data))


def style_from_environment(environ: Mapping[str, str] | None = None) -> TableStyle:
    """
    Create a TableStyle from environment variables.

    Reads LAZYTABLE_PADDING, LAZYTABLE_SEPARATOR, LAZYTABLE_FILL,
    LAZYTABLE_JUNCTION and LAZYTABLE_BORDER. Unset variables keep the
    default style.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    if f"{ENV_PREFIX}PADDING" in env:
        data["padding"] = _parse_int("padding", env[f"{ENV_PREFIX}PADDING"])
    for name in ("separator", "fill", "junction"):
        key = f"{ENV_PREFIX}{name.upper()}"
        if key in env:
            data[name] = env[key]
    if f"{ENV_PREFIX}BORDER" in env:
        data["border"] = _parse_bool("border", env[f"{ENV_PREFIX}BORDER"])

    if data:
        logger.debug("Style overrides from environment: %s", data)
    return style_from_mapping(data)


def load_style(path: str | Path, base: TableStyle = DEFAULT_STYLE) -> TableStyle:
    """
    Load a style from a YAML file.

    Example file::

        padding: 0
        separator: "|"
        fill: "="
        border: true

    Raises:
        InvalidConfig: If the file is not a YAML mapping or holds bad values
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfig("style file", str(path), f"not valid YAML ({e})") from e
        except UnicodeDecodeError as e:
            raise InvalidConfig("style file", str(path), "not valid UTF-8") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfig("style file", str(path), "must contain a mapping")

    logger.debug("Loaded style from %s: %s", path, data)
    return style_from_mapping(data, base)
