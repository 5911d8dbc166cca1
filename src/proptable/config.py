"""
Settings for proptable callers.

The core functions take their options as arguments; Settings bundles the
choices a presentation layer makes once (glyphs, labels, variable limit)
and can be loaded from YAML.

Example settings file:

    glyphs: unicode
    max_variables: 12
    true_label: T
    false_label: F
    table_style: markdown
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from proptable.backends.text_table import TableStyle
from proptable.display import GlyphStyle
from proptable.errors import ConfigError

# 2**16 rows is still instant; beyond ~20 memory becomes the limit.
DEFAULT_MAX_VARIABLES = 16
_LARGE_MAX_VARIABLES = 24


@dataclass
class Settings:
    """
    Caller-side options for computing and presenting truth tables.

    Properties:
        glyphs: Display glyph family for headers
        max_variables: Upper bound on variables per calculation (None = no bound)
        true_label: Cell text for True
        false_label: Cell text for False
        table_style: Text grid layout used by render_table
    """

    glyphs: GlyphStyle = GlyphStyle.UNICODE
    max_variables: Optional[int] = DEFAULT_MAX_VARIABLES
    true_label: str = "T"
    false_label: str = "F"
    table_style: TableStyle = TableStyle.PLAIN


def settings_from_dict(d: Dict[str, Any] | None) -> Settings:
    """
    Build Settings from a plain dict (e.g. parsed YAML).

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    if d is None:
        return Settings()
    if not isinstance(d, dict):
        raise ConfigError(f"Settings must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {unknown}")

    settings = Settings()

    if "glyphs" in d:
        try:
            settings.glyphs = GlyphStyle(d["glyphs"])
        except ValueError:
            raise ConfigError(f"Invalid glyphs: {d['glyphs']!r}")

    if "table_style" in d:
        try:
            settings.table_style = TableStyle(d["table_style"])
        except ValueError:
            raise ConfigError(f"Invalid table_style: {d['table_style']!r}")

    if "max_variables" in d:
        limit = d["max_variables"]
        if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool) or limit < 0):
            raise ConfigError(f"max_variables must be a non-negative integer or null, got {limit!r}")
        if limit is None or limit > _LARGE_MAX_VARIABLES:
            warnings.warn(
                f"max_variables={limit} allows tables with more than 2**{_LARGE_MAX_VARIABLES} rows",
                UserWarning,
            )
        settings.max_variables = limit

    for key in ("true_label", "false_label"):
        if key in d:
            value = d[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty string, got {value!r}")
            setattr(settings, key, value)

    return settings


def settings_to_dict(settings: Settings) -> Dict[str, Any]:
    return {
        "glyphs": settings.glyphs.value,
        "max_variables": settings.max_variables,
        "true_label": settings.true_label,
        "false_label": settings.false_label,
        "table_style": settings.table_style.value,
    }


def load_settings(filepath: str) -> Settings:
    """
    Load Settings from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigError: If the file is not valid YAML or has invalid values
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Settings file not found: {filepath}")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {filepath}: {e}")

    return settings_from_dict(data)


__all__ = [
    "Settings",
    "settings_from_dict",
    "settings_to_dict",
    "load_settings",
    "DEFAULT_MAX_VARIABLES",
]
