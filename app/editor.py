"""
In-memory edit operations on the CV data and theme dicts.

Every function mutates the dict it is given and returns it, so callers can
work directly on the objects held in Streamlit's session state.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Tuple

from cleaner import clamp_scale, normalise_color
from schema_resume import (
    ENTRY_SCHEMA,
    PERSONAL_FIELDS,
    initial_config,
    initial_data,
    new_entry,
)
from themes import FONTS, TEMPLATES

log = logging.getLogger(__name__)


def _section(data: Dict[str, Any], section: str) -> list:
    if section not in ENTRY_SCHEMA:
        raise ValueError(f"Unknown section: {section}")
    return data[section]


def update_personal(data: Dict[str, Any], field: str, value) -> Dict[str, Any]:
    if field not in PERSONAL_FIELDS:
        raise KeyError(field)
    data["personal"][field] = value
    return data


def update_item(data: Dict[str, Any], section: str, item_id: str, field: str, value) -> Dict[str, Any]:
    """Set `field` on the entry with `item_id`; other entries are untouched."""
    items = _section(data, section)
    if field == "id" or field not in ENTRY_SCHEMA[section]:
        raise KeyError(field)
    for item in items:
        if item["id"] == item_id:
            item[field] = value
            break
    return data


def add_item(data: Dict[str, Any], section: str) -> Dict[str, Any]:
    items = _section(data, section)
    entry = new_entry(section, (item["id"] for item in items))
    items.insert(0, entry)
    log.debug("Added %s entry %s", section, entry["id"])
    return data


def remove_item(data: Dict[str, Any], section: str, item_id: str) -> Dict[str, Any]:
    items = _section(data, section)
    items[:] = [item for item in items if item["id"] != item_id]
    log.debug("Removed %s entry %s", section, item_id)
    return data


def set_skills(data: Dict[str, Any], text: str) -> Dict[str, Any]:
    data["skills"] = text or ""
    return data


def set_photo(data: Dict[str, Any], uri: str) -> Dict[str, Any]:
    return update_personal(data, "photo", uri)


def clear_photo(data: Dict[str, Any]) -> Dict[str, Any]:
    return update_personal(data, "photo", None)


def update_theme(config: Dict[str, Any], **changes) -> Dict[str, Any]:
    """Apply validated theme changes (template, color, font, scale)."""
    for key, value in changes.items():
        if key == "template":
            if value not in TEMPLATES:
                raise ValueError(f"Unknown template: {value}")
        elif key == "font":
            if value not in FONTS:
                raise ValueError(f"Unknown font: {value}")
        elif key == "color":
            value = normalise_color(value)
        elif key == "scale":
            value = clamp_scale(value)
        else:
            raise KeyError(key)
        config[key] = value
    return config


def reset_state() -> Tuple[Dict[str, Any], Dict[str, Any]]:
    log.info("Resetting CV data and theme to defaults")
    return initial_data(), initial_config()
