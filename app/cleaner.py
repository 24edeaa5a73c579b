"""
Shared clean-ups for editor input.
"""
from __future__ import annotations
import re
from typing import List

from themes import SCALE_MIN, SCALE_MAX, SCALE_STEP

_HEX_LONG  = re.compile(r"^#[0-9a-fA-F]{6}$")
_HEX_SHORT = re.compile(r"^#[0-9a-fA-F]{3}$")

# ───────────────────────────────────────── helpers ──
def split_skills(text: str | None) -> List[str]:
    """Comma separated skills → trimmed items, blanks dropped."""
    raw = text or ""
    return [s.strip() for s in raw.split(",") if s.strip()]

def normalise_color(value: str) -> str:
    value = (value or "").strip()
    if _HEX_LONG.match(value):
        return value.lower()
    if _HEX_SHORT.match(value):
        return "#" + "".join(c * 2 for c in value[1:]).lower()
    raise ValueError(f"Not a hex colour: {value!r}")

def clamp_scale(value: float) -> float:
    value = min(max(float(value), SCALE_MIN), SCALE_MAX)
    # snap to the slider grid
    return round(round(value / SCALE_STEP) * SCALE_STEP, 2)

def initial_of(name: str | None) -> str:
    name = (name or "").strip()
    return name[0].upper() if name else ""
