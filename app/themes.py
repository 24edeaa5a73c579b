"""
Fixed theme catalogues: layouts, fonts, accent colours and text scale.
"""

# key -> display name, CSS font stack
FONTS = {
    "inter":   {"name": "Inter (Standard)",       "family": "'Inter', sans-serif"},
    "poppins": {"name": "Poppins (Modern)",       "family": "'Poppins', sans-serif"},
    "serif":   {"name": "Merriweather (Elegant)", "family": "'Merriweather', serif"},
    "mono":    {"name": "Roboto Mono (Tech)",     "family": "'Roboto Mono', monospace"},
}

# Google Fonts families loaded by the page template
FONT_IMPORTS = "Inter:wght@300;400;600;700&family=Poppins:wght@300;400;600;700" \
               "&family=Merriweather:wght@300;400;700&family=Roboto+Mono:wght@400;700"

COLORS = [
    "#2563eb",  # blue
    "#059669",  # emerald
    "#dc2626",  # red
    "#0f172a",  # slate
    "#7c3aed",  # violet
    "#d97706",  # amber
]

TEMPLATES = {
    "modern":  "Modern",
    "classic": "Classic",
    "minimal": "Minimal",
}

BASE_FONT_PX = 14
SCALE_MIN = 0.8
SCALE_MAX = 1.2
SCALE_STEP = 0.05


def font_family(key: str) -> str:
    return FONTS[key]["family"]


def font_label(key: str) -> str:
    return FONTS[key]["name"]


def template_label(key: str) -> str:
    return TEMPLATES[key]
