"""
CV data + theme ➜ HTML page (Jinja2 templates under app/templates).
"""
from __future__ import annotations
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from cleaner import initial_of, split_skills
from config import A4_HEIGHT_PX, A4_WIDTH_PX, PREVIEW_PADDING_PX, PREVIEW_WIDTH
from preview import MIN_SCALE, page_geometry
from themes import BASE_FONT_PX, FONT_IMPORTS, TEMPLATES, font_family

log = logging.getLogger(__name__)

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)


def _theme_style(config: dict) -> str:
    color = config["color"]
    return (f"--accent: {color}; --accent-soft: {color}33; "
            f"--font-family: {font_family(config['font'])}; "
            f"--font-size: {BASE_FONT_PX * config['scale']:g}px")


def render_cv(data: dict, config: dict) -> str:
    """Render the CV body with the layout picked in `config`."""
    template = config["template"]
    if template not in TEMPLATES:
        raise ValueError(f"Unknown template: {template}")
    personal = data.get("personal", {})
    return env.get_template(f"cv/{template}.html").render(
        p=personal,
        experience=data.get("experience", []),
        education=data.get("education", []),
        skills=data.get("skills", ""),
        skills_list=split_skills(data.get("skills", "")),
        initial=initial_of(personal.get("name")),
        theme_style=_theme_style(config),
    )


def render_page(data: dict, config: dict, preview: bool = True, auto_print: bool = False,
                inline_css: bool = True, preview_width: int = PREVIEW_WIDTH) -> str:
    """
    Full standalone HTML document for the CV.

    preview=True shrinks the A4 page to `preview_width` and keeps it fitted on
    resize; auto_print=True opens the browser print dialog once loaded.
    """
    css = _CSS_PATH.read_text(encoding="utf-8") if inline_css else ""
    html = env.get_template("base.html").render(
        p=data.get("personal", {}),
        cv_html=render_cv(data, config),
        inline_css=css,
        font_imports=FONT_IMPORTS,
        preview=preview,
        auto_print=auto_print,
        geometry=page_geometry(preview_width),
        page_width=A4_WIDTH_PX,
        page_height=A4_HEIGHT_PX,
        padding=PREVIEW_PADDING_PX,
        min_scale=MIN_SCALE,
    )
    log.debug("Rendered %s page (%d chars)", config["template"], len(html))
    return html
