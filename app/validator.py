"""
Sanity checks and statistics for the rendered CV page.

• html5lib in strict mode reports the first HTML parse error.
• cssutils parses every <style> block; its ERROR log records are collected.
• BeautifulSoup pulls visible text and section headings for the stats panel.
"""

from __future__ import annotations
import logging
import re

import cssutils
import html5lib
from bs4 import BeautifulSoup

log = logging.getLogger(__name__)

# cssutils reports through its own logger; route it to one we can capture from
_css_log = logging.getLogger("validator.cssutils")
_css_log.propagate = False
_css_log.setLevel(logging.CRITICAL)
cssutils.log.setLog(_css_log)


class _CaptureCSSLogHandler(logging.Handler):
    def __init__(self, error_list):
        super().__init__(level=logging.ERROR)
        self.error_list = error_list

    def emit(self, record):
        self.error_list.append(f"CSS Error in <style> tag: {record.getMessage()}")


def validate_page(html_content: str) -> list[str]:
    """Validates HTML structure and inline CSS. Returns a list of error messages."""
    errors = []
    try:
        html5lib.HTMLParser(strict=True).parse(html_content)
    except html5lib.html5parser.ParseError as e:
        errors.append(f"HTML ParseError: {e}")

    soup = BeautifulSoup(html_content, "html.parser")
    for style_tag in soup.find_all("style"):
        if not style_tag.string:
            continue
        current_css_errors = []
        capture_handler = _CaptureCSSLogHandler(current_css_errors)

        original_level = _css_log.level
        _css_log.addHandler(capture_handler)
        _css_log.setLevel(logging.ERROR)
        try:
            parser = cssutils.CSSParser(validate=False, raiseExceptions=False)
            parser.parseString(style_tag.string)
        finally:
            _css_log.setLevel(original_level)
            _css_log.removeHandler(capture_handler)

        errors.extend(current_css_errors)

    for message in errors:
        log.warning(message)
    return errors


def page_stats(html_content: str) -> dict:
    """Size, visible word count and section headings of a rendered page."""
    soup = BeautifulSoup(html_content, "html.parser")
    for tag in soup(["style", "script"]):
        tag.decompose()
    text = soup.get_text(" ")
    return {
        "size_kb": len(html_content.encode("utf-8")) / 1024,
        "words": len(re.findall(r"\w+", text)),
        "sections": [h.get_text(strip=True) for h in soup.find_all("h3")],
    }
