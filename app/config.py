"""
Configuration settings for the CV builder.

Values come from the environment (or a local .env file) so the preview
size, upload limits and log level can be tuned without touching code.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Theme defaults
# One of "modern", "classic", "minimal"
DEFAULT_TEMPLATE = os.getenv("CV_DEFAULT_TEMPLATE", "modern")

# A4 page at 96 dpi (210mm x 297mm)
A4_WIDTH_PX = 794
A4_HEIGHT_PX = 1123
PREVIEW_PADDING_PX = 40

# Width of the preview frame in the Streamlit layout
PREVIEW_WIDTH = int(os.getenv("CV_PREVIEW_WIDTH", "760"))

# Photo uploads
MAX_PHOTO_BYTES = int(float(os.getenv("CV_MAX_PHOTO_MB", "5")) * 1024 * 1024)

# Printable tab server
SERVER_HOST = os.getenv("CV_SERVER_HOST", "127.0.0.1")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the app."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
