"""
Fit the fixed-size A4 page into the preview area.

The page is laid out at its real size and shrunk with a CSS transform; the
bottom margin is pulled up by the height the transform removed so the frame
does not keep the unscaled height.
"""

from __future__ import annotations
from dataclasses import dataclass

from config import A4_HEIGHT_PX, A4_WIDTH_PX, PREVIEW_PADDING_PX

MIN_SCALE = 0.1


@dataclass(frozen=True)
class PageGeometry:
    scale: float
    zoom_percent: int
    scaled_height: float
    margin_bottom: float
    frame_height: int


def fit_scale(container_width: float,
              padding: float = PREVIEW_PADDING_PX,
              page_width: float = A4_WIDTH_PX) -> float:
    """Ratio of usable container width to page width, never above 1.0."""
    scale = (container_width - padding) / page_width
    return min(1.0, max(MIN_SCALE, scale))


def page_geometry(container_width: float,
                  padding: float = PREVIEW_PADDING_PX,
                  page_width: float = A4_WIDTH_PX,
                  page_height: float = A4_HEIGHT_PX) -> PageGeometry:
    scale = fit_scale(container_width, padding, page_width)
    scaled_height = page_height * scale
    return PageGeometry(
        scale=scale,
        zoom_percent=round(scale * 100),
        scaled_height=scaled_height,
        margin_bottom=page_height - scaled_height,
        # page plus the padding above and below it
        frame_height=int(scaled_height + padding * 2),
    )
