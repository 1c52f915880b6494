"""
Page layout arithmetic: binding-aware margins, usable areas and the boxes
that page components are placed in. Everything is in points with the origin
at the top-left corner of the page, y growing downwards.
"""

import logging
from typing import List, Tuple

from .models import (
    Box,
    CalendarMonth,
    DocumentMargins,
    DocumentProfile,
    PageMargins,
    PageMetrics,
    PageSide,
    UsableArea,
)

logger = logging.getLogger(__name__)

POINTS_PER_INCH = 72
MONTHS_PER_YEAR = 12
# Month spread: Sunday-Wednesday on the left page, Thursday-Saturday + notes on the right
LEFT_PAGE_COLUMNS = 4


def page_side_for_index(index: int, facing_pages: bool = True) -> PageSide:
    """Facing-pages documents open on a right-hand page at index 0."""
    if not facing_pages:
        return PageSide.RIGHT_HAND
    return PageSide.RIGHT_HAND if index % 2 == 0 else PageSide.LEFT_HAND


def compute_margins(margins: DocumentMargins, side: PageSide, facing_pages: bool = True) -> PageMargins:
    """
    Resolves the left/right margins of one page.

    Binding-aware documents put the inside margin on the spine edge: the left
    edge of a right-hand page and the right edge of a left-hand page.

    When only left/right are known the larger one is taken to be the inside
    margin. That is an inference; a document with deliberately asymmetric,
    non-binding margins gets them mirrored on left-hand pages.
    """
    if not facing_pages and not margins.has_binding_margins:
        return PageMargins(left=margins.left, right=margins.right, top=margins.top, bottom=margins.bottom)

    if margins.has_binding_margins:
        inside, outside = margins.inside, margins.outside
    else:
        inside, outside = max(margins.left, margins.right), min(margins.left, margins.right)
        logger.debug("No inside/outside margins, inferring inside=%s outside=%s", inside, outside)

    if side == PageSide.RIGHT_HAND or not facing_pages:
        left, right = inside, outside
    else:
        left, right = outside, inside
    return PageMargins(left=left, right=right, top=margins.top, bottom=margins.bottom)


def compute_usable_area(page_width: float, page_height: float, margins: PageMargins) -> UsableArea:
    return UsableArea(
        width=page_width - (margins.left + margins.right),
        height=page_height - (margins.top + margins.bottom),
    )


def compute_page_metrics(
    page_width: float,
    page_height: float,
    margins: DocumentMargins,
    side: PageSide,
    facing_pages: bool = True,
) -> PageMetrics:
    """Metrics for a single page. Left and right pages differ, so compute per page."""
    page_margins = compute_margins(margins, side, facing_pages)
    return PageMetrics(
        width=page_width,
        height=page_height,
        side=side,
        margins=page_margins,
        usable=compute_usable_area(page_width, page_height, page_margins),
    )


def profile_metrics(profile: DocumentProfile, side: PageSide) -> PageMetrics:
    return compute_page_metrics(profile.page_width, profile.page_height, profile.margins, side, profile.facing_pages)


def content_box(metrics: PageMetrics, page_left: float = 0) -> Box:
    """The area inside the margins, offset by the page's left edge on the spread."""
    x1 = page_left + metrics.margins.left
    y1 = metrics.margins.top
    return Box(x1=x1, y1=y1, x2=x1 + metrics.usable.width, y2=y1 + metrics.usable.height)


def cell_box(cell_width: float, cell_height: float, origin_x: float, origin_y: float, row: int, column: int) -> Box:
    return Box(
        x1=origin_x + column * cell_width,
        y1=origin_y + row * cell_height,
        x2=origin_x + (column + 1) * cell_width,
        y2=origin_y + (row + 1) * cell_height,
    )


def inset_box(box: Box, inset: float) -> Box:
    return Box(x1=box.x1 + inset, y1=box.y1 + inset, x2=box.x2 - inset, y2=box.y2 - inset)


def section_height(metrics: PageMetrics, num_sections: int, header_footer_space: float = 0) -> float:
    """Height of each of ``num_sections`` equal stacked sections (e.g. 4 days per weekly page)."""
    return (metrics.usable.height - header_footer_space) / num_sections


def month_grid_geometry(bounds: Box, grid: CalendarMonth) -> Tuple[float, float]:
    """(cell width, cell height) for a 7 column month grid filling ``bounds``."""
    return bounds.width / 7, bounds.height / grid.rows


def spread_column(column: int) -> Tuple[PageSide, int]:
    """Maps a month grid column onto a spread: (page side, column on that page)."""
    if not 0 <= column <= 6:
        raise ValueError(f"Grid column must be 0-6, got {column}")
    if column < LEFT_PAGE_COLUMNS:
        return PageSide.LEFT_HAND, column
    return PageSide.RIGHT_HAND, column - LEFT_PAGE_COLUMNS


def tab_height(page_height: float, tab_margin: float, count: int = MONTHS_PER_YEAR) -> float:
    return (page_height - 2 * tab_margin) / count


def tab_positions(page_height: float, tab_margin: float, height: float, count: int = MONTHS_PER_YEAR) -> List[float]:
    """Top edges of ``count`` tabs spread evenly between the top and bottom tab margins."""
    available = page_height - 2 * tab_margin
    spacing = (available - count * height) / (count - 1) if count > 1 else 0
    return [tab_margin + i * (height + spacing) for i in range(count)]


def tab_box(side: PageSide, page_left: float, page_right: float, top: float, height: float, width: float) -> Box:
    """Tab rectangle sticking out past the trim edge: right of right-hand pages, left of left-hand pages."""
    if side == PageSide.RIGHT_HAND:
        return Box(x1=page_right, y1=top, x2=page_right + width, y2=top + height)
    return Box(x1=page_left - width, y1=top, x2=page_left, y2=top + height)


def ruled_line_positions(
    content_top: float,
    content_bottom: float,
    header_height: float = 24,
    header_gap: float = 36,
    spacing: float = 0.28 * POINTS_PER_INCH,
) -> List[float]:
    """Y positions of the writing lines on a notes page, below its header."""
    start = content_top + header_height + header_gap
    count = int((content_bottom - start) // spacing)
    return [start + i * spacing for i in range(max(count, 0))]


def qr_box(metrics: PageMetrics, page_left: float = 0, size: float = 30, padding: float = 3) -> Tuple[Box, Box]:
    """
    (QR code box, padded boundary box) centred horizontally in the content
    area with its top on the bottom margin.
    """
    x = page_left + metrics.margins.left + metrics.usable.width * 0.5 - size / 2
    y = metrics.height - metrics.margins.bottom
    code = Box(x1=x, y1=y, x2=x + size, y2=y + size)
    return code, inset_box(code, -padding)
