"""Calendar and page-layout arithmetic for printed planners."""

from .dates import days_in_week, describe_week, week_number
from .exceptions import PlannerError, QRCapacityError
from .grid import compute_month_grid, enumerate_cells
from .layout import compute_margins, compute_page_metrics, compute_usable_area
from .models import DocumentMargins, PageSide
from .qrcodes import decode_qr_payload, encode_qr_payload

__all__ = [
    "DocumentMargins",
    "PageSide",
    "PlannerError",
    "QRCapacityError",
    "compute_margins",
    "compute_month_grid",
    "compute_page_metrics",
    "compute_usable_area",
    "days_in_week",
    "decode_qr_payload",
    "describe_week",
    "encode_qr_payload",
    "enumerate_cells",
    "week_number",
]
