"""
QR codes printed on planner pages.

The payload is 11 digits with no delimiters:

    template code (2) + page type digit (1) + date YYYYMMDD (8)

e.g. ``01020240108`` is template 01, a left page, starting 2024-01-08. A scanner
splits it back up at fixed offsets.
"""

import datetime
import io
import logging
from pathlib import Path
from typing import Optional

import qrcode
import qrcode.image.svg
from qrcode.exceptions import DataOverflowError

from .dates import format_date_digits
from .exceptions import QRCapacityError
from .models import QRPayload

logger = logging.getLogger(__name__)

PAYLOAD_LENGTH = 11
LEFT_PAGE_MARKER = "LEFT"

ERROR_CORRECTION = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


def page_role_digit(page_role: str) -> str:
    """'0' for left-hand roles (LEFT_WEEKDAY, LEFT_MONTH), '1' for everything else."""
    return "0" if LEFT_PAGE_MARKER in page_role else "1"


def encode_qr_payload(template_code: str, page_role: str, date: datetime.date) -> str:
    payload = QRPayload(
        template_code=template_code,
        page_type_digit=page_role_digit(page_role),
        date_digits=format_date_digits(date),
    )
    return str(payload)


def decode_qr_payload(text: str) -> QRPayload:
    """Splits a scanned payload at offsets 2, 1 and 8."""
    if len(text) != PAYLOAD_LENGTH or not text.isdigit():
        raise ValueError(f"QR payload must be {PAYLOAD_LENGTH} digits, got '{text}'")
    return QRPayload(template_code=text[:2], page_type_digit=text[2:3], date_digits=text[3:11])


def qr_file_name(page_role: str, date: datetime.date) -> str:
    return f"planner_qr_{page_role}_{format_date_digits(date)}.svg"


def _build_symbol(payload: str, version: Optional[int], error_correction: str, border: int, box_size: int) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        version=version,
        error_correction=ERROR_CORRECTION[error_correction],
        box_size=box_size,
        border=border,
        image_factory=qrcode.image.svg.SvgPathImage,
    )
    qr.add_data(payload)
    try:
        # A fixed version must not grow to fit
        qr.make(fit=version is None)
    except DataOverflowError as e:
        raise QRCapacityError(payload, version) from e
    return qr


def make_qr_svg(
    payload: str,
    version: Optional[int] = 1,
    error_correction: str = "L",
    border: int = 1,
    box_size: int = 3,
) -> str:
    """
    Renders ``payload`` as a scalable SVG document.

    A payload too large for the requested fixed ``version`` is generated again
    with an auto-sized version.
    """
    try:
        qr = _build_symbol(payload, version, error_correction, border, box_size)
    except QRCapacityError as e:
        logger.warning("%s, falling back to auto-sizing", e)
        qr = _build_symbol(payload, None, error_correction, border, box_size)

    buffer = io.BytesIO()
    qr.make_image().save(buffer)
    return buffer.getvalue().decode("utf-8")


def write_qr_svg(payload: str, path: Path, **options) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(make_qr_svg(payload, **options))
    logger.debug("Wrote QR code %s to %s", payload, path)
    return path
