import datetime
from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional, Literal, Dict

# All lengths are in points (1/72 inch)


class PageSide(str, Enum):
    LEFT_HAND = "left-hand"
    RIGHT_HAND = "right-hand"


class DocumentMargins(BaseModel):
    top: float
    bottom: float
    # Symmetric pair, as most documents report it
    left: Optional[float] = None
    right: Optional[float] = None
    # Binding-aware pair; inside faces the spine
    inside: Optional[float] = None
    outside: Optional[float] = None

    @model_validator(mode="after")
    def _require_horizontal_pair(self):
        if self.has_binding_margins or (self.left is not None and self.right is not None):
            return self
        raise ValueError("margins need either inside/outside or left/right values")

    @property
    def has_binding_margins(self) -> bool:
        return self.inside is not None and self.outside is not None


class PageMargins(BaseModel):
    left: float
    right: float
    top: float
    bottom: float


class UsableArea(BaseModel):
    width: float
    height: float


class PageMetrics(BaseModel):
    width: float
    height: float
    side: PageSide
    margins: PageMargins
    usable: UsableArea


class Box(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def geometric_bounds(self) -> List[float]:
        # [top, left, bottom, right], the order page items are placed with
        return [self.y1, self.x1, self.y2, self.x2]


class CalendarMonth(BaseModel):
    year: int
    month: int = Field(ge=0, le=11)  # 0 = January
    week_start: int = Field(0, ge=0, le=6)  # column 0 weekday, 0 = Sunday
    first_weekday: int  # 0 = Sunday .. 6 = Saturday
    days_in_month: int
    leading_days: int
    trailing_days: int
    rows: Literal[5, 6]

    @property
    def total_cells(self) -> int:
        return self.rows * 7

    @property
    def first_day(self) -> datetime.date:
        return datetime.date(self.year, self.month + 1, 1)


class CalendarCell(BaseModel):
    date: datetime.date
    row: int
    column: int
    is_current_month: bool


class WeekDescriptor(BaseModel):
    start_date: datetime.date
    week_number: int = Field(ge=1, le=53)
    days: List[datetime.date]

    @property
    def end_date(self) -> datetime.date:
        return self.days[-1]


class QRPayload(BaseModel):
    template_code: str = Field(pattern=r"^\d{2}$")
    page_type_digit: str = Field(pattern=r"^\d$")
    date_digits: str = Field(pattern=r"^\d{8}$")

    @property
    def date(self) -> datetime.date:
        return datetime.datetime.strptime(self.date_digits, "%Y%m%d").date()

    def __str__(self) -> str:
        return self.template_code + self.page_type_digit + self.date_digits


class DocumentProfile(BaseModel):
    description: str
    page_width: float
    page_height: float
    margins: DocumentMargins
    facing_pages: bool = True


class DocumentProfiles(BaseModel):
    profiles: Dict[str, DocumentProfile]


class PlannerPreferences(BaseModel):
    start_date: Optional[datetime.date] = None  # None = first of the current month
    include_monthly: bool = True
    week_starts_monday: bool = True
    template_code: str = Field("01", pattern=r"^\d{2}$")
    # Month grid preview: title, weekday headers, day numbers
    title_font: str = "Minion Pro"
    title_font_color: str = "Black"
    content_font: str = "Myriad Pro"
    content_font_color: str = "Black"
    calendar_font: str = "Myriad Pro"
    calendar_font_color: str = "Black"
    header_color_values: List[float] = [20, 40, 60, 0]  # CMYK
    # QR symbol
    qr_size: float = 30
    qr_padding: float = 3
    qr_version: int = Field(1, ge=0, le=40)  # 0 = auto-size
    qr_error_correction: Literal["L", "M", "Q", "H"] = "L"


class TabPreferences(BaseModel):
    start_color: List[float] = [85, 10, 100, 0]
    middle_color: Optional[List[float]] = [50, 70, 80, 0]
    end_color: List[float] = [75, 5, 5, 0]
    three_color_mode: bool = False
    tab_width: float = 72  # 1 inch
    corner_radius: float = 12
    tab_margin: float = 36  # 0.5 inch


PageRole = Literal["LEFT_MONTH", "RIGHT_MONTH", "LEFT_WEEKDAY", "RIGHT_WEEKEND"]


class PlannedPage(BaseModel):
    index: int
    side: PageSide
    role: PageRole
    start_date: datetime.date
    end_date: datetime.date
    week_number: Optional[int] = None
    metrics: PageMetrics
    qr_payload: Optional[str] = None
    qr_box: Optional[Box] = None


class PlannedSpread(BaseModel):
    kind: Literal["month", "week"]
    left: PlannedPage
    right: PlannedPage


class TabPlacement(BaseModel):
    month: int  # 0 = January
    label: str
    color: List[float]
    corner_radius: float
    front: Box  # right-hand page, extends past the trim edge
    back: Box  # left-hand page
