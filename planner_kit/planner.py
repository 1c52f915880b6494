import datetime
import logging
from pathlib import Path
from typing import List, Optional

from .colors import tab_colors
from .dates import (
    MONTH_NAMES,
    add_months,
    add_years,
    describe_week,
    first_day_of_month,
    first_weekday_on_or_after,
    last_day_of_month,
)
from .exceptions import PlannerError
from .layout import page_side_for_index, profile_metrics, qr_box, tab_box, tab_height, tab_positions
from .models import (
    DocumentProfile,
    PageSide,
    PlannedPage,
    PlannedSpread,
    PlannerPreferences,
    TabPlacement,
    TabPreferences,
)
from .qrcodes import encode_qr_payload, qr_file_name, write_qr_svg

logger = logging.getLogger(__name__)

# Index 0 is the cover; content starts on the first left-hand page
FIRST_CONTENT_PAGE = 1
LEFT_PAGE_DAYS = 4  # Mon-Thu left, Fri-Sun right
MONDAY, SUNDAY = 0, 6


class PlannerGenerator:
    def __init__(self, profile: DocumentProfile, preferences: Optional[PlannerPreferences] = None):
        self.profile = profile
        self.preferences = preferences or PlannerPreferences()

    @classmethod
    def from_config(cls, profile_name: str = "letter", preferences_path: Optional[Path] = None, **overrides):
        from .utils import get_profile, load_preferences
        profile = get_profile(profile_name)
        preferences = load_preferences(preferences_path, **overrides) if preferences_path else load_preferences(**overrides)
        return cls(profile, preferences)

    @property
    def start_date(self) -> datetime.date:
        return self.preferences.start_date or first_day_of_month(datetime.date.today())

    @property
    def end_date(self) -> datetime.date:
        """Planning stops one year after the start date."""
        return add_years(self.start_date, 1)

    def plan(self) -> List[PlannedSpread]:
        """
        Sequences the year: for each month a month spread (unless disabled),
        then one week spread for every week that starts inside that month.
        """
        if not self.profile.facing_pages:
            raise PlannerError(f"Profile '{self.profile.description}' must use facing pages to hold spreads")

        end = self.end_date
        week_anchor = MONDAY if self.preferences.week_starts_monday else SUNDAY
        month_start = first_day_of_month(self.start_date)
        page_index = FIRST_CONTENT_PAGE
        spreads = []

        while month_start < end:
            if self.preferences.include_monthly:
                spreads.append(self._month_spread(month_start, page_index))
                page_index += 2

            week_start = first_weekday_on_or_after(month_start, week_anchor)
            while week_start.month == month_start.month and week_start < end:
                spreads.append(self._week_spread(week_start, page_index))
                page_index += 2
                week_start += datetime.timedelta(days=7)

            month_start = add_months(month_start, 1)

        logger.info("Planned %d spreads from %s to %s", len(spreads), self.start_date, end)
        return spreads

    def _page(self, index, expected_side, role, start, end, week_number=None, qr=False) -> PlannedPage:
        side = page_side_for_index(index, self.profile.facing_pages)
        if side != expected_side:
            logger.warning("Expected %s page at index %d but got %s", expected_side.value, index, side.value)
        metrics = profile_metrics(self.profile, side)
        payload = box = None
        if qr:
            payload = encode_qr_payload(self.preferences.template_code, role, start)
            box, _ = qr_box(metrics, size=self.preferences.qr_size, padding=self.preferences.qr_padding)
        return PlannedPage(
            index=index,
            side=side,
            role=role,
            start_date=start,
            end_date=end,
            week_number=week_number,
            metrics=metrics,
            qr_payload=payload,
            qr_box=box,
        )

    def _month_spread(self, month_start: datetime.date, index: int) -> PlannedSpread:
        month_end = last_day_of_month(month_start)
        return PlannedSpread(
            kind="month",
            left=self._page(index, PageSide.LEFT_HAND, "LEFT_MONTH", month_start, month_end),
            right=self._page(index + 1, PageSide.RIGHT_HAND, "RIGHT_MONTH", month_start, month_end),
        )

    def _week_spread(self, week_start: datetime.date, index: int) -> PlannedSpread:
        week = describe_week(week_start, self.preferences.week_starts_monday)
        left_days, right_days = week.days[:LEFT_PAGE_DAYS], week.days[LEFT_PAGE_DAYS:]
        return PlannedSpread(
            kind="week",
            left=self._page(index, PageSide.LEFT_HAND, "LEFT_WEEKDAY",
                            left_days[0], left_days[-1], week.week_number, qr=True),
            right=self._page(index + 1, PageSide.RIGHT_HAND, "RIGHT_WEEKEND",
                             right_days[0], right_days[-1], week.week_number, qr=True),
        )

    def generate(self, output_path: str = "output", write_qr: bool = True) -> Path:
        """Writes the page plan outline and, optionally, one QR SVG per week page."""
        from .renderer import PlanRenderer
        spreads = self.plan()
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        prefs = self.preferences
        if write_qr:
            for spread in spreads:
                for page in (spread.left, spread.right):
                    if page.qr_payload:
                        write_qr_svg(
                            page.qr_payload,
                            output_dir / "qr" / qr_file_name(page.role, page.start_date),
                            version=prefs.qr_version or None,
                            error_correction=prefs.qr_error_correction,
                        )

        outline = PlanRenderer().render("plan.txt.j2", {
            "profile": self.profile,
            "preferences": prefs,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "spreads": spreads,
        })
        plan_file = output_dir / f"planner_{self.start_date:%Y%m%d}.txt"
        with open(plan_file, "w", encoding="utf-8") as f:
            f.write(outline)
        logger.info("Wrote planner outline to %s", plan_file)
        return plan_file


def plan_tabs(profile: DocumentProfile, prefs: Optional[TabPreferences] = None) -> List[TabPlacement]:
    """Monthly index tabs: front tab on the right-hand page, back tab on the left-hand page."""
    prefs = prefs or TabPreferences()
    height = tab_height(profile.page_height, prefs.tab_margin)
    tops = tab_positions(profile.page_height, prefs.tab_margin, height)
    colors = tab_colors(prefs.start_color, prefs.end_color, prefs.middle_color, prefs.three_color_mode)

    placements = []
    for month, (top, color) in enumerate(zip(tops, colors)):
        placements.append(TabPlacement(
            month=month,
            label=MONTH_NAMES[month],
            color=color,
            corner_radius=prefs.corner_radius,
            front=tab_box(PageSide.RIGHT_HAND, 0, profile.page_width, top, height, prefs.tab_width),
            back=tab_box(PageSide.LEFT_HAND, 0, profile.page_width, top, height, prefs.tab_width),
        ))
    return placements
