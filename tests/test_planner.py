"""Tests for year sequencing, spread roles and tab placement."""

import datetime

import pytest

from planner_kit.exceptions import PlannerError
from planner_kit.models import DocumentMargins, DocumentProfile, PageSide, PlannerPreferences, TabPreferences
from planner_kit.planner import PlannerGenerator, plan_tabs

D = datetime.date


@pytest.fixture
def spreads_2024(letter_profile, preferences_2024):
    return PlannerGenerator(letter_profile, preferences_2024).plan()


class TestPlan:
    def test_counts(self, spreads_2024):
        assert len(spreads_2024) == 65
        assert sum(1 for s in spreads_2024 if s.kind == "month") == 12
        assert sum(1 for s in spreads_2024 if s.kind == "week") == 53

    def test_page_indices_are_consecutive_from_first_content_page(self, spreads_2024):
        indices = [p.index for s in spreads_2024 for p in (s.left, s.right)]
        assert indices == list(range(1, 131))

    def test_every_spread_is_left_then_right(self, spreads_2024):
        for spread in spreads_2024:
            assert spread.left.side == PageSide.LEFT_HAND
            assert spread.right.side == PageSide.RIGHT_HAND
            assert spread.left.index % 2 == 1

    def test_spread_margins_mirror(self, spreads_2024):
        spread = spreads_2024[0]
        assert spread.left.metrics.margins.right == spread.right.metrics.margins.left == 54

    def test_month_spread_comes_before_its_weeks(self, spreads_2024):
        first, second = spreads_2024[0], spreads_2024[1]
        assert first.kind == "month"
        assert (first.left.role, first.right.role) == ("LEFT_MONTH", "RIGHT_MONTH")
        assert (first.left.start_date, first.left.end_date) == (D(2024, 1, 1), D(2024, 1, 31))
        assert first.left.qr_payload is None
        assert second.kind == "week"

    def test_first_week(self, spreads_2024):
        week = spreads_2024[1]
        assert week.left.week_number == 1
        assert (week.left.start_date, week.left.end_date) == (D(2024, 1, 1), D(2024, 1, 4))
        assert (week.right.start_date, week.right.end_date) == (D(2024, 1, 5), D(2024, 1, 7))
        assert (week.left.role, week.right.role) == ("LEFT_WEEKDAY", "RIGHT_WEEKEND")
        assert week.left.qr_payload == "01020240101"
        assert week.right.qr_payload == "01120240105"

    def test_last_week_is_numbered_in_the_next_year(self, spreads_2024):
        last = spreads_2024[-1]
        assert last.left.start_date == D(2024, 12, 30)
        assert last.left.week_number == 1

    def test_week_numbers_do_not_wrap_at_52(self, spreads_2024):
        numbers = [s.left.week_number for s in spreads_2024 if s.kind == "week"]
        assert numbers[:-1] == list(range(1, 53))

    def test_without_monthly(self, letter_profile):
        prefs = PlannerPreferences(start_date=D(2024, 1, 1), include_monthly=False)
        spreads = PlannerGenerator(letter_profile, prefs).plan()
        assert {s.kind for s in spreads} == {"week"}
        assert len(spreads) == 53

    def test_sunday_start(self, letter_profile):
        prefs = PlannerPreferences(start_date=D(2024, 1, 1), week_starts_monday=False)
        spreads = PlannerGenerator(letter_profile, prefs).plan()
        week = spreads[1]
        assert week.left.start_date == D(2024, 1, 7)
        assert week.left.start_date.weekday() == 6
        assert week.left.week_number == 2

    def test_mid_month_start_runs_one_year(self, letter_profile):
        gen = PlannerGenerator(letter_profile, PlannerPreferences(start_date=D(2024, 3, 15)))
        assert gen.end_date == D(2025, 3, 15)
        spreads = gen.plan()
        months = [s for s in spreads if s.kind == "month"]
        weeks = [s for s in spreads if s.kind == "week"]
        assert len(months) == 13
        assert weeks[0].left.start_date == D(2024, 3, 4)
        assert weeks[-1].left.start_date == D(2025, 3, 10)
        assert all(w.left.start_date < gen.end_date for w in weeks)

    def test_default_start_is_first_of_current_month(self, letter_profile):
        gen = PlannerGenerator(letter_profile)
        assert gen.start_date == datetime.date.today().replace(day=1)

    def test_template_code_is_carried_into_payloads(self, letter_profile):
        prefs = PlannerPreferences(start_date=D(2024, 1, 1), template_code="07")
        week = PlannerGenerator(letter_profile, prefs).plan()[1]
        assert week.left.qr_payload.startswith("070")

    def test_week_pages_carry_qr_boxes(self, spreads_2024):
        month, week = spreads_2024[0], spreads_2024[1]
        assert month.left.qr_box is None
        assert (week.left.qr_box.x1, week.left.qr_box.y1, week.left.qr_box.width) == (282, 738, 30)
        assert week.right.qr_box.x1 == 300

    def test_qr_size_from_preferences(self, letter_profile):
        prefs = PlannerPreferences(start_date=D(2024, 1, 1), qr_size=20, qr_padding=5)
        week = PlannerGenerator(letter_profile, prefs).plan()[1]
        assert week.left.qr_box.x1 == 36 + 261 - 10
        assert week.left.qr_box.width == 20

    def test_non_facing_profile_is_rejected(self):
        profile = DocumentProfile(
            description="flat",
            page_width=612,
            page_height=792,
            margins=DocumentMargins(top=36, bottom=36, left=36, right=36),
            facing_pages=False,
        )
        with pytest.raises(PlannerError, match="facing pages"):
            PlannerGenerator(profile).plan()


class TestGenerate:
    def test_writes_outline(self, letter_profile, preferences_2024, tmp_path):
        plan_file = PlannerGenerator(letter_profile, preferences_2024).generate(str(tmp_path), write_qr=False)
        assert plan_file.name == "planner_20240101.txt"
        text = plan_file.read_text(encoding="utf-8")
        assert "Spreads: 65" in text
        assert "== January 2024 ==" in text
        assert "-- Week 1: January 1 - 7, 2024" in text
        assert "QR 01020240101 at 282,738" in text
        assert not (tmp_path / "qr").exists()

    def test_writes_one_qr_per_week_page(self, letter_profile, tmp_path):
        prefs = PlannerPreferences(start_date=D(2024, 1, 1), include_monthly=False)
        PlannerGenerator(letter_profile, prefs).generate(str(tmp_path))
        files = sorted(p.name for p in (tmp_path / "qr").iterdir())
        assert len(files) == 106
        assert "planner_qr_LEFT_WEEKDAY_20240101.svg" in files
        assert "planner_qr_RIGHT_WEEKEND_20240105.svg" in files


class TestPlanTabs:
    def test_twelve_tabs(self, letter_profile):
        tabs = plan_tabs(letter_profile)
        assert [t.label for t in tabs][:2] == ["January", "February"]
        assert len(tabs) == 12

    def test_geometry(self, letter_profile):
        tabs = plan_tabs(letter_profile)
        first = tabs[0]
        assert first.front.height == 60
        assert (first.front.x1, first.front.x2) == (612, 684)
        assert (first.back.x1, first.back.x2) == (-72, 0)
        assert first.front.y1 == first.back.y1 == 36
        assert tabs[-1].front.y2 == 756

    def test_corner_radius(self, letter_profile):
        assert plan_tabs(letter_profile)[0].corner_radius == 12
        assert plan_tabs(letter_profile, TabPreferences(corner_radius=6))[5].corner_radius == 6

    def test_colors_run_start_to_end(self, letter_profile):
        tabs = plan_tabs(letter_profile, TabPreferences())
        assert tabs[0].color == [85, 10, 100, 0]
        assert tabs[-1].color == [75, 5, 5, 0]
