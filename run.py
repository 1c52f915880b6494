import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from planner_kit.dates import describe_week, format_week_range
from planner_kit.grid import compute_month_grid, enumerate_cells, weekday_headers
from planner_kit.layout import profile_metrics
from planner_kit.models import PageSide
from planner_kit.utils import CONFIG_DIR

app = typer.Typer()


def _config(ctx: typer.Context, name: str) -> Path:
    return ctx.obj["config_dir"] / name


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path = typer.Option(CONFIG_DIR, help="Directory holding document_profiles.yaml and preferences.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    """
    Planner calendar and layout tools.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"config_dir": config_dir}


@app.command()
def month(
    ctx: typer.Context,
    year: int = typer.Argument(..., help="Year"),
    month: int = typer.Argument(..., help="Month, 1-12; values outside roll over into the next/previous year"),
    monday: bool = typer.Option(False, help="Start weeks on Monday"),
    svg: Path = typer.Option(None, help="Also write an SVG preview of the grid to this file"),
):
    """Print the calendar grid of a month, padding days in brackets."""
    week_start = 1 if monday else 0
    grid = compute_month_grid(year, month - 1, week_start)
    try:
        cells = enumerate_cells(grid)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{grid.first_day:%B %Y}: {grid.rows} rows, {grid.leading_days} leading, {grid.trailing_days} trailing")
    typer.echo(" ".join(f"{label:>4}" for label in weekday_headers(week_start, "short")))

    row = []
    for cell in cells:
        row.append(f"{cell.date.day:>4}" if cell.is_current_month else f"[{cell.date.day:>2}]")
        if cell.column == 6:
            typer.echo(" ".join(row))
            row = []

    if svg:
        from planner_kit.renderer import render_month_svg
        from planner_kit.utils import load_preferences
        try:
            prefs = load_preferences(_config(ctx, "preferences.yaml"))
            svg.write_text(render_month_svg(grid.year, grid.month, week_start=week_start, preferences=prefs), encoding="utf-8")
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"SVG written to {svg}")


@app.command()
def week(
    date: datetime = typer.Argument(..., formats=["%Y-%m-%d"], help="Any date in the week"),
    sunday: bool = typer.Option(False, help="Start the week on Sunday"),
):
    """Show the ISO week number and the days of the week containing DATE."""
    descriptor = describe_week(date.date(), start_monday=not sunday)
    typer.echo(f"Week {descriptor.week_number}: {format_week_range(descriptor.start_date, descriptor.end_date)}")
    for day in descriptor.days:
        typer.echo(f"  {day:%a %Y-%m-%d}")


@app.command()
def margins(
    ctx: typer.Context,
    profile: str = typer.Option("letter", help="Document profile (defined in config/document_profiles.yaml)"),
):
    """Show resolved margins and usable area of the left- and right-hand pages."""
    from planner_kit.utils import get_profile
    try:
        doc = get_profile(profile, _config(ctx, "document_profiles.yaml"))
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{doc.description}: {doc.page_width} x {doc.page_height} pt")
    for side in (PageSide.LEFT_HAND, PageSide.RIGHT_HAND):
        m = profile_metrics(doc, side)
        typer.echo(
            f"  {side.value:<10} left={m.margins.left} right={m.margins.right} "
            f"top={m.margins.top} bottom={m.margins.bottom} usable={m.usable.width:g} x {m.usable.height:g}"
        )


@app.command()
def qr(
    date: datetime = typer.Argument(..., formats=["%Y-%m-%d"], help="First day shown on the page"),
    role: str = typer.Option("LEFT_WEEKDAY", help="Page role, e.g. LEFT_WEEKDAY or RIGHT_WEEKEND"),
    template: str = typer.Option("01", help="Two digit template code"),
    svg: Path = typer.Option(None, help="Write the QR symbol to this SVG file"),
):
    """Encode the QR payload of a planner page."""
    from planner_kit.qrcodes import encode_qr_payload, write_qr_svg
    try:
        payload = encode_qr_payload(template, role, date.date())
        typer.echo(payload)
        if svg:
            write_qr_svg(payload, svg)
            typer.echo(f"SVG written to {svg}")
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def decode_qr(payload: str = typer.Argument(..., help="11 digit payload read from a page")):
    """Split a scanned QR payload back into its fields."""
    from planner_kit.qrcodes import decode_qr_payload
    try:
        decoded = decode_qr_payload(payload)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    side = "left" if decoded.page_type_digit == "0" else "right"
    typer.echo(f"template={decoded.template_code} page={side} date={decoded.date.isoformat()}")


@app.command()
def plan(
    ctx: typer.Context,
    profile: str = typer.Option("letter", help="Document profile (defined in config/document_profiles.yaml)"),
    start_date: datetime = typer.Option(None, formats=["%Y-%m-%d"], help="Override start date"),
    monthly: Optional[bool] = typer.Option(None, "--monthly/--no-monthly", help="Include month spreads"),
    qr_codes: bool = typer.Option(True, "--qr/--no-qr", help="Write QR code SVGs"),
    output: str = typer.Option("output", help="Output directory"),
):
    """
    Sequence a year of month and week spreads and write the plan outline.
    """
    from planner_kit.planner import PlannerGenerator
    from planner_kit.utils import get_profile, load_preferences
    try:
        overrides = {
            "start_date": start_date.date() if start_date else None,
            "include_monthly": monthly,
        }
        gen = PlannerGenerator(
            get_profile(profile, _config(ctx, "document_profiles.yaml")),
            load_preferences(_config(ctx, "preferences.yaml"), **overrides),
        )
        plan_file = gen.generate(output_path=output, write_qr=qr_codes)
        typer.echo(f"Plan written to {plan_file}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def tabs(
    ctx: typer.Context,
    profile: str = typer.Option("letter", help="Document profile (defined in config/document_profiles.yaml)"),
):
    """Show monthly index tab positions and colours."""
    from planner_kit.planner import plan_tabs
    from planner_kit.utils import get_profile, load_tab_preferences
    try:
        placements = plan_tabs(
            get_profile(profile, _config(ctx, "document_profiles.yaml")),
            load_tab_preferences(_config(ctx, "preferences.yaml")),
        )
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    for tab in placements:
        cmyk = "/".join(f"{c:g}" for c in tab.color)
        typer.echo(f"{tab.label:<10} top={tab.front.y1:.2f} height={tab.front.height:.2f} radius={tab.corner_radius:g} cmyk={cmyk}")


@app.command()
def verify_config(ctx: typer.Context):
    """Load and validate configuration files."""
    from planner_kit.utils import load_document_profiles, load_preferences
    try:
        p = load_document_profiles(_config(ctx, "document_profiles.yaml"))
        prefs = load_preferences(_config(ctx, "preferences.yaml"))
        typer.echo("✅ Configuration valid!")
        typer.echo(f"Found {len(p.profiles)} document profiles.")
        typer.echo(f"Template code {prefs.template_code}, monthly spreads {'on' if prefs.include_monthly else 'off'}.")
    except Exception as e:
        typer.echo(f"❌ Configuration invalid: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
