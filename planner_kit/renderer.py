from jinja2 import Environment, FileSystemLoader, select_autoescape
from pathlib import Path
from typing import Optional, Union

from .colors import cmyk_to_rgb_hex
from .dates import MONTH_NAMES, format_date, format_short_date, format_week_range
from .grid import compute_month_grid, enumerate_cells, weekday_headers
from .layout import cell_box, month_grid_geometry
from .models import Box, PlannerPreferences

TEMPLATE_DIR = Path(__file__).parent / "templates"


class PlanRenderer:
    def __init__(self, template_dir: Union[str, Path] = TEMPLATE_DIR):
        # SVG templates carry CSS braces
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            block_start_string='<%',
            block_end_string='%>',
            variable_start_string='<<',
            variable_end_string='>>',
            comment_start_string='<#',
            comment_end_string='#>',
        )
        self.env.filters["long_date"] = format_date
        self.env.filters["short_date"] = format_short_date
        self.env.filters["week_range"] = format_week_range

    def render(self, template_name: str, context: dict) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)


def render_month_svg(year: int, month: int, width: float = 504, height: float = 432,
                     week_start: int = 0, preferences: Optional[PlannerPreferences] = None) -> str:
    """Month calendar preview as SVG, cells sized the way a month spread grid is."""
    prefs = preferences or PlannerPreferences()
    header_height = 24
    grid = compute_month_grid(year, month, week_start)
    bounds = Box(x1=0, y1=header_height * 2, x2=width, y2=height)
    cell_width, cell_height = month_grid_geometry(bounds, grid)
    cells = [
        (cell, cell_box(cell_width, cell_height, bounds.x1, bounds.y1, cell.row, cell.column))
        for cell in enumerate_cells(grid)
    ]
    return PlanRenderer().render("month.svg.j2", {
        "width": width,
        "height": height,
        "title": f"{MONTH_NAMES[grid.month]} {grid.year}",
        "headers": weekday_headers(week_start, "short"),
        "header_height": header_height,
        "header_fill": cmyk_to_rgb_hex(prefs.header_color_values),
        "cell_width": cell_width,
        "cells": cells,
        "inset": 2,
        "font_size": 9,
        "prefs": prefs,
    })
