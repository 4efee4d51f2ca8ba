"""Pure rendering functions: analysis results -> HTML strings.

All renderers follow the same pattern:
  - Input: dataclasses from analysis/ or observations from the store
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - correlations: build_correlation_chart_html, build_insights_html
  - categories: build_category_comparison_html
  - scatter: build_scatter_html
  - dataset_table: build_dataset_table_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that prepares rows
   and calls ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
3. Wire into ``flows/build.py`` and add a ``{{ ... }}`` slot in
   ``templates/base.html.j2``.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

import jinja2

if TYPE_CHECKING:
    from collections.abc import Iterable

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


def round_up_nice(value: float) -> float:
    """Round a positive value up to a 'nice' axis maximum (1, 2, 2.5 or 5 × 10^k)."""
    if value <= 0:
        return 1.0
    magnitude = 10.0 ** math.floor(math.log10(value))
    for step in (1.0, 2.0, 2.5, 5.0, 10.0):
        if step * magnitude >= value:
            return step * magnitude
    return 10.0 * magnitude


def axis_range(values: Iterable[float], headroom: float = 1.0) -> tuple[float, float]:
    """Axis (low, high) spanning every value and zero, both ends rounded outwards.

    ``low`` is 0 unless some value is negative. ``high`` is always positive,
    so the span is never empty.
    """
    values = list(values)
    high = round_up_nice(max(values, default=0.0) * headroom)
    lowest = min(values, default=0.0)
    low = -round_up_nice(-lowest * headroom) if lowest < 0 else 0.0
    return low, high
