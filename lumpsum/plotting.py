"""
Plotting utilities for LumpSum projections.

Purpose
-------
Visualizes a `CalculationResults`:
- plot_growth: yearly growth trajectory of both invested assets
- plot_final_values: bar comparison of the two final portfolio values
- plot_comparison: both panels side by side

All functions share the same keyword conventions: `figsize`, `title`,
`save_path` (PNG written with bbox_inches='tight') and `return_fig_ax`
(return the figure and axes for further customization). matplotlib is
imported lazily so the engine stays importable without a display backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from .comparison import compare, yearly_points
from .constants import (
    DEFAULT_DPI,
    DEFAULT_FIGSIZE,
    DEFAULT_FIGSIZE_WIDE,
    DEFAULT_LINEWIDTH_THICK,
    INVEST_COLOR,
    INVEST_LABEL,
    PAY_DOWN_COLOR,
    PAY_DOWN_LABEL,
    STRATEGY_LABELS,
)
from .utils import format_currency, format_years, thousands_formatter

if TYPE_CHECKING:
    from .engine import CalculationResults

__all__ = ["plot_growth", "plot_final_values", "plot_comparison"]


# ---------------------------------------------------------------------------
# Panels
# ---------------------------------------------------------------------------

def _draw_growth(ax, results: CalculationResults) -> None:
    from matplotlib.ticker import FuncFormatter

    points = yearly_points(results.time_series)
    if not points:
        raise ValueError(
            "results have no time series; project with include_series=True to plot growth"
        )
    years = np.array([p.year for p in points])
    ax.plot(
        years,
        [p.lump_sum_value for p in points],
        color=INVEST_COLOR,
        linewidth=DEFAULT_LINEWIDTH_THICK,
        label=INVEST_LABEL,
    )
    ax.plot(
        years,
        [p.monthly_savings_value for p in points],
        color=PAY_DOWN_COLOR,
        linewidth=DEFAULT_LINEWIDTH_THICK,
        label=PAY_DOWN_LABEL,
    )
    ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Portfolio Value", fontsize=11)
    ax.set_title("Portfolio Growth Over Time", fontsize=12, fontweight='bold')
    ax.legend(loc='upper left', fontsize=10)
    ax.grid(True, alpha=0.3)


def _draw_final_values(ax, results: CalculationResults) -> None:
    from matplotlib.ticker import FuncFormatter

    values = [
        results.invest_lump_sum.final_portfolio_value,
        results.pay_down_mortgage.final_portfolio_value,
    ]
    x_pos = np.arange(2)
    bars = ax.bar(
        x_pos,
        values,
        0.6,
        color=[INVEST_COLOR, PAY_DOWN_COLOR],
        edgecolor='white',
        linewidth=1.5,
    )
    winner = compare(results).winner
    for bar, label in zip(bars, STRATEGY_LABELS):
        if label == winner:
            bar.set_edgecolor('black')
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            bar.get_height(),
            format_currency(bar.get_height()),
            ha='center',
            va='bottom',
            fontsize=9,
            fontweight='bold',
        )
    ax.set_xticks(x_pos)
    ax.set_xticklabels(STRATEGY_LABELS, fontsize=10)
    ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    ax.set_ylabel("Final Portfolio Value", fontsize=11)
    ax.set_title("Portfolio Value Comparison", fontsize=12, fontweight='bold')
    ax.grid(True, alpha=0.3, axis='y')


def _finish(fig, title: Optional[str], save_path: Optional[str]) -> None:
    if title:
        fig.suptitle(title, fontsize=14, fontweight='bold')
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches='tight', dpi=DEFAULT_DPI)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_growth(
    results: CalculationResults,
    *,
    figsize: Optional[tuple] = None,
    title: Optional[str] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Plot the yearly growth trajectory of both strategies.

    Parameters
    ----------
    results : CalculationResults
        Projection output with a non-empty time series.
    figsize : tuple, optional
        Figure size; defaults to DEFAULT_FIGSIZE.
    title : str, optional
        Figure title.
    save_path : str, optional
        If given, the figure is written there.
    return_fig_ax : bool, default False
        If True, returns (fig, ax).

    Raises
    ------
    ValueError
        If the results carry no time series.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize or DEFAULT_FIGSIZE)
    _draw_growth(ax, results)
    _finish(fig, title, save_path)

    if return_fig_ax:
        return fig, ax


def plot_final_values(
    results: CalculationResults,
    *,
    figsize: Optional[tuple] = None,
    title: Optional[str] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Bar comparison of the two final portfolio values.

    The winning strategy's bar is outlined in black and each bar is
    annotated with its value.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize or DEFAULT_FIGSIZE)
    _draw_final_values(ax, results)
    _finish(fig, title, save_path)

    if return_fig_ax:
        return fig, ax


def plot_comparison(
    results: CalculationResults,
    *,
    figsize: Optional[tuple] = None,
    title: Optional[str] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Two-panel summary: growth trajectory (left) and final values (right).

    When the results have no time series only the bar panel is drawn in a
    single-axes figure.
    """
    import matplotlib.pyplot as plt

    if title is None:
        years = format_years(results.inputs.remaining_years)
        title = f"{compare(results).winner} wins after {years} years"

    if not results.time_series:
        fig, ax = plt.subplots(figsize=figsize or DEFAULT_FIGSIZE)
        _draw_final_values(ax, results)
        _finish(fig, title, save_path)
        if return_fig_ax:
            return fig, ax
        return None

    fig, axes = plt.subplots(1, 2, figsize=figsize or DEFAULT_FIGSIZE_WIDE)
    _draw_growth(axes[0], results)
    _draw_final_values(axes[1], results)
    _finish(fig, title, save_path)

    if return_fig_ax:
        return fig, axes
