"""
PDF report generation and reusable chart rendering for the
graduate-degree ROI calculator.

Provides:
  - Four-page PDF report (generate_pdf)
  - Individual chart renderers (salary paths, breakdown, sensitivity)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.ticker import FuncFormatter
import numpy as np

import config as cfg
from roi import (
    InputRecord,
    ReturnResult,
    SweepResult,
    sensitivity_sweep,
    yearly_paths,
)

log = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════
# Style constants
# ═══════════════════════════════════════════════════════════════════

BG = "#0a101f"
CARD = "#131b2e"
TEXT = "#f1f5f9"
TEXT2 = "#cbd5e1"
TEAL = "#00BFA6"
INDIGO = "#818cf8"
EMERALD = "#34d399"
AMBER = "#fbbf24"
RED = "#f87171"
SLATE = "#94a3b8"
BORDER = "#1e293b"

A4W, A4H = 8.27, 11.69


# ═══════════════════════════════════════════════════════════════════
# Axis formatters
# ═══════════════════════════════════════════════════════════════════

def _usd_fmt(x, _):
    sign = "-" if x < 0 else ""
    x = abs(x)
    if x >= 1e6:
        return f"{sign}${x / 1e6:.1f}M"
    if x >= 1e3:
        return f"{sign}${x / 1e3:.0f}k"
    return f"{sign}${x:.0f}"


def _pct_fmt(x, _):
    return f"{x:.0f}%"


USD_FMT = FuncFormatter(_usd_fmt)
PCT_FMT = FuncFormatter(_pct_fmt)


# ═══════════════════════════════════════════════════════════════════
# Style helpers
# ═══════════════════════════════════════════════════════════════════

def _style(fig, *axes):
    """Apply dark theme to figure and all axes."""
    fig.patch.set_facecolor(BG)
    for ax in axes:
        ax.set_facecolor(CARD)
        ax.tick_params(colors=TEXT, labelsize=8)
        ax.xaxis.label.set_color(TEXT)
        ax.yaxis.label.set_color(TEXT)
        ax.title.set_color(TEXT)
        for spine in ax.spines.values():
            spine.set_color(BORDER)
        ax.grid(True, alpha=0.15, color=SLATE)


def _legend(ax, loc="upper left"):
    ax.legend(loc=loc, fontsize=8, facecolor=CARD, edgecolor=BORDER, labelcolor=TEXT)


# ═══════════════════════════════════════════════════════════════════
# Page 1: Summary (text only, dark background)
# ═══════════════════════════════════════════════════════════════════

def _page1_summary(inputs: InputRecord, res: ReturnResult, d: Dict,
                   verdict_text: str) -> plt.Figure:
    fig = plt.figure(figsize=(A4W, A4H))
    fig.patch.set_facecolor(BG)

    fig.text(0.50, 0.93, "Graduate Degree: Return on Investment",
             ha="center", fontsize=18, color=TEXT, fontweight="bold")
    fig.text(0.50, 0.91, f"{cfg.HORIZON_YEARS}-Year Projection Report",
             ha="center", fontsize=11, color=TEXT2)

    y = 0.86
    fig.text(0.08, y, "Your Parameters", fontsize=13, color=TEXT, fontweight="bold")
    y -= 0.028
    params = [
        f"Salary: ${inputs.pre_degree_salary:,.0f} before  |  "
        f"${inputs.post_degree_salary:,.0f} after  |  "
        f"Bonus: ${inputs.signing_bonus:,.0f}",
        f"Out-of-pocket: ${inputs.tuition_and_expenses:,.0f}  |  "
        f"Loan: ${inputs.loan_amount:,.0f} at {inputs.interest_rate:.1f}% "
        f"over {inputs.loan_term:g} yrs  |  Away: {inputs.program_length:g} mo",
        f"Wage growth: {inputs.pre_degree_wage_growth:.1f}% before, "
        f"{inputs.post_degree_wage_growth:.1f}% after  |  "
        f"Inflation: {inputs.inflation:.1f}%",
    ]
    for p in params:
        fig.text(0.10, y, p, fontsize=9, color=TEXT2, parse_math=False)
        y -= 0.024

    y -= 0.025
    fig.text(0.08, y, "The Investment", fontsize=13, color=INDIGO, fontweight="bold")
    y -= 0.028
    for line in [
        f"Tuition & expenses: ${res.tuition_expenses:,.0f}",
        f"Loan interest: ${res.loan_interest:,.0f}",
        f"Net forgone income: ${res.forgone_income:,.0f}",
        f"Total investment: ${res.total_cost:,.0f}",
    ]:
        fig.text(0.10, y, line, fontsize=9.5, color=TEXT2, parse_math=False)
        y -= 0.024

    y -= 0.025
    fig.text(0.08, y, "The Return", fontsize=13, color=EMERALD, fontweight="bold")
    y -= 0.028
    for line in [
        f"{cfg.HORIZON_YEARS}-yr salary advantage: ${res.salary_edge:,.0f}",
        f"Signing bonus (compounded): ${res.bonus_compounded:,.0f}",
        f"Total {cfg.HORIZON_YEARS}-yr return: ${res.total_return:,.0f}",
    ]:
        fig.text(0.10, y, line, fontsize=9.5, color=TEXT2, parse_math=False)
        y -= 0.024

    y -= 0.03
    fig.text(0.08, y, "The Verdict", fontsize=13, color=TEXT, fontweight="bold")
    y -= 0.03
    verdict_color = EMERALD if d["worth_it"] else RED
    fig.text(0.10, y,
             f"Annualized ROI {res.annualized_roi:.1f}%, "
             f"net ${res.net_roi:,.0f} over {cfg.HORIZON_YEARS} years",
             fontsize=12, color=verdict_color, fontweight="bold", parse_math=False)
    y -= 0.03

    words = verdict_text.split()
    line = ""
    for word in words:
        if len(line) + len(word) + 1 <= 85:
            line = f"{line} {word}" if line else word
        else:
            fig.text(0.10, y, line, fontsize=9, color=TEXT2, parse_math=False)
            y -= 0.022
            line = word
    if line:
        fig.text(0.10, y, line, fontsize=9, color=TEXT2, parse_math=False)

    fig.text(0.50, 0.03,
             "Salary growth rates, inflation and investment returns are assumed "
             "constant. For illustrative purposes only.",
             ha="center", fontsize=8, color=SLATE, style="italic")
    return fig


# ═══════════════════════════════════════════════════════════════════
# Page 2: Salary trajectories
# ═══════════════════════════════════════════════════════════════════

def chart_salary_paths(inputs: InputRecord, figsize=(A4W, A4H * 0.6)) -> plt.Figure:
    paths = yearly_paths(inputs)

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=figsize, constrained_layout=True)
    _style(fig, ax1, ax2)

    ax1.plot(paths.years, paths.post_salary, color=TEAL, linewidth=2.2,
             marker="o", markersize=4, label="With degree")
    ax1.plot(paths.years, paths.pre_salary, color=SLATE, linewidth=2.0,
             linestyle="--", marker="o", markersize=4, label="Without degree")
    ax1.fill_between(paths.years, paths.pre_salary, paths.post_salary,
                     where=paths.post_salary >= paths.pre_salary,
                     color=TEAL, alpha=0.15, interpolate=True)
    ax1.fill_between(paths.years, paths.pre_salary, paths.post_salary,
                     where=paths.post_salary < paths.pre_salary,
                     color=RED, alpha=0.15, interpolate=True)
    ax1.yaxis.set_major_formatter(USD_FMT)
    ax1.set_xlabel("Year after graduation", fontsize=9)
    ax1.set_ylabel("Real annual salary", fontsize=9)
    ax1.set_title("Salary With and Without the Degree", fontsize=11, fontweight="bold")
    _legend(ax1)

    colors = [TEAL if v >= 0 else RED for v in paths.edge]
    ax2.bar(paths.years, paths.edge, color=colors, alpha=0.8, label="Yearly advantage")
    ax2.plot(paths.years, paths.cumulative_edge, color=AMBER, linewidth=2.0,
             marker="o", markersize=4, label="Cumulative advantage")
    ax2.axhline(0, color=TEXT, linewidth=0.8, alpha=0.5)
    ax2.yaxis.set_major_formatter(USD_FMT)
    ax2.set_xlabel("Year after graduation", fontsize=9)
    ax2.set_title("Salary Advantage", fontsize=11, fontweight="bold")
    _legend(ax2)
    return fig


# ═══════════════════════════════════════════════════════════════════
# Page 3: Cost vs return breakdown
# ═══════════════════════════════════════════════════════════════════

def chart_breakdown(res: ReturnResult, figsize=(A4W, A4H * 0.45)) -> plt.Figure:
    fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    _style(fig, ax)

    cost_parts = [
        ("Tuition & expenses", res.tuition_expenses, INDIGO),
        ("Loan interest", res.loan_interest, RED),
        ("Forgone income", res.forgone_income, AMBER),
    ]
    return_parts = [
        ("Salary advantage", res.salary_edge, TEAL),
        ("Bonus (compounded)", res.bonus_compounded, EMERALD),
    ]

    for x, parts in ((0, cost_parts), (1, return_parts)):
        bottom = 0.0
        for label, value, color in parts:
            ax.bar(x, value, bottom=bottom, color=color, width=0.55, label=label)
            if abs(value) > 0:
                ax.text(x, bottom + value / 2, f"${value:,.0f}",
                        ha="center", va="center", fontsize=8, color=BG,
                        fontweight="bold")
            bottom += value

    ax.set_xticks([0, 1])
    ax.set_xticklabels(["Total investment", f"Total {cfg.HORIZON_YEARS}-yr return"])
    ax.yaxis.set_major_formatter(USD_FMT)
    ax.set_title(f"Net value created: ${res.net_roi:,.0f}",
                 fontsize=11, fontweight="bold")
    _legend(ax, loc="upper left")
    return fig


# ═══════════════════════════════════════════════════════════════════
# Page 4: Sensitivity
# ═══════════════════════════════════════════════════════════════════

def chart_sensitivity(inputs: InputRecord, sweeps: List[SweepResult],
                      figsize=(A4W, A4H)) -> plt.Figure:
    n = len(sweeps)
    n_rows = max(1, (n + 1) // 2)
    fig, axes = plt.subplots(n_rows, 2, figsize=figsize, constrained_layout=True,
                             squeeze=False)
    flat = list(axes.flat)
    _style(fig, *flat)

    for ax, sw in zip(flat, sweeps):
        ax.plot(sw.values, sw.annualized_roi, color=TEAL, linewidth=2.0)
        ax.axhline(0, color=TEXT, linewidth=0.8, linestyle="--", alpha=0.5)
        user_x = getattr(inputs, sw.field)
        user_y = float(np.interp(user_x, sw.values, sw.annualized_roi))
        ax.plot(user_x, user_y, marker="*", markersize=13, color=AMBER,
                markeredgecolor="white", markeredgewidth=0.5, zorder=10)
        ax.annotate("You", (user_x, user_y), textcoords="offset points",
                    xytext=(6, 6), fontsize=7, color=AMBER, fontweight="bold")
        ax.set_title(cfg.LABELS[sw.field]["title"], fontsize=9, fontweight="bold")
        ax.yaxis.set_major_formatter(PCT_FMT)
        if cfg.SLIDER_CONFIG[sw.field]["format"] == "currency":
            ax.xaxis.set_major_formatter(USD_FMT)
        ax.tick_params(labelsize=7)

    for ax in flat[n:]:
        ax.axis("off")

    fig.suptitle("Annualized ROI Across Each Slider's Range",
                 fontsize=13, color=TEXT, fontweight="bold")
    return fig


# ═══════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════

def generate_pdf(
    inputs: InputRecord,
    res: ReturnResult,
    d: Dict[str, Any],
    verdict_text: str,
    path: str = "roi_report.pdf",
    sweeps: Optional[List[SweepResult]] = None,
) -> str:
    """Generate the full PDF report. Returns the file path."""
    if sweeps is None:
        sweeps = [sensitivity_sweep(inputs, field) for field in cfg.SWEEP_FIELDS]

    pages = [
        _page1_summary(inputs, res, d, verdict_text),
        chart_salary_paths(inputs),
        chart_breakdown(res),
        chart_sensitivity(inputs, sweeps),
    ]

    try:
        with PdfPages(path) as pdf:
            for fig in pages:
                pdf.savefig(fig, facecolor=fig.get_facecolor())
    finally:
        for fig in pages:
            plt.close(fig)
    log.info("wrote %d-page report to %s", len(pages), path)
    return path
