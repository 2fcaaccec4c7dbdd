"""
CLI interface and shared display formatting for the
graduate-degree ROI calculator.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional

import config as cfg
from roi import (
    InputRecord,
    ReturnResult,
    SweepResult,
    breakeven_post_salary,
    compute,
    sensitivity_sweep,
)
import report


# ═══════════════════════════════════════════════════════════════════
# Formatting helpers
# ═══════════════════════════════════════════════════════════════════

def fmt(val: float) -> str:
    """Format number as whole dollars: $X,XXX or -$X,XXX."""
    text = f"{abs(val):,.0f}"
    if val < 0 and text != "0":
        return f"-${text}"
    return f"${text}"


def pct(val: float, decimals: int = 1) -> str:
    return f"{val:.{decimals}f}%"


def _num(value: float) -> str:
    """Drop a trailing .0 from whole numbers."""
    return f"{value:g}" if float(value).is_integer() else str(value)


def fmt_value(value: float, format: str) -> str:
    """Format a slider value for its tooltip and median label."""
    if format == "currency":
        return fmt(value)
    if format == "percent":
        return pct(value)
    if format == "years":
        return f"{_num(value)} yr{'' if value == 1 else 's'}"
    if format == "months":
        return f"{_num(value)} mo"
    raise ValueError(f"Unknown display format: {format!r}")


def fmt_min_max(value: float, format: str) -> str:
    """Compact form for the labels at either end of a slider track."""
    if format == "currency":
        if value >= 1000:
            return f"${value / 1000:.0f}K"
        return f"${_num(value)}"
    if format == "percent":
        return f"{_num(value)}%"
    return _num(value)


# ═══════════════════════════════════════════════════════════════════
# Input collection (CLI)
# ═══════════════════════════════════════════════════════════════════

def _strip_currency(s: str) -> str:
    """Remove currency symbols, commas, spaces."""
    return s.replace("$", "").replace(",", "").replace(" ", "")


def _prompt_float(
    label: str,
    default: float,
    min_val: float | None = None,
    max_val: float | None = None,
) -> float:
    while True:
        raw = input(f"  {label} [{default}]: ").strip()
        if not raw:
            return float(default)
        try:
            val = float(_strip_currency(raw).replace("%", ""))
            if min_val is not None and val < min_val:
                print(f"    Must be at least {min_val}")
                continue
            if max_val is not None and val > max_val:
                print(f"    Must be at most {max_val}")
                continue
            return val
        except ValueError:
            print("    Invalid number, try again.")


def collect_inputs() -> InputRecord:
    """Prompt the user for every model input."""
    print("\n  Enter your details (press Enter for defaults):\n")

    values: Dict[str, float] = {}
    for key in cfg.SLIDER_ORDER:
        bounds = cfg.SLIDER_CONFIG[key]
        values[key] = _prompt_float(
            cfg.LABELS[key]["title"], cfg.DEFAULTS[key],
            bounds["min"], bounds["max"],
        )
    for key, bounds in cfg.RATE_BOUNDS.items():
        values[key] = _prompt_float(
            bounds["label"], cfg.DEFAULTS[key], bounds["min"], bounds["max"],
        )

    return InputRecord(**values)


# ═══════════════════════════════════════════════════════════════════
# Shared display-data computation (used by CLI and report)
# ═══════════════════════════════════════════════════════════════════

def compute_display_data(inputs: InputRecord, result: ReturnResult) -> Dict[str, Any]:
    """Extract every metric needed for the output sections."""
    breakeven = breakeven_post_salary(inputs)
    payback_ratio = (
        result.total_return / result.total_cost if result.total_cost > 0 else 0.0
    )
    return {
        "inputs": inputs,
        "result": result,
        "worth_it": result.net_roi > 0,
        "payback_ratio": payback_ratio,
        "breakeven_salary": breakeven,
        "breakeven_gap": (
            inputs.post_degree_salary - breakeven if breakeven is not None else None
        ),
        "horizon": cfg.HORIZON_YEARS,
    }


def generate_verdict_text(d: Dict[str, Any]) -> str:
    """Build a 2-3 sentence plain-English verdict."""
    inputs: InputRecord = d["inputs"]
    res: ReturnResult = d["result"]
    horizon = d["horizon"]

    if d["worth_it"]:
        text = (
            f"Over {horizon} years the degree returns {fmt(res.total_return)} "
            f"on a {fmt(res.total_cost)} investment, netting {fmt(res.net_roi)} "
            f"or {pct(res.annualized_roi)} a year."
        )
    else:
        text = (
            f"Over {horizon} years the degree returns only {fmt(res.total_return)} "
            f"against a {fmt(res.total_cost)} investment, a shortfall of "
            f"{fmt(-res.net_roi)}."
        )

    if d["breakeven_salary"] is not None:
        gap = d["breakeven_gap"]
        if gap >= 0:
            text += (
                f" Your post-degree salary of {fmt(inputs.post_degree_salary)} "
                f"clears the {fmt(d['breakeven_salary'])} break-even by {fmt(gap)}."
            )
        else:
            text += (
                f" You would need a post-degree salary of at least "
                f"{fmt(d['breakeven_salary'])} to break even."
            )
    return text


# ═══════════════════════════════════════════════════════════════════
# Box-drawing CLI output
# ═══════════════════════════════════════════════════════════════════

W = 78  # box width (characters)
H = "═"
V = "║"


def _box_top(title: str) -> str:
    inner = W - 2
    return (
        f"╔{H * inner}╗\n"
        f"{V}  {title:<{inner - 2}}{V}\n"
        f"╠{H * inner}╣"
    )


def _box_line(text: str = "") -> str:
    inner = W - 4
    if len(text) > inner:
        text = text[:inner]
    return f"{V}  {text:<{inner}}{V}"


def _box_row(label: str, value: str, lw: int = 38) -> str:
    return _box_line(f"{label:<{lw}}{value}")


def _box_bottom() -> str:
    return f"╚{H * (W - 2)}╝"


def _wrap(text: str, width: int = W - 6) -> List[str]:
    lines: List[str] = []
    line = ""
    for word in text.split():
        if len(line) + len(word) + 1 <= width:
            line = f"{line} {word}" if line else word
        else:
            lines.append(line)
            line = word
    if line:
        lines.append(line)
    return lines


def _print_section(title: str, rows: List[str]) -> None:
    """Print a titled box with content rows."""
    print(_box_top(title))
    for r in rows:
        print(r)
    print(_box_bottom())
    print()


# ═══════════════════════════════════════════════════════════════════
# CLI Section Printers
# ═══════════════════════════════════════════════════════════════════

def _print_inputs(inputs: InputRecord) -> None:
    rows = []
    for key in cfg.SLIDER_ORDER:
        rows.append(_box_row(
            cfg.LABELS[key]["title"],
            fmt_value(getattr(inputs, key), cfg.SLIDER_CONFIG[key]["format"]),
        ))
    rows.append(_box_line())
    for key, bounds in cfg.RATE_BOUNDS.items():
        rows.append(_box_row(bounds["label"], pct(getattr(inputs, key))))
    _print_section("YOUR INPUTS", rows)


def _print_investment(res: ReturnResult) -> None:
    rows = [
        _box_row("Tuition & expenses", fmt(res.tuition_expenses)),
        _box_row("Loan interest", fmt(res.loan_interest)),
        _box_row("Net forgone income", fmt(res.forgone_income)),
        _box_line("─" * (W - 6)),
        _box_row("Total investment", fmt(res.total_cost)),
    ]
    _print_section("THE INVESTMENT", rows)


def _print_return(res: ReturnResult, horizon: int) -> None:
    rows = [
        _box_row(f"{horizon}-yr salary advantage", fmt(res.salary_edge)),
        _box_row("Signing bonus (compounded)", fmt(res.bonus_compounded)),
        _box_line("─" * (W - 6)),
        _box_row(f"Total {horizon}-yr return", fmt(res.total_return)),
        _box_row("Annualized ROI", pct(res.annualized_roi)),
    ]
    _print_section("THE RETURN", rows)


def _print_verdict(d: Dict[str, Any]) -> None:
    res: ReturnResult = d["result"]
    rows = [
        _box_row("Net value created", fmt(res.net_roi)),
        _box_row("Return per dollar invested", f"{d['payback_ratio']:.2f}x"),
    ]
    if d["breakeven_salary"] is not None:
        rows.append(_box_row("Break-even post-degree salary", fmt(d["breakeven_salary"])))
    rows.append(_box_line())
    rows.extend(_box_line(line) for line in _wrap(generate_verdict_text(d)))
    _print_section("THE VERDICT", rows)


def _print_sensitivity(sweeps: List[SweepResult]) -> None:
    h1 = f"{'Input':<28}{'Low':>12}{'ROI':>8}{'High':>12}{'ROI':>8}"
    rows = [_box_line(h1), _box_line("─" * (W - 6))]
    for sw in sweeps:
        form = cfg.SLIDER_CONFIG[sw.field]["format"]
        rows.append(_box_line(
            f"{cfg.LABELS[sw.field]['title'][:27]:<28}"
            f"{fmt_value(sw.values[0], form):>12}{pct(sw.annualized_roi[0]):>8}"
            f"{fmt_value(sw.values[-1], form):>12}{pct(sw.annualized_roi[-1]):>8}"
        ))
    _print_section("SENSITIVITY (ANNUALIZED ROI ACROSS SLIDER RANGE)", rows)


# ═══════════════════════════════════════════════════════════════════
# Main CLI entry point
# ═══════════════════════════════════════════════════════════════════

def run_cli(pdf_path: Optional[str] = None) -> None:
    """Run the full CLI workflow."""
    # Ensure box-drawing characters render on Windows
    try:
        sys.stdout.reconfigure(encoding="utf-8")
    except (AttributeError, OSError):
        pass
    print()
    print("=" * W)
    print("  Graduate Degree Return on Investment Calculator")
    print("=" * W)

    inputs = collect_inputs()
    result = compute(inputs)
    d = compute_display_data(inputs, result)
    sweeps = [sensitivity_sweep(inputs, field) for field in cfg.SWEEP_FIELDS]

    print()
    _print_inputs(inputs)
    _print_investment(result)
    _print_return(result, d["horizon"])
    _print_verdict(d)
    _print_sensitivity(sweeps)

    if pdf_path:
        print("  Generating PDF report...")
        path = report.generate_pdf(inputs, result, d, generate_verdict_text(d), pdf_path)
        print(f"  Saved to {path}\n")


if __name__ == "__main__":
    run_cli()
