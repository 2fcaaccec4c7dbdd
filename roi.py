"""
Return-on-investment model for a graduate degree.

Maps a snapshot of personal financial inputs to the cost of the degree
(out-of-pocket, forgone income, loan interest) and the return it buys
over a 10-year horizon (salary advantage plus the compounded signing
bonus). Every growth, interest and investment rate is converted to a
real, inflation-adjusted rate before use.

The model is a pure function: no state, no I/O, no rounding.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

import config as cfg


# ─── Data Classes ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class InputRecord:
    """One snapshot of the user's financial inputs."""

    pre_degree_salary: float        # annual, before the degree
    post_degree_salary: float       # annual, first year after graduating
    signing_bonus: float            # one-time, paid at graduation
    tuition_and_expenses: float     # total out-of-pocket cost
    loan_amount: float              # principal borrowed
    interest_rate: float            # nominal annual loan rate, percent
    loan_term: float                # repayment term, years
    program_length: float           # months out of the workforce
    pre_degree_wage_growth: float   # nominal, percent/yr
    post_degree_wage_growth: float  # nominal, percent/yr
    inflation: float                # percent/yr

    @classmethod
    def defaults(cls) -> InputRecord:
        return cls(**cfg.DEFAULTS)

    def replace(self, **changes: float) -> InputRecord:
        """Return a new snapshot with *changes* applied."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ReturnResult:
    """Derived summary for one InputRecord."""

    annualized_roi: float       # percent
    net_roi: float              # total_return - total_cost
    total_cost: float
    tuition_expenses: float
    loan_interest: float
    forgone_income: float
    total_return: float         # salary_edge + bonus_compounded
    salary_edge: float
    bonus_compounded: float


@dataclass
class YearlyPaths:
    """Salary trajectories over the horizon: shape (HORIZON_YEARS,)."""

    years: np.ndarray
    post_salary: np.ndarray
    pre_salary: np.ndarray          # counterfactual, had the person kept working
    edge: np.ndarray                # post_salary - pre_salary
    cumulative_edge: np.ndarray


@dataclass
class SweepResult:
    """Output of a one-field sensitivity sweep."""

    field: str
    values: np.ndarray
    annualized_roi: np.ndarray
    net_roi: np.ndarray


# ─── Rate Helpers ─────────────────────────────────────────────────────

def real_rate(nominal_pct: float, inflation_pct: float) -> float:
    """Inflation-adjusted rate as a fraction: (nominal - inflation) / 100."""
    return (nominal_pct - inflation_pct) / 100


def growth_base(rate: float) -> float:
    """Per-year growth factor 1 + *rate*, floored at 0.

    A real rate at or below -100% means the amount has collapsed to zero;
    the floor keeps fractional powers of the factor real.
    """
    return max(1 + rate, 0.0)


def monthly_payment(principal: float, annual_rate: float, term_years: float) -> float:
    """Fixed-rate amortization payment.

      P = L * [ r(1+r)^n / ((1+r)^n - 1) ]

    where r = annual_rate/12 and n = term_years*12. *annual_rate* is a
    fraction. Returns 0 unless principal, rate and term are all positive
    and the compounded growth over the term is measurably above 1.
    """
    if principal <= 0 or annual_rate <= 0 or term_years <= 0:
        return 0.0
    r = annual_rate / 12
    n = term_years * 12
    growth = (1 + r) ** n
    # A rate too small to move (1 + r)**n off 1.0 carries no interest
    if growth - 1 <= 0:
        return 0.0
    return principal * (r * growth) / (growth - 1)


def loan_interest(principal: float, annual_rate: float, term_years: float) -> float:
    """Total interest paid over the life of an amortized loan."""
    payment = monthly_payment(principal, annual_rate, term_years)
    if payment == 0.0:
        return 0.0
    return payment * term_years * 12 - principal


# ─── Salary Paths ─────────────────────────────────────────────────────

def yearly_paths(inputs: InputRecord) -> YearlyPaths:
    """Project post-degree and counterfactual pre-degree salaries.

    The pre-degree path is projected forward from today as though the
    person had never left work, so it carries the extra fractional years
    of growth spent in the program.
    """
    g_pre = real_rate(inputs.pre_degree_wage_growth, inputs.inflation)
    g_post = real_rate(inputs.post_degree_wage_growth, inputs.inflation)
    years_away = inputs.program_length / 12

    years = np.arange(1, cfg.HORIZON_YEARS + 1)
    post = inputs.post_degree_salary * growth_base(g_post) ** (years - 1)
    pre = inputs.pre_degree_salary * growth_base(g_pre) ** (years - 1 + years_away)
    edge = post - pre

    return YearlyPaths(
        years=years,
        post_salary=post,
        pre_salary=pre,
        edge=edge,
        cumulative_edge=np.cumsum(edge),
    )


# ─── Core Model ───────────────────────────────────────────────────────

def compute(inputs: InputRecord) -> ReturnResult:
    """Evaluate the degree's cost and 10-year return for *inputs*."""
    horizon = cfg.HORIZON_YEARS

    # Real loan rate cannot go negative
    loan_rate = max(real_rate(inputs.interest_rate, inputs.inflation), 0.0)
    invest_return = real_rate(cfg.INVESTMENT_RETURN, inputs.inflation)

    forgone_income = inputs.pre_degree_salary / 12 * inputs.program_length
    interest = loan_interest(inputs.loan_amount, loan_rate, inputs.loan_term)
    total_cost = inputs.tuition_and_expenses + forgone_income + interest

    salary_edge = float(yearly_paths(inputs).edge.sum())
    bonus_compounded = inputs.signing_bonus * growth_base(invest_return) ** horizon

    total_return = salary_edge + bonus_compounded
    net_roi = total_return - total_cost

    annualized_roi = 0.0
    if total_cost > 0:
        gross_ratio = total_return / total_cost
        if gross_ratio > 0:
            annualized_roi = (gross_ratio ** (1 / horizon) - 1) * 100

    return ReturnResult(
        annualized_roi=annualized_roi,
        net_roi=net_roi,
        total_cost=total_cost,
        tuition_expenses=inputs.tuition_and_expenses,
        loan_interest=interest,
        forgone_income=forgone_income,
        total_return=total_return,
        salary_edge=salary_edge,
        bonus_compounded=bonus_compounded,
    )


# ─── Sensitivity Sweep ────────────────────────────────────────────────

def sweep_values(field: str, n_points: int = cfg.SWEEP_POINTS) -> np.ndarray:
    """Evenly spaced values across a slider field's configured range."""
    bounds = cfg.SLIDER_CONFIG[field]
    return np.linspace(bounds["min"], bounds["max"], n_points)


def sensitivity_sweep(
    inputs: InputRecord,
    field: str,
    values: Optional[Iterable[float]] = None,
) -> SweepResult:
    """Re-evaluate the model with one input replaced by each of *values*.

    Parameters
    ----------
    inputs : InputRecord
        Template for every non-swept field.
    field : str
        Name of the InputRecord field to vary.
    values : iterable of float, optional
        Values to try. Defaults to the field's slider range.

    Returns
    -------
    SweepResult
        Annualized and net ROI for each value.
    """
    if field not in cfg.DEFAULTS:
        raise ValueError(f"Unknown input field: {field!r}")
    if values is None:
        if field not in cfg.SLIDER_CONFIG:
            raise ValueError(f"No slider range to sweep for {field!r}; pass values")
        values = sweep_values(field)
    vals = np.asarray(list(values), dtype=float)

    annualized = np.empty(len(vals))
    net = np.empty(len(vals))
    for i, v in enumerate(vals):
        res = compute(inputs.replace(**{field: float(v)}))
        annualized[i] = res.annualized_roi
        net[i] = res.net_roi

    return SweepResult(field=field, values=vals, annualized_roi=annualized, net_roi=net)


# ─── Break-even ───────────────────────────────────────────────────────

def breakeven_post_salary(inputs: InputRecord) -> Optional[float]:
    """Starting post-degree salary at which net ROI is exactly zero.

    The salary advantage is linear in the post-degree salary, so the
    break-even point has a closed form. Returns None when the growth
    factor sum is not positive.
    """
    g_post = real_rate(inputs.post_degree_wage_growth, inputs.inflation)
    years = np.arange(cfg.HORIZON_YEARS)
    growth_sum = float((growth_base(g_post) ** years).sum())
    if growth_sum <= 0:
        return None

    res = compute(inputs)
    pre_total = float(yearly_paths(inputs).pre_salary.sum())
    needed = res.total_cost + pre_total - res.bonus_compounded
    return needed / growth_sum


# ─── Smoke Test ───────────────────────────────────────────────────────

if __name__ == "__main__":
    inputs = InputRecord.defaults()
    res = compute(inputs)

    print("=" * 60)
    print("ROI Model: Default Inputs")
    print("=" * 60)
    for name, value in dataclasses.asdict(res).items():
        print(f"  {name:<20} {value:>16,.2f}")

    be = breakeven_post_salary(inputs)
    if be is not None:
        print(f"\n  Break-even post-degree salary: ${be:,.0f}")
