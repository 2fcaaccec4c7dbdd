"""
Constants for the graduate-degree ROI calculator.

All monetary values in USD, all rates in percent per annum.
Defaults follow the published median figures the methodology is based on.
"""

# ── General assumptions ──────────────────────────────────────────────
HORIZON_YEARS = 10          # years after graduation the return is measured over
INVESTMENT_RETURN = 5.5     # nominal return the signing bonus is assumed to earn

# ── Default inputs ───────────────────────────────────────────────────
DEFAULTS = {
    "pre_degree_salary": 80_000,
    "post_degree_salary": 140_000,
    "signing_bonus": 30_000,
    "tuition_and_expenses": 131_303,
    "loan_amount": 59_891,
    "interest_rate": 5.9,
    "loan_term": 10,
    "program_length": 22,       # months away from full-time work
    "pre_degree_wage_growth": 4.1,
    "post_degree_wage_growth": 4.2,
    "inflation": 2.6,
}

# ── Slider bounds ────────────────────────────────────────────────────
# format is one of 'currency', 'percent', 'years', 'months'
SLIDER_CONFIG = {
    "pre_degree_salary":    {"min": 20_000, "max": 300_000, "step": 1_000, "format": "currency"},
    "post_degree_salary":   {"min": 30_000, "max": 500_000, "step": 1_000, "format": "currency"},
    "signing_bonus":        {"min": 0,      "max": 100_000, "step": 500,   "format": "currency"},
    "tuition_and_expenses": {"min": 25_000, "max": 300_000, "step": 1_000, "format": "currency"},
    "loan_amount":          {"min": 0,      "max": 200_000, "step": 1_000, "format": "currency"},
    "interest_rate":        {"min": 0,      "max": 15,      "step": 0.1,   "format": "percent"},
    "loan_term":            {"min": 1,      "max": 15,      "step": 1,     "format": "years"},
    "program_length":       {"min": 10,     "max": 36,      "step": 1,     "format": "months"},
}

SLIDER_ORDER = [
    "pre_degree_salary", "post_degree_salary", "signing_bonus",
    "tuition_and_expenses", "loan_amount", "interest_rate",
    "loan_term", "program_length",
]

LABELS = {
    "pre_degree_salary":    {"title": "Pre-degree annual salary",  "subtitle": "Your annual salary before going back to school",  "median_label": "Median"},
    "post_degree_salary":   {"title": "Post-degree annual salary", "subtitle": "Expected annual salary after graduation",         "median_label": "Median"},
    "signing_bonus":        {"title": "Signing bonus",             "subtitle": "Expected one-time signing bonus after graduation", "median_label": "Median"},
    "tuition_and_expenses": {"title": "Out-of-pocket expenses",    "subtitle": "Tuition, room, board & other living expenses",     "median_label": "Median"},
    "loan_amount":          {"title": "How much will you borrow?", "subtitle": "Total student loan amount",                        "median_label": "Median"},
    "interest_rate":        {"title": "Interest rate",             "subtitle": "Annual interest rate on your student loans",       "median_label": "Average"},
    "loan_term":            {"title": "Loan term",                 "subtitle": "How long to repay your student loans",             "median_label": "Typical"},
    "program_length":       {"title": "Program length",            "subtitle": "Months away from full-time work",                  "median_label": "Median"},
}

# ── Rate prompts (terminal only; not slider-driven) ──────────────────
RATE_BOUNDS = {
    "pre_degree_wage_growth":  {"label": "Pre-degree wage growth %/yr",  "min": -10.0, "max": 20.0},
    "post_degree_wage_growth": {"label": "Post-degree wage growth %/yr", "min": -10.0, "max": 20.0},
    "inflation":               {"label": "Inflation %/yr",               "min": -5.0,  "max": 15.0},
}

# ── Sensitivity sweep ────────────────────────────────────────────────
SWEEP_POINTS = 25           # values per swept field
SWEEP_FIELDS = ["post_degree_salary", "tuition_and_expenses", "interest_rate", "program_length"]
