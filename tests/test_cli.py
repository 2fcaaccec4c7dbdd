import pytest

import cli
from roi import compute


@pytest.mark.parametrize("value, expected", [
    (0, "$0"),
    (1234.4, "$1,234"),
    (146_666.67, "$146,667"),
    (-2500, "-$2,500"),
    (-0.3, "$0"),
])
def test_fmt(value, expected):
    assert cli.fmt(value) == expected


@pytest.mark.parametrize("value, form, expected", [
    (140_000, "currency", "$140,000"),
    (5.9, "percent", "5.9%"),
    (1, "years", "1 yr"),
    (10, "years", "10 yrs"),
    (22, "months", "22 mo"),
])
def test_fmt_value(value, form, expected):
    assert cli.fmt_value(value, form) == expected


def test_fmt_value_rejects_unknown_format():
    with pytest.raises(ValueError):
        cli.fmt_value(1, "furlongs")


@pytest.mark.parametrize("value, form, expected", [
    (20_000, "currency", "$20K"),
    (0, "currency", "$0"),
    (15, "percent", "15%"),
    (36, "months", "36"),
])
def test_fmt_min_max(value, form, expected):
    assert cli.fmt_min_max(value, form) == expected


def test_prompt_reprompts_until_valid(monkeypatch, capsys):
    answers = iter(["abc", "5", "$250,000", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))
    assert cli._prompt_float("Salary", 80_000, 20_000, 300_000) == 250_000
    out = capsys.readouterr().out
    assert "Invalid number" in out
    assert "Must be at least" in out


def test_collect_inputs_accepts_defaults(monkeypatch, defaults):
    monkeypatch.setattr("builtins.input", lambda _prompt: "")
    assert cli.collect_inputs() == defaults


def test_verdict_for_worthwhile_degree(defaults):
    d = cli.compute_display_data(defaults, compute(defaults))
    assert d["worth_it"]
    assert d["breakeven_gap"] > 0
    text = cli.generate_verdict_text(d)
    assert "netting" in text and "clears the" in text


def test_verdict_for_losing_degree(defaults):
    inputs = defaults.replace(post_degree_salary=60_000, signing_bonus=0)
    d = cli.compute_display_data(inputs, compute(inputs))
    assert not d["worth_it"]
    text = cli.generate_verdict_text(d)
    assert "shortfall" in text and "to break even" in text


def test_run_cli_prints_sections(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("builtins.input", lambda _prompt: "")
    pdf = tmp_path / "report.pdf"
    cli.run_cli(str(pdf))
    out = capsys.readouterr().out
    for title in ("YOUR INPUTS", "THE INVESTMENT", "THE RETURN", "THE VERDICT", "SENSITIVITY"):
        assert title in out
    assert pdf.exists()
