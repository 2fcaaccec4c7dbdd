import matplotlib.pyplot as plt
import pytest

import cli
import report
from roi import compute, sensitivity_sweep


def test_generate_pdf_writes_file(tmp_path, defaults):
    res = compute(defaults)
    d = cli.compute_display_data(defaults, res)
    path = tmp_path / "roi.pdf"
    open_before = set(plt.get_fignums())

    out = report.generate_pdf(defaults, res, d, cli.generate_verdict_text(d), str(path))

    assert out == str(path)
    assert path.read_bytes().startswith(b"%PDF")
    assert set(plt.get_fignums()) == open_before


def test_sensitivity_chart_hides_unused_axes(defaults):
    sweeps = [sensitivity_sweep(defaults, f) for f in ("interest_rate", "loan_term", "program_length")]
    fig = report.chart_sensitivity(defaults, sweeps)
    try:
        assert len(fig.axes) == 4
        assert not fig.axes[3].axison
    finally:
        plt.close(fig)


def test_usd_axis_formatter():
    assert report._usd_fmt(1_500_000, None) == "$1.5M"
    assert report._usd_fmt(-25_000, None) == "-$25k"
    assert report._usd_fmt(300, None) == "$300"


def test_generate_pdf_closes_figures_when_saving_fails(tmp_path, defaults, monkeypatch):
    res = compute(defaults)
    d = cli.compute_display_data(defaults, res)
    open_before = set(plt.get_fignums())

    real_savefig = report.PdfPages.savefig
    saved = []

    def failing_savefig(self, figure=None, **kwargs):
        if saved:
            raise RuntimeError("disk full")
        saved.append(figure)
        return real_savefig(self, figure, **kwargs)

    monkeypatch.setattr(report.PdfPages, "savefig", failing_savefig)

    with pytest.raises(RuntimeError, match="disk full"):
        report.generate_pdf(defaults, res, d, cli.generate_verdict_text(d),
                            str(tmp_path / "roi.pdf"))
    assert set(plt.get_fignums()) == open_before
