import matplotlib.pyplot as plt
import pytest
from matplotlib.backend_bases import LocationEvent, MouseButton, MouseEvent

import config as cfg
from interactive import Calculator
from roi import InputRecord, compute


@pytest.fixture
def calc():
    fig = plt.figure(figsize=(12, 11), dpi=100)
    calculator = Calculator(fig=fig)
    yield calculator
    plt.close(fig)


def _track_point(view, fraction):
    bbox = view.ax.get_window_extent()
    return bbox.x0 + fraction * bbox.width, bbox.y0 + bbox.height / 2


def _mouse(canvas, name, x, y):
    event = MouseEvent(name, canvas, x, y, button=MouseButton.LEFT)
    canvas.callbacks.process(name, event)


def test_initial_cards_show_default_result(calc):
    expected = compute(InputRecord.defaults())
    assert calc.result == expected
    assert "Your estimated annualized ROI" in calc._headline.get_text()


def test_click_and_drag_updates_store(calc):
    view = calc.views["signing_bonus"]
    canvas = calc.fig.canvas

    x, y = _track_point(view, 0.5)
    _mouse(canvas, "button_press_event", x, y)
    assert view.slider.dragging
    assert calc.store.get().signing_bonus == 50_000
    assert calc.result.bonus_compounded == pytest.approx(
        compute(calc.store.get()).bonus_compounded)

    x2, _ = _track_point(view, 2.0)     # far right of the track
    _mouse(canvas, "motion_notify_event", x2, y)
    assert calc.store.get().signing_bonus == cfg.SLIDER_CONFIG["signing_bonus"]["max"]

    _mouse(canvas, "button_release_event", x2, y)
    assert not view.slider.dragging
    assert canvas.mouse_grabber is None

    x3, _ = _track_point(view, 0.1)
    _mouse(canvas, "motion_notify_event", x3, y)
    assert calc.store.get().signing_bonus == 100_000


def test_leaving_figure_cancels_drag(calc):
    view = calc.views["loan_term"]
    canvas = calc.fig.canvas
    x, y = _track_point(view, 0.0)
    _mouse(canvas, "button_press_event", x, y)
    assert view.slider.dragging

    canvas.callbacks.process("figure_leave_event",
                             LocationEvent("figure_leave_event", canvas, x, y))
    assert not view.slider.dragging


def test_only_one_slider_drags_at_a_time(calc):
    first = calc.views["pre_degree_salary"]
    second = calc.views["post_degree_salary"]
    first.slider.begin_interaction(_track_point(first, 0.5)[0])

    assert second.slider.begin_interaction(_track_point(second, 0.5)[0]) is False
    assert calc.store.get().post_degree_salary == 140_000
    first.slider.end_interaction()


def test_reset_restores_defaults_and_thumbs(calc):
    view = calc.views["interest_rate"]
    view.slider.begin_interaction(_track_point(view, 1.0)[0])
    view.slider.end_interaction()
    assert calc.store.get().interest_rate == 15

    calc.reset()
    assert calc.store.get() == InputRecord.defaults()
    assert view.slider.value == 5.9
    assert view._tooltip.get_text() == "5.9%"
    assert calc.result == compute(InputRecord.defaults())


def test_store_edits_move_the_matching_thumb(calc):
    view = calc.views["loan_term"]
    calc.store.set(loan_term=5)

    assert view.slider.value == 5
    assert view._tooltip.get_text() == "5 yrs"
    assert calc.views["interest_rate"].slider.value == 5.9
    assert calc.result == compute(calc.store.get())
