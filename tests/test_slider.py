import pytest

from slider import DRAGGING, IDLE, PointerCapture, RangeSlider


def make_slider(min_value=0, max_value=100_000, step=500, value=20_000,
                geometry=(100, 500), capture=None):
    emitted = []
    slider = RangeSlider(
        min_value, max_value, step, value,
        on_change=emitted.append,
        geometry=(lambda: geometry),
        capture=capture,
    )
    return slider, emitted


def test_pointer_in_middle_of_track():
    slider, _ = make_slider()
    assert slider.value_from_pointer(350) == 50_000


def test_pointer_left_of_track_clamps_to_min():
    slider, _ = make_slider()
    assert slider.value_from_pointer(50) == 0


def test_pointer_right_of_track_clamps_to_max():
    slider, _ = make_slider()
    assert slider.value_from_pointer(10_000) == 100_000


@pytest.mark.parametrize("pointer_x", [-1e9, -3, 0, 99.9, 101, 237.3, 412.77, 599, 600, 1e9])
def test_value_is_on_grid_and_in_range(pointer_x):
    slider, _ = make_slider(min_value=20_000, max_value=300_000, step=1_000)
    value = slider.value_from_pointer(pointer_x)
    assert 20_000 <= value <= 300_000
    assert (value - 20_000) % 1_000 == 0


def test_fractional_step_strips_float_noise():
    slider, _ = make_slider(min_value=0, max_value=15, step=0.1, value=5.9)
    assert slider.value == 5.9
    value = slider.value_from_pointer(100 + 0.3 * 500)
    assert value == 4.5


def test_rounds_half_up():
    slider, _ = make_slider(min_value=0, max_value=8, step=1, value=0,
                            geometry=(0, 8))
    assert slider.value_from_pointer(2.5) == 3
    assert slider.value_from_pointer(0.5) == 1


def test_never_overshoots_max_off_grid():
    slider, _ = make_slider(min_value=0, max_value=10, step=3, value=0,
                            geometry=(0, 100))
    assert slider.value_from_pointer(100) == 9


def test_initial_value_is_snapped():
    slider, _ = make_slider(value=20_260)
    assert slider.value == 20_500
    slider, _ = make_slider(value=-50)
    assert slider.value == 0


@pytest.mark.parametrize("geometry", [None, (100, 0), (100, -5)])
def test_missing_geometry_returns_current_value(geometry):
    slider, _ = make_slider(geometry=geometry)
    assert slider.value_from_pointer(350) == 20_000


def test_no_geometry_provider_returns_current_value():
    slider = RangeSlider(0, 100, 1, 42)
    assert slider.value_from_pointer(10) == 42


def test_begin_jumps_and_emits():
    slider, emitted = make_slider()
    assert slider.state == IDLE
    assert slider.begin_interaction(350) is True
    assert slider.state == DRAGGING
    assert slider.value == 50_000
    assert emitted == [50_000]


def test_click_on_current_value_still_emits():
    slider, emitted = make_slider(value=50_000)
    slider.begin_interaction(350)
    assert emitted == [50_000]


def test_drag_emits_only_on_change():
    slider, emitted = make_slider()
    slider.begin_interaction(350)
    slider.update_interaction(350.4)      # same grid value
    slider.update_interaction(450)
    slider.end_interaction()
    assert emitted == [50_000, 70_000]
    assert slider.state == IDLE


def test_update_before_begin_is_ignored():
    slider, emitted = make_slider()
    slider.update_interaction(450)
    assert emitted == []
    assert slider.value == 20_000


def test_update_after_end_is_ignored():
    slider, emitted = make_slider()
    slider.begin_interaction(350)
    slider.end_interaction()
    slider.update_interaction(550)
    assert emitted == [50_000]
    assert slider.value == 50_000


def test_end_is_idempotent():
    slider, _ = make_slider()
    slider.end_interaction()
    slider.begin_interaction(350)
    slider.end_interaction()
    slider.end_interaction()
    assert slider.state == IDLE
    assert slider.capture.owner is None


def test_capture_is_exclusive():
    capture = PointerCapture()
    first, first_emitted = make_slider(capture=capture)
    second, second_emitted = make_slider(capture=capture)

    assert first.begin_interaction(350)
    assert second.begin_interaction(450) is False
    assert not second.dragging
    assert second_emitted == []

    first.end_interaction()
    assert second.begin_interaction(450)
    assert second_emitted == [70_000]


def test_set_value_is_silent_by_default():
    slider, emitted = make_slider()
    assert slider.set_value(31_234) == 31_000
    assert emitted == []
    slider.set_value(40_000, notify=True)
    assert emitted == [40_000]


def test_fraction():
    slider, _ = make_slider(value=25_000)
    assert slider.fraction == pytest.approx(0.25)
    assert slider.fraction_of(100_000) == 1.0


@pytest.mark.parametrize("kwargs", [
    {"step": 0},
    {"step": -1},
    {"min_value": 10, "max_value": 10},
    {"min_value": 10, "max_value": 5},
])
def test_invalid_configuration(kwargs):
    params = {"min_value": 0, "max_value": 100, "step": 1, "value": 0}
    params.update(kwargs)
    with pytest.raises(ValueError):
        RangeSlider(**params)
