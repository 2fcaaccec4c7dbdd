"""
Pointer-driven range input for the ROI calculator.

A RangeSlider owns one quantized value and turns raw pointer x
coordinates into values on its ``min + k*step`` grid. It has two states,
idle and dragging, and draws nothing itself: the host supplies the track
geometry and renders the result.

Gestures are serialized by a PointerCapture. While one slider holds the
capture, every other slider sharing it ignores pointer-down.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Callable, Optional, Tuple

log = logging.getLogger(__name__)

Geometry = Tuple[float, float]   # (left edge, width) in pointer coordinates

IDLE = "idle"
DRAGGING = "dragging"


class PointerCapture:
    """Exclusive owner of the pointer for the duration of a gesture."""

    def __init__(self) -> None:
        self.owner: Optional[RangeSlider] = None

    def acquire(self, control: RangeSlider) -> bool:
        if self.owner is not None and self.owner is not control:
            return False
        self.owner = control
        return True

    def release(self, control: RangeSlider) -> None:
        if self.owner is control:
            self.owner = None


def _step_decimals(step: float) -> int:
    exponent = Decimal(str(step)).normalize().as_tuple().exponent
    return max(0, -int(exponent))


class RangeSlider:
    """Continuous value input quantized to *step* within [*min_value*, *max_value*].

    Parameters
    ----------
    min_value, max_value : float
        Inclusive bounds. *max_value* must exceed *min_value*.
    step : float
        Grid spacing, measured from *min_value*. Must be positive.
    value : float
        Initial value; snapped onto the grid.
    on_change : callable, optional
        Called with each accepted value.
    geometry : callable, optional
        Returns the track's ``(left, width)`` or None when it has not been
        laid out. Sampled every time a pointer position is mapped.
    capture : PointerCapture, optional
        Shared with the other sliders of the same surface. Each slider gets
        a private one by default.
    """

    def __init__(
        self,
        min_value: float,
        max_value: float,
        step: float,
        value: float,
        on_change: Optional[Callable[[float], None]] = None,
        geometry: Optional[Callable[[], Optional[Geometry]]] = None,
        capture: Optional[PointerCapture] = None,
    ) -> None:
        if step <= 0:
            raise ValueError(f"Slider step must be positive, got {step}")
        if max_value <= min_value:
            raise ValueError(
                f"Slider max ({max_value}) must be greater than min ({min_value})"
            )
        self.min = min_value
        self.max = max_value
        self.step = step
        self.on_change = on_change
        self.geometry = geometry
        self.capture = capture if capture is not None else PointerCapture()
        self.dragging = False
        self._decimals = _step_decimals(step)
        # Highest grid index that does not overshoot max
        self._max_index = math.floor((max_value - min_value) / step + 1e-9)
        self.value = self.snap(value)

    # ── Quantization ────────────────────────────────────────────────

    def snap(self, raw: float) -> float:
        """Round *raw* half-up to the nearest grid value inside the bounds."""
        k = math.floor((raw - self.min) / self.step + 0.5)
        k = min(max(k, 0), self._max_index)
        return round(self.min + k * self.step, self._decimals)

    def value_from_pointer(self, pointer_x: float) -> float:
        geom = self.geometry() if self.geometry is not None else None
        if geom is None:
            return self.value
        left, width = geom
        if not width or width <= 0:
            return self.value

        ratio = min(max((pointer_x - left) / width, 0.0), 1.0)
        raw = self.min + ratio * (self.max - self.min)
        return self.snap(raw)

    # ── Gestures ────────────────────────────────────────────────────

    @property
    def state(self) -> str:
        return DRAGGING if self.dragging else IDLE

    def begin_interaction(self, pointer_x: float) -> bool:
        """Capture the pointer and jump to *pointer_x*.

        Returns False, changing nothing, when another slider holds the
        capture.
        """
        if not self.capture.acquire(self):
            return False
        self.dragging = True
        log.debug("slider %s-%s: drag start at x=%s", self.min, self.max, pointer_x)
        self._accept(self.value_from_pointer(pointer_x), force=True)
        return True

    def update_interaction(self, pointer_x: float) -> None:
        if not self.dragging:
            return
        self._accept(self.value_from_pointer(pointer_x))

    def end_interaction(self) -> None:
        if not self.dragging:
            return
        self.dragging = False
        self.capture.release(self)
        log.debug("slider %s-%s: drag end at value=%s", self.min, self.max, self.value)

    # ── Programmatic updates ────────────────────────────────────────

    def set_value(self, value: float, notify: bool = False) -> float:
        """Move to *value* (snapped) without a gesture."""
        self._accept(self.snap(value), force=notify, notify=notify)
        return self.value

    def fraction_of(self, value: float) -> float:
        """Position of *value* along the track, 0 at min and 1 at max."""
        return (value - self.min) / (self.max - self.min)

    @property
    def fraction(self) -> float:
        return self.fraction_of(self.value)

    def _accept(self, value: float, force: bool = False, notify: bool = True) -> None:
        changed = value != self.value
        self.value = value
        if notify and (changed or force) and self.on_change is not None:
            self.on_change(value)
