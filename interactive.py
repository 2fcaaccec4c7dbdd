"""
Interactive calculator window for the graduate-degree ROI model.

One matplotlib figure holds the live result cards and a slider per
input field. Dragging any slider updates the InputStore, which
re-derives the ROI and refreshes the cards. Run via ``python main.py``.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import matplotlib.pyplot as plt
from matplotlib.backend_bases import MouseButton
from matplotlib.widgets import Button

import config as cfg
from cli import fmt, fmt_min_max, fmt_value, pct
from report import AMBER, BG, BORDER, CARD, SLATE, TEAL, TEXT, TEXT2
from roi import InputRecord, ReturnResult, compute
from slider import PointerCapture, RangeSlider
from store import InputStore

log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
# Layout (figure fractions)
# ═══════════════════════════════════════════════════════════════════

FIG_SIZE = (12, 11)
TRACK_HEIGHT = 0.03
TRACK_WIDTH = 0.38
COLUMN_X = (0.06, 0.56)
FIRST_ROW_Y = 0.56
ROW_SPACING = 0.125
THUMB_Y = 0.5


# ═══════════════════════════════════════════════════════════════════
# One slider
# ═══════════════════════════════════════════════════════════════════

class SliderView:
    """Draws one RangeSlider on a track axes and feeds it pointer events.

    Pointer-up and the pointer leaving the figure both end the gesture.
    """

    def __init__(
        self,
        fig: plt.Figure,
        rect: List[float],
        key: str,
        value: float,
        capture: PointerCapture,
        on_change: Callable[[str, float], None],
    ) -> None:
        bounds = cfg.SLIDER_CONFIG[key]
        label = cfg.LABELS[key]
        self.key = key
        self.format = bounds["format"]
        self.on_change = on_change
        self.default = cfg.DEFAULTS[key]

        self.ax = fig.add_axes(rect)
        self.slider = RangeSlider(
            bounds["min"], bounds["max"], bounds["step"], value,
            on_change=self._changed,
            geometry=self.track_geometry,
            capture=capture,
        )
        self._draw_static(label)
        self._thumb, = self.ax.plot([self.slider.value], [THUMB_Y], marker="v",
                                    markersize=13, color=TEAL, zorder=5)
        self._tooltip = self.ax.text(
            self.slider.value, 1.25, fmt_value(self.slider.value, self.format),
            ha="center", va="bottom", fontsize=9, color=BG, fontweight="bold",
            clip_on=False,
            bbox=dict(boxstyle="round,pad=0.3", facecolor=TEAL, edgecolor="none"),
        )
        self._cids: List[int] = []

    def _draw_static(self, label: Dict[str, str]) -> None:
        ax = self.ax
        ax.set_facecolor(BG)
        ax.set_xlim(self.slider.min, self.slider.max)
        ax.set_ylim(0, 1)
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

        ax.axhline(THUMB_Y, color=SLATE, linewidth=3, solid_capstyle="round")
        ax.axvline(self.default, color=AMBER, linewidth=1.2, linestyle="--")
        ax.text(self.default, -0.2, label["median_label"], ha="center", va="top",
                fontsize=7, color=AMBER, clip_on=False)

        ax.set_xticks([self.slider.min, self.slider.max])
        ax.set_xticklabels([fmt_min_max(self.slider.min, self.format),
                            fmt_min_max(self.slider.max, self.format)])
        ax.tick_params(colors=TEXT2, labelsize=7, length=0, pad=10)

        median = fmt_value(self.default, self.format)
        ax.set_title(
            f"{label['title']}\n{label['subtitle']} · {label['median_label']}: {median}",
            loc="left", fontsize=8, color=TEXT, pad=26,
        )

    # ── Geometry ────────────────────────────────────────────────────

    def track_geometry(self):
        bbox = self.ax.get_window_extent()
        if bbox.width <= 0:
            return None
        return bbox.x0, bbox.width

    # ── Event wiring ────────────────────────────────────────────────

    def connect(self) -> None:
        canvas = self.ax.figure.canvas
        self._cids = [
            canvas.mpl_connect("button_press_event", self.on_press),
            canvas.mpl_connect("motion_notify_event", self.on_motion),
            canvas.mpl_connect("button_release_event", self.on_release),
            canvas.mpl_connect("figure_leave_event", self.on_release),
        ]

    def disconnect(self) -> None:
        canvas = self.ax.figure.canvas
        for cid in self._cids:
            canvas.mpl_disconnect(cid)
        self._cids = []

    def on_press(self, event) -> None:
        if event.inaxes is not self.ax or event.button != MouseButton.LEFT:
            return
        if self.slider.begin_interaction(event.x):
            self.ax.figure.canvas.grab_mouse(self.ax)

    def on_motion(self, event) -> None:
        if not self.slider.dragging or event.x is None:
            return
        self.slider.update_interaction(event.x)

    def on_release(self, event) -> None:
        if not self.slider.dragging:
            return
        self.slider.end_interaction()
        self.ax.figure.canvas.release_mouse(self.ax)

    # ── Rendering ───────────────────────────────────────────────────

    def sync(self, value: float) -> None:
        """Show *value* without notifying the host."""
        self.slider.set_value(value)
        self._redraw()

    def _changed(self, value: float) -> None:
        self._redraw()
        self.on_change(self.key, value)

    def _redraw(self) -> None:
        value = self.slider.value
        self._thumb.set_xdata([value])
        self._tooltip.set_x(value)
        self._tooltip.set_text(fmt_value(value, self.format))
        self.ax.figure.canvas.draw_idle()


# ═══════════════════════════════════════════════════════════════════
# The calculator
# ═══════════════════════════════════════════════════════════════════

CARDS = [
    # (label, ReturnResult attribute, formatter, accent)
    ("Tuition & expenses", "tuition_expenses", fmt, False),
    ("Loan interest", "loan_interest", fmt, False),
    ("Net forgone income", "forgone_income", fmt, False),
    ("Total investment", "total_cost", fmt, True),
    (f"{cfg.HORIZON_YEARS}-yr salary advantage", "salary_edge", fmt, False),
    ("Signing bonus (compounded)", "bonus_compounded", fmt, False),
    (f"Total {cfg.HORIZON_YEARS}-yr return", "total_return", fmt, True),
    ("Annualized ROI", "annualized_roi", pct, True),
]


class Calculator:
    """Sliders, live result cards and a reset button in one figure."""

    def __init__(self, store: Optional[InputStore] = None,
                 fig: Optional[plt.Figure] = None) -> None:
        self.store = store if store is not None else InputStore()
        self.fig = fig if fig is not None else plt.figure(figsize=FIG_SIZE)
        self.fig.patch.set_facecolor(BG)
        self.capture = PointerCapture()

        self._draw_header()
        self._card_values = self._draw_cards()

        inputs = self.store.get()
        self.views: Dict[str, SliderView] = {}
        for i, key in enumerate(cfg.SLIDER_ORDER):
            col, row = i % 2, i // 2
            rect = [COLUMN_X[col], FIRST_ROW_Y - row * ROW_SPACING,
                    TRACK_WIDTH, TRACK_HEIGHT]
            view = SliderView(self.fig, rect, key, getattr(inputs, key),
                              self.capture, self._on_slider)
            view.connect()
            self.views[key] = view

        button_ax = self.fig.add_axes([0.42, 0.02, 0.16, 0.04])
        self.reset_button = Button(button_ax, "Reset to defaults",
                                   color=CARD, hovercolor=BORDER)
        self.reset_button.label.set_color(TEXT)
        self.reset_button.on_clicked(self.reset)

        self.store.subscribe(self._refresh)
        self.store.subscribe(self._sync_views)
        self._refresh(inputs)

    def _draw_header(self) -> None:
        self.fig.text(0.5, 0.965, "Graduate Degree Return on Investment Calculator",
                      ha="center", fontsize=16, color=TEXT, fontweight="bold")
        self.fig.text(0.5, 0.94,
                      "Drag the sliders to estimate your personal return over the "
                      f"{cfg.HORIZON_YEARS} years after graduation.",
                      ha="center", fontsize=9, color=TEXT2)
        self._headline = self.fig.text(0.5, 0.9, "", ha="center", fontsize=12,
                                       color=TEAL, fontweight="bold")

    def _draw_cards(self):
        values = []
        for i, (label, _, _, accent) in enumerate(CARDS):
            x = 0.06 + (i % 4) * 0.235
            y = 0.80 - (i // 4) * 0.09
            values.append(self.fig.text(x, y, "", fontsize=14, fontweight="bold",
                                        color=TEAL if accent else TEXT))
            self.fig.text(x, y - 0.025, label, fontsize=8, color=SLATE)
        return values

    # ── Data flow ───────────────────────────────────────────────────

    def _on_slider(self, key: str, value: float) -> None:
        self.store.set(**{key: value})

    def _refresh(self, inputs: InputRecord) -> ReturnResult:
        res = compute(inputs)
        self._headline.set_text(
            f"Your estimated annualized ROI: {pct(res.annualized_roi)}, "
            f"netting {fmt(res.net_roi)} over {cfg.HORIZON_YEARS} years"
        )
        for text, (_, attr, formatter, _) in zip(self._card_values, CARDS):
            text.set_text(formatter(getattr(res, attr)))
        self.fig.canvas.draw_idle()
        self.result = res
        return res

    def _sync_views(self, inputs: InputRecord) -> None:
        for key, view in self.views.items():
            value = getattr(inputs, key)
            if view.slider.value != value:
                view.sync(value)

    def reset(self, _event=None) -> None:
        self.store.reset()


def run_interactive() -> None:
    """Open the calculator window and block until it is closed."""
    calc = Calculator()
    log.info("calculator window open with %d sliders", len(calc.views))
    plt.show()
