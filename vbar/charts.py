"""Matplotlib chart of an assessment's scores.

The figure uses a dark theme and is rendered to a PIL image so any front
end (terminal export, web page, desktop window) can show or save it.
"""

from __future__ import annotations

import io

import matplotlib
matplotlib.use("Agg")  # non-interactive backend -- render to image buffers
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from PIL import Image

from vbar.engine import evaluate
from vbar.models import DEFAULT_THRESHOLD, AnswerStore, BucketKind, Questionnaire

# -- Palette ---------------------------------------------------------------
_BG = "#2b2b2b"
_FG = "#e0e0e0"
_GRID = "#444444"
_MAX_FILL = (0.70, 0.70, 0.70, 0.15)
_KIND_COLOUR: dict[BucketKind, str] = {
    BucketKind.PRIMARY: "#c0504d",   # employment indicators
    BucketKind.SECONDARY: "#6a9fb5",  # self-employment indicators
}
_BAND_FILL = (0.95, 0.80, 0.30, 0.20)


def _fig_to_pil(fig: Figure, dpi: int = 100) -> Image.Image:
    """Render a matplotlib Figure to a PIL Image and close it."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight",
                facecolor=fig.get_facecolor(), edgecolor="none")
    plt.close(fig)
    buf.seek(0)
    return Image.open(buf)


def _style_axes(ax) -> None:
    ax.set_facecolor(_BG)
    ax.tick_params(colors=_FG, labelsize=8)
    for side in ("bottom", "left"):
        ax.spines[side].set_color(_GRID)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.xaxis.grid(color=_GRID, linewidth=0.5)


def score_chart(
    questionnaire: Questionnaire,
    store: AnswerStore,
    threshold: float = DEFAULT_THRESHOLD,
    *,
    title: str = "Beoordeling werkrelatie",
    size: tuple[int, int] = (560, 360),
    dpi: int = 100,
) -> Image.Image:
    """Draw per-category scores and the risk indicator; return a PIL Image.

    The top panel shows each category's score against its maximum, coloured
    by bucket.  The bottom panel places the risk indicator on a scale from
    -max(primary) to +max(secondary) with the undetermined band shaded.
    """
    verdict = evaluate(questionnaire, store, threshold)
    names = [c.name for c in questionnaire.categories]
    maxima = np.array([c.max_score for c in questionnaire.categories])
    values = np.array([verdict.category_scores[n] for n in names])
    colours = [_KIND_COLOUR[c.kind] for c in questionnaire.categories]
    y = np.arange(len(names))

    fig_w, fig_h = size[0] / dpi, size[1] / dpi
    fig = Figure(figsize=(fig_w, fig_h), dpi=dpi, facecolor=_BG)
    ax, ri_ax = fig.subplots(2, 1, gridspec_kw={"height_ratios": [3, 1]})

    # Category scores
    _style_axes(ax)
    ax.barh(y, maxima, color=_MAX_FILL, edgecolor=_GRID, linewidth=0.5)
    ax.barh(y, values, color=colours)
    ax.set_yticks(y)
    ax.set_yticklabels(names, color=_FG)
    ax.invert_yaxis()
    ax.set_xlim(0, float(maxima.max()))
    for yi, v, m in zip(y, values, maxima):
        ax.text(m, yi, f" {v:.1f}/{m:.1f}", va="center", color=_FG, fontsize=8)
    ax.set_title(title, color=_FG, fontsize=11, fontweight="bold")

    # Risk indicator gauge
    _style_axes(ri_ax)
    low = -questionnaire.max_score(BucketKind.PRIMARY)
    high = questionnaire.max_score(BucketKind.SECONDARY)
    ri = verdict.scores.risk_indicator
    ri_ax.axvspan(-threshold, threshold, color=_BAND_FILL)
    ri_ax.axvline(0, color=_GRID, linewidth=0.8)
    ri_colour = _KIND_COLOUR[BucketKind.SECONDARY if ri >= 0 else BucketKind.PRIMARY]
    ri_ax.barh([0], [ri], color=ri_colour, height=0.5)
    ri_ax.set_xlim(min(low, -threshold), max(high, threshold))
    ri_ax.set_yticks([0])
    ri_ax.set_yticklabels(["RI"], color=_FG)
    ri_ax.set_xlabel(
        f"RI = {ri:.1f}   ({verdict.answered_count}/{verdict.total_questions} answered)",
        color=_FG, fontsize=9,
    )

    return _fig_to_pil(fig, dpi=dpi)
