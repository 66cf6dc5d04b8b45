"""Matplotlib rendering for chart specs."""

from __future__ import annotations

import math
from typing import Any

from transcriptqda.core.utils.lazy_imports import get_matplotlib_pyplot, get_seaborn
from transcriptqda.core.viz.specs import BarCategoricalSpec, ChartSpec, FacetedBarSpec

# Bar colour when a spec does not colour its bars
_DEFAULT_BAR_COLOR = "#4C72B0"


def _apply_theme() -> None:
    sns = get_seaborn()
    sns.set_theme(style="whitegrid")


def _render_bar(spec: BarCategoricalSpec, plt: Any) -> Any:
    height = max(3.0, 0.45 * len(spec.categories) + 1.5)
    if spec.orientation == "horizontal":
        fig, ax = plt.subplots(figsize=(8, height))
    else:
        fig, ax = plt.subplots(figsize=(8, 4))
    colors = list(spec.colors) if spec.colors is not None else _DEFAULT_BAR_COLOR

    if spec.orientation == "horizontal":
        ax.barh(list(spec.categories), list(spec.values), color=colors)
        ax.axvline(0, color="0.3", linewidth=0.8)
    else:
        ax.bar(list(spec.categories), list(spec.values), color=colors)
        ax.set_xticks(range(len(spec.categories)))
        ax.set_xticklabels(spec.categories, rotation=30, ha="right")
        ax.axhline(0, color="0.3", linewidth=0.8)

    if spec.legend:
        from matplotlib.patches import Patch

        handles = [Patch(color=color, label=label) for label, color in spec.legend.items()]
        ax.legend(handles=handles, loc="best")

    ax.set_title(spec.title)
    if spec.x_label:
        ax.set_xlabel(spec.x_label)
    if spec.y_label:
        ax.set_ylabel(spec.y_label)
    fig.tight_layout()
    return fig


def _render_faceted_bar(spec: FacetedBarSpec, plt: Any) -> Any:
    n_facets = len(spec.facets)
    ncols = min(spec.ncols, n_facets)
    nrows = math.ceil(n_facets / ncols)
    fig, axes = plt.subplots(
        nrows, ncols, figsize=(5 * ncols, 3 * nrows), squeeze=False
    )
    palette = get_seaborn().color_palette(n_colors=n_facets)

    for idx, facet in enumerate(spec.facets):
        ax = axes[idx // ncols][idx % ncols]
        categories = list(facet.get("categories", []))
        values = list(facet.get("values", []))
        # Largest value on top
        ax.barh(categories[::-1], values[::-1], color=palette[idx])
        ax.set_title(str(facet.get("title", "")))
        if spec.x_label:
            ax.set_xlabel(spec.x_label)
        if spec.y_label:
            ax.set_ylabel(spec.y_label)

    for idx in range(n_facets, nrows * ncols):
        axes[idx // ncols][idx % ncols].set_visible(False)

    fig.suptitle(spec.title)
    fig.tight_layout()
    return fig


def render_mpl(spec: ChartSpec) -> Any:
    """Render a matplotlib figure from a ChartSpec."""
    spec.validate()
    plt = get_matplotlib_pyplot()
    _apply_theme()

    if isinstance(spec, FacetedBarSpec):
        return _render_faceted_bar(spec, plt)
    if isinstance(spec, BarCategoricalSpec):
        return _render_bar(spec, plt)
    raise ValueError(f"Unsupported chart intent: {spec.chart_intent}")
