"""Chart specification models for rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Sequence


@dataclass
class ChartSpec:
    """Base chart spec shared by all intents."""

    viz_id: str
    module: str
    name: str
    chart_intent: Literal["bar_categorical", "faceted_bar"]
    title: str
    x_label: str | None = None
    y_label: str | None = None

    def validate(self) -> None:
        if not self.viz_id:
            raise ValueError("viz_id is required")
        if not self.module:
            raise ValueError("module is required")
        if not self.name:
            raise ValueError("name is required")


@dataclass
class BarCategoricalSpec(ChartSpec):
    """Spec for categorical bar charts, optionally coloured per bar."""

    categories: Sequence[str] = ()
    values: Sequence[float] = ()
    colors: Sequence[str] | None = None
    orientation: Literal["vertical", "horizontal"] = "vertical"
    legend: dict[str, str] | None = None  # label -> color

    def validate(self) -> None:
        super().validate()
        if not self.categories or len(self.categories) != len(self.values):
            raise ValueError(
                "categories and values of equal length are required for bar_categorical charts"
            )
        if self.colors is not None and len(self.colors) != len(self.categories):
            raise ValueError("colors must match categories")


@dataclass
class FacetedBarSpec(ChartSpec):
    """
    Spec for a grid of horizontal bar panels, one per facet.

    Each facet is a dict with ``title``, ``categories`` and ``values``; every
    panel gets its own scales.
    """

    facets: Sequence[dict[str, Any]] = ()
    ncols: int = 2

    def validate(self) -> None:
        super().validate()
        if not self.facets:
            raise ValueError("facets are required for faceted_bar charts")
        if self.ncols < 1:
            raise ValueError("ncols must be at least 1")
