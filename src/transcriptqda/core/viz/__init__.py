from .specs import BarCategoricalSpec, ChartSpec, FacetedBarSpec
from .mpl_renderer import render_mpl

__all__ = ["BarCategoricalSpec", "ChartSpec", "FacetedBarSpec", "render_mpl"]
