"""
Tests for chart specs and the matplotlib renderer.
"""

import pytest

from transcriptqda.core.utils.lazy_imports import get_matplotlib_pyplot
from transcriptqda.core.viz.mpl_renderer import render_mpl
from transcriptqda.core.viz.specs import BarCategoricalSpec, ChartSpec, FacetedBarSpec


def _bar_spec(**overrides):
    values = dict(
        viz_id="sentiment.net",
        module="sentiment",
        name="sentiment_by_transcript",
        chart_intent="bar_categorical",
        title="Sentiment Analysis by Transcript",
        x_label="Sentiment Score",
        y_label="Transcript",
        categories=["a.txt", "b.txt"],
        values=[3, -3],
        colors=["#00BFC4", "#F8766D"],
        orientation="horizontal",
        legend={"net > 0": "#00BFC4", "net <= 0": "#F8766D"},
    )
    values.update(overrides)
    return BarCategoricalSpec(**values)


def _faceted_spec(n_facets=3, **overrides):
    values = dict(
        viz_id="topic_modeling.top_terms",
        module="topic_modeling",
        name="top_terms_per_topic",
        chart_intent="faceted_bar",
        title="Top Terms in Each Topic",
        x_label="Beta Value",
        y_label="Terms",
        facets=[
            {"title": f"Topic {i}", "categories": ["garden", "soil"], "values": [0.3, 0.1]}
            for i in range(1, n_facets + 1)
        ],
    )
    values.update(overrides)
    return FacetedBarSpec(**values)


@pytest.fixture
def plt():
    pyplot = get_matplotlib_pyplot()
    yield pyplot
    pyplot.close("all")


class TestSpecValidation:
    """Tests for spec validation."""

    def test_mismatched_values(self):
        with pytest.raises(ValueError):
            _bar_spec(values=[1]).validate()

    def test_mismatched_colors(self):
        with pytest.raises(ValueError, match="colors"):
            _bar_spec(colors=["red"]).validate()

    def test_name_required(self):
        with pytest.raises(ValueError, match="name"):
            _bar_spec(name="").validate()

    def test_facets_required(self):
        with pytest.raises(ValueError, match="facets"):
            _faceted_spec(facets=[]).validate()


class TestRenderMpl:
    """Tests for render_mpl."""

    def test_horizontal_bar(self, plt):
        fig = render_mpl(_bar_spec())

        ax = fig.axes[0]
        assert ax.get_title() == "Sentiment Analysis by Transcript"
        assert ax.get_xlabel() == "Sentiment Score"
        assert ax.get_ylabel() == "Transcript"
        assert len(ax.patches) == 2
        assert ax.get_legend() is not None

    def test_vertical_bar_without_colors(self, plt):
        fig = render_mpl(_bar_spec(orientation="vertical", colors=None, legend=None))

        assert len(fig.axes[0].patches) == 2

    def test_faceted_grid_hides_unused_panels(self, plt):
        fig = render_mpl(_faceted_spec(n_facets=3))

        visible = [ax for ax in fig.axes if ax.get_visible()]
        assert len(fig.axes) == 4
        assert [ax.get_title() for ax in visible] == ["Topic 1", "Topic 2", "Topic 3"]
        assert visible[0].get_xlabel() == "Beta Value"
        assert fig._suptitle.get_text() == "Top Terms in Each Topic"

    def test_single_facet(self, plt):
        fig = render_mpl(_faceted_spec(n_facets=1))

        assert len(fig.axes) == 1

    def test_unsupported_spec(self, plt):
        spec = ChartSpec(
            viz_id="x", module="x", name="x", chart_intent="bar_categorical", title="x"
        )

        with pytest.raises(ValueError, match="Unsupported"):
            render_mpl(spec)
