"""Chart specs for topic modeling results."""

from __future__ import annotations

import pandas as pd

from transcriptqda.core.viz.specs import FacetedBarSpec


def create_top_terms_chart(top_terms: pd.DataFrame, ncols: int = 2) -> FacetedBarSpec:
    """One horizontal bar panel per topic, terms ordered by beta within each panel."""
    facets = []
    for topic, group in top_terms.groupby("topic", sort=True):
        group = group.sort_values(["beta", "term"], ascending=[False, True])
        facets.append(
            {
                "title": f"Topic {topic}",
                "categories": [str(term) for term in group["term"]],
                "values": [float(beta) for beta in group["beta"]],
            }
        )
    return FacetedBarSpec(
        viz_id="topic_modeling.top_terms.global",
        module="topic_modeling",
        name="top_terms_per_topic",
        chart_intent="faceted_bar",
        title="Top Terms in Each Topic",
        x_label="Beta Value",
        y_label="Terms",
        facets=facets,
        ncols=ncols,
    )
