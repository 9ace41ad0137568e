"""Chart components using Plotly for data visualization."""

import math

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from bodyfat_estimator.config import CHART_COLORS, CHART_MIN_Y
from bodyfat_estimator.models import ResultBundle


def chart_axis_max(bundle: ResultBundle) -> float:
    """Y-axis ceiling: next multiple of 5 above the largest value, plus 5, never below 25."""
    values = list(bundle.estimates().values())
    if not values:
        return CHART_MIN_Y
    highest = max(values + [bundle.average_bf or 0])
    return max(CHART_MIN_Y, math.ceil(highest / 5) * 5 + 5)


def estimates_frame(bundle: ResultBundle, strings: dict) -> pd.DataFrame:
    """One row per method that produced a value."""
    rows = [
        {
            "key": method,
            "Method": strings["methods"][method]["name"],
            "BF%": round(value, 1),
            "Note": strings["methods"][method]["note"],
        }
        for method, value in bundle.estimates().items()
    ]
    return pd.DataFrame(rows, columns=["key", "Method", "BF%", "Note"])


def create_estimates_bar_chart(bundle: ResultBundle, strings: dict):
    """Create bar chart comparing the body fat estimates.

    Args:
        bundle: ResultBundle from the estimation engine
        strings: Locale string table

    Returns:
        Plotly figure
    """
    df = estimates_frame(bundle, strings)

    if df.empty:
        fig = go.Figure()
        fig.add_annotation(
            text=strings["calculation_error"],
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        return fig

    fig = px.bar(
        df,
        x="Method",
        y="BF%",
        color="Method",
        title=strings["chart_title"],
        hover_data={"Note": True, "Method": False},
        color_discrete_sequence=CHART_COLORS,
    )

    fig.update_layout(
        xaxis_title="",
        yaxis_title=strings["chart_y_axis"],
        yaxis_range=[0, chart_axis_max(bundle)],
        showlegend=False,
    )

    if bundle.average_bf is not None:
        fig.add_hline(
            y=bundle.average_bf,
            line_dash="dash",
            annotation_text=f"{strings['average_label']}: {bundle.average_bf:.1f}%",
            line_color=CHART_COLORS[-1]
        )

    return fig
