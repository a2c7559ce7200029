import pandas as pd
import plotly.express as px
import plotly.graph_objects as go


def leaderboard_bar(students_df: pd.DataFrame, limit: int = 20) -> go.Figure:
    if students_df.empty:
        return go.Figure()
    top = students_df.head(limit)
    fig = px.bar(
        top,
        x="student",
        y="total_points",
        color="tier",
        title="Achievement points by student",
        hover_data=["cards"],
        labels={"student": "Student", "total_points": "Points", "tier": "Tier"},
    )
    fig.update_layout(xaxis_title="Student", yaxis_title="Achievement points", bargap=0.1)
    fig.update_xaxes(categoryorder="array", categoryarray=list(top["student"]))
    return fig
