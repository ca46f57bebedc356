from typing import Literal
import plotly.graph_objects as go
from indicators.rsi import OVERBOUGHT, OVERSOLD
from viz.contracts import PriceFrame

ChartId = Literal["price", "rsi"]

PRICE_COLOR = "#2563eb"
RSI_COLOR = "#10b981"

def make_price_chart(pf: PriceFrame, title: str = "Evolución"):
    df = pf.df
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df.index, y=df["close"], name="Precio", mode="lines",
                             line=dict(color=PRICE_COLOR, width=2)))
    fig.update_layout(
        title=title,
        height=400,
        margin=dict(l=10, r=10, t=30, b=10),
        autosize=True,
        width=None,
    )
    fig.update_yaxes(autorange=True)
    return fig

def make_rsi_chart(pf: PriceFrame, title: str = "RSI"):
    df = pf.df
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df.index, y=df["rsi"], name="RSI", mode="lines",
                             line=dict(color=RSI_COLOR, width=2)))
    fig.add_hline(y=OVERBOUGHT, line_dash="dash", line_color="red", line_width=1)
    fig.add_hline(y=OVERSOLD, line_dash="dash", line_color="red", line_width=1)
    fig.update_yaxes(range=[0, 100], tickvals=[0, OVERSOLD, OVERBOUGHT, 100], title_text="RSI")
    fig.update_layout(
        title=title,
        height=200,
        margin=dict(l=10, r=10, t=30, b=10),
        autosize=True,
        width=None,
    )
    return fig

REGISTRY = {"price": make_price_chart, "rsi": make_rsi_chart}

def make_chart(chart_id: ChartId, pf: PriceFrame):
    return REGISTRY[chart_id](pf)
