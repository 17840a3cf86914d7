import inspect
from random import randint
from typing import Optional

import dash_bootstrap_components as dbc
import dash_cytoscape as cyto
import plotly.express as px
from dash import Dash, Input, Output, State, callback, ctx, dash_table, dcc, html

from .Config import *
from .Elements import heap_elements, versions
from .generate_statistics import push_costs
from .HeapNode import _bubble_up, push


@callback(
    Output("values", "data"),
    Input("push", "n_clicks"),
    Input("push_random", "n_clicks"),
    Input("reset", "n_clicks"),
    State("push_value", "value"),
    State("values", "data"),
    prevent_initial_call=True,
)
def on_push(_push: int, _push_random: int, _reset: int, push_value: Optional[float], values: Optional[list]):
    trigger_id = ctx.triggered[0]["prop_id"].split(".")[0]
    values = list(values or [])
    if trigger_id == "reset":
        return []
    if trigger_id == "push_random":
        values.append(randint(*RANDOM_VALUE_RANGE))
    elif push_value is not None:
        values.append(push_value)
    return values


@callback(
    Output("version", "max"),
    Output("version", "value"),
    Output("version", "marks"),
    Input("values", "data"),
)
def on_values(values: Optional[list]):
    n = len(values or [])
    marks = {i: str(i) for i in range(0, n + 1, max(1, n // 10))}
    marks[n] = str(n)
    return [n, n, marks]


@callback(
    Output("cytoscape", "elements"),
    Output("heap_info", "children"),
    Output("too_many_elements", "is_open"),
    Input("values", "data"),
    Input("version", "value"),
    Input("show_full_labels", "value"),
)
def on_version(values: Optional[list], version: Optional[int], show_full_labels: list):
    heaps = versions(values or [])
    version = min(version or 0, len(heaps) - 1)
    heap = heaps[version]
    elements, complete = heap_elements(heap, heaps[version - 1] if version else None, bool(show_full_labels))
    info = f"Version {version}: size={heap.size}, height={heap.height}"
    if heap.size:
        info += f", max={heap.value}"
    return [elements, info, not complete]


@callback(
    Output("statistics_modal", "is_open"),
    Output("statistics_graph", "figure"),
    Output("statistics_table", "data"),
    Input("show_statistics", "n_clicks"),
    State("values", "data"),
    prevent_initial_call=True,
)
def on_show_statistics(_show_statistics: int, values: Optional[list]):
    df = push_costs(values or [])
    if not len(df):
        return [True, {}, []]
    fig = px.bar(df, x="size", y=["comparisons", "rebuilt"], barmode="group", title="Cost per Push", labels={"size": "Size After Push", "value": "Count"})
    data = df["comparisons"].to_numpy()
    table = [
        {
            "Pushes": len(df),
            "Height": int(df["height"].iloc[-1]),
            "Best": int(data.min()),
            "Worst": int(data.max()),
            "Average": f"{data.mean():.2f}",
        }
    ]
    return [True, fig, table]


@callback(
    Output("code_modal", "is_open"),
    Output("code_modal", "children"),
    Input("show_code", "n_clicks"),
    prevent_initial_call=True,
)
def on_show_code(_show_code: int):
    code = "\n\n\n".join(inspect.getsource(func).strip() for func in (push, _bubble_up))
    children = [
        dbc.ModalHeader(dbc.ModalTitle("push")),
        dbc.ModalBody(dcc.Markdown(f"```python\n{code}\n```"), style={"margin": "auto"}),
    ]
    return [True, children]


control_panel = html.Div(
    [
        dbc.Row(
            [
                "Value:",
                dbc.Input(id="push_value", type="number", style={"width": "6rem"}, debounce=True),
            ],
            style={"column-gap": "0", "display": "flex", "align-items": "center", "padding": "0.5rem"},
        ),
        dbc.Button("Push", id="push"),
        dbc.Button("Push Random", id="push_random"),
        dbc.Button("Reset", id="reset"),
        dbc.Button("Show Code", id="show_code"),
        dbc.Button("Show Statistics", id="show_statistics"),
        dbc.Checklist(  # dbc.Switch does not align center vertically
            options=[{"label": "Show Full Labels", "value": 0}],
            id="show_full_labels",
            value=[0] if SHOW_FULL_LABELS else [],
            switch=True,
            inline=True,
            persistence=True,
            persistence_type=USER_STATE_STORAGE_TYPE,
        ),
        html.Span(id="heap_info"),
    ],
    style={"column-gap": "1rem", "display": "flex", "align-items": "center", "margin": "1rem", "flex-wrap": "wrap"},
)
version_slider = html.Div(
    dcc.Slider(id="version", min=0, max=len(DEFAULT_VALUES), step=1, value=len(DEFAULT_VALUES)),
    style={"margin": "0 1rem"},
)
too_many_elements = dbc.Alert(
    f"Too many nodes, only {MAX_ELEMENTS} nodes are displayed.",
    id="too_many_elements",
    color="warning",
    dismissable=True,
    is_open=False,
)
cyto.load_extra_layouts()
cytoscape = cyto.Cytoscape(
    id="cytoscape",
    layout=dict(
        name="dagre",
        rankDir="UD",
        spacingFactor=1.75,
        animate=True,
        animationDuration=200,
        sort="function(a, b) { return a.data('pos') - b.data('pos') }",
    ),
    style={"height": "90%", "width": "100%"},
    stylesheet=[
        {"selector": "edge", "style": {"label": "data(label)", "curve-style": "bezier", "target-arrow-shape": "triangle"}},
        {"selector": "node", "style": {"label": "data(label)"}},
        {"selector": ".rebuilt", "style": {"background-color": "orange"}},
        {"selector": ".shared", "style": {"background-color": "gray"}},
        {"selector": ".is_leaf", "style": {"border-width": 2, "border-color": "green"}},
    ],
    autoRefreshLayout=True,
)
code_modal = dbc.Modal(id="code_modal", size="lg", is_open=False, scrollable=True)
statistics_modal = dbc.Modal(
    id="statistics_modal",
    size="xl",
    is_open=False,
    scrollable=True,
    children=[
        dbc.ModalHeader(dbc.ModalTitle("Statistics")),
        dbc.ModalBody(
            [
                dcc.Graph(id="statistics_graph"),
                dash_table.DataTable(
                    id="statistics_table",
                    style_cell={"textAlign": "center"},
                    columns=[{"name": x, "id": x} for x in ("Pushes", "Height", "Best", "Worst", "Average")],
                ),
            ]
        ),
    ],
)
values = dcc.Store(id="values", storage_type=USER_STATE_STORAGE_TYPE, data=DEFAULT_VALUES)

app = Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    meta_tags=[
        {
            "name": "viewport",
            "content": "user-scalable=no, initial-scale=1, maximum-scale=1, minimum-scale=1, width=device-width, height=device-height, target-densitydpi=device-dpi",
        }
    ],
    title="Persistent Heap",
    update_title=None,
)
app.layout = html.Div(
    [too_many_elements, control_panel, version_slider, cytoscape, code_modal, statistics_modal, values],
    style={"height": "90vh", "width": "98vw", "margin": "auto"},
)
server = app.server

if __name__ == "__main__":
    app.run(debug=True)
