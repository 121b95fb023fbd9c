import logging
from dataclasses import dataclass, field, fields
from typing import Any, Optional

import dash_bootstrap_components as dbc
import dash_cytoscape as cyto
import pandas as pd
import plotly.express as px
import plotly.graph_objs as go
from dash import Dash, Input, Output, State, callback, ctx, dash_table, dcc, html, no_update
from dash_iconify import DashIconify
from flask_executor import Executor

from .Config import *
from .Simulations import Simulations
from .Trees import TreeView


def warning_toast(message: str) -> dbc.Toast:
    return dbc.Toast(
        message,
        id="warning_notification",
        header=html.Span([DashIconify(icon="material-symbols:warning", width=18), " Warning"]),
        is_open=True,
        dismissable=True,
        duration=10000,
        style={"position": "fixed", "top": "1rem", "right": "1rem", "zIndex": 1060},
    )


def world_figure(snapshot: pd.DataFrame, selected: Optional[int]) -> go.Figure:
    meat = snapshot[snapshot["kind"] == "Meat"]
    bobs = snapshot[snapshot["kind"] == "Bob"]
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=meat["x"], y=meat["y"], mode="markers", name="Meat", marker={"color": "firebrick", "size": 5}, hoverinfo="skip"))
    fig.add_trace(
        go.Scatter(
            x=bobs["x"],
            y=bobs["y"],
            mode="markers",
            name="Bob",
            customdata=bobs["id"],
            marker={
                "color": bobs["energy"],
                "colorscale": "Viridis",
                "cmin": 0,
                "cmax": 1,
                "size": 12,
                "line": {"color": "black", "width": [3 if i == selected else 0 for i in bobs["id"]]},
            },
            hovertemplate="Bob %{customdata}<br>energy %{marker.color:.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        xaxis={"range": [0, 1], "constrain": "domain", "showgrid": False},
        yaxis={"range": [0, 1], "scaleanchor": "x", "showgrid": False},
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        showlegend=False,
        uirevision="world",
    )
    return fig


@dataclass
class OnDataCallbackOutput:
    progress__value: int = 0
    progress__max: int = 1
    progress__animated: bool = False
    progress__label: str = ""
    tick_interval__disabled: bool = True
    step__disabled: bool = True
    expand_all__disabled: bool = True
    reset__disabled: bool = True
    show_statistics__disabled: bool = True
    visiblity_state__data: Optional[str] = None
    selected_bob__data: Optional[int] = None
    world__figure: dict | go.Figure = field(default_factory=dict)
    simulation_time__children: str = ""
    cytoscape__elements: list[dict] = field(default_factory=list)
    notifications_container__children: Any = no_update
    statistics_modal__is_open: bool = False
    statistics_graph__figure: dict | go.Figure = field(default_factory=dict)
    statistics_table__data: list = field(default_factory=list)

    @classmethod
    def outputs(cls) -> list[Output]:
        return [Output(*field.name.split("__")) for field in fields(cls)]

    def to_list(self) -> list:
        return [getattr(self, field.name) for field in fields(self)]


@callback(
    OnDataCallbackOutput.outputs(),
    Input("input_seed", "value"),
    Input("input_generations", "value"),
    Input("show_full_labels", "value"),
    Input("run", "value"),
    Input("cytoscape", "tapNode"),
    Input("world", "clickData"),
    Input("step", "n_clicks"),
    Input("expand_all", "n_clicks"),
    Input("reset", "n_clicks"),
    Input("show_statistics", "n_clicks"),
    Input("tick_interval", "n_intervals"),
    State("visiblity_state", "data"),
    State("selected_bob", "data"),
)
def on_data(
    input_seed: Optional[int],
    input_generations: Optional[int],
    show_full_labels: list,
    run: list,
    node: dict,
    click: Optional[dict],
    _step: int,
    _expand_all: int,
    _reset: int,
    _show_statistics: int,
    _n_intervals: int,
    visiblity_state: Optional[str],
    selected_bob: Optional[int],
):
    ret = OnDataCallbackOutput()
    if input_seed is None or input_generations is None:
        return ret.to_list()
    seed, generations = int(input_seed), int(input_generations)

    trigger_id = ctx.triggered_id
    if trigger_id in ("input_seed", "input_generations", "reset"):
        visiblity_state = None
    if trigger_id in ("input_seed", "input_generations"):
        selected_bob = None

    holder = Simulations.get_holder(seed, generations)
    if not holder.initialized():
        ret.progress__value, ret.progress__max = i, total = holder.get_progress()
        ret.progress__label = f"{i}/{total}"
        if not holder.get_and_set_initialize_scheduled():
            executor.submit(holder.initialize, seed, generations)
        ret.progress__animated = True
        ret.tick_interval__disabled = False
        return ret.to_list()
    ret.progress__value = ret.progress__max = max(generations, 1)
    ret.progress__label = f"{generations}/{generations}"
    ret.show_statistics__disabled = False

    if trigger_id == "tick_interval" and run:
        holder.step(STEPS_PER_TICK)
    elif trigger_id == "step":
        holder.step()

    if trigger_id == "world" and click:
        point = click["points"][0]
        if "customdata" in point and point["customdata"] != selected_bob:
            selected_bob = int(point["customdata"])
            visiblity_state = None

    with holder.lock:
        simulation = holder.simulation
        bobs = simulation.bobs
        ret.simulation_time__children = f"t = {simulation.time:.1f}s, {len(bobs)} bobs"
        if not bobs:
            if trigger_id in ("tick_interval", "step"):
                ret.notifications_container__children = warning_toast("Every Bob has died, pick another seed to start over.")
            ret.world__figure = world_figure(simulation.snapshot(), None)
            return ret.to_list()
        bob = next((bob for bob in bobs if bob.id == selected_bob), None)
        if bob is None:
            bob, visiblity_state = bobs[0], None
        ret.selected_bob__data = bob.id
        ret.tick_interval__disabled = not run
        ret.step__disabled = ret.expand_all__disabled = ret.reset__disabled = False

        view = TreeView(bob.brain, visiblity_state)
        if trigger_id == "show_statistics":
            history = holder.history
            ret.statistics_graph__figure = px.line(history, x="generation", y=["best", "mean", "worst"], title="Fitness per Generation", markers=True)
            ret.statistics_table__data = history.round(3).to_dict("records")
            ret.statistics_modal__is_open = True
        elif trigger_id == "cytoscape":
            view.on_tap_node(int(node["data"]["id"]))
        elif trigger_id == "expand_all":
            if not view.expand_all():
                ret.notifications_container__children = warning_toast(f"Too many nodes, only {MAX_ELEMENTS} nodes are displayed.")
        ret.visiblity_state__data = view.get_visiblity_state()
        ret.cytoscape__elements = view.visible_elements(bool(show_full_labels))
        ret.world__figure = world_figure(simulation.snapshot(), bob.id)
    return ret.to_list()


@callback(Output("input_seed", "invalid"), Input("input_seed", "value"))
def on_input_seed_invalid(input_seed: Optional[int]):
    return input_seed is None


@callback(Output("input_generations", "invalid"), Input("input_generations", "value"))
def on_input_generations_invalid(input_generations: Optional[int]):
    return input_generations is None


def labelled(label: str, component) -> dbc.Row:
    return dbc.Row([label, component], style={"column-gap": "0", "display": "flex", "align-items": "center", "padding": "0.5rem"})


control_panel = html.Div(
    [
        labelled(
            "Seed:",
            dbc.Input(
                id="input_seed",
                type="number",
                step=1,
                style={"width": "8rem"},
                debounce=True,
                value=SAMPLE_SEED,
                persistence=True,
                persistence_type=USER_STATE_STORAGE_TYPE,
            ),
        ),
        labelled(
            "Generations:",
            dbc.Input(
                id="input_generations",
                type="number",
                min=0,
                step=1,
                style={"width": "5rem"},
                debounce=True,
                value=EVOLVE_GENERATIONS,
                persistence=True,
                persistence_type=USER_STATE_STORAGE_TYPE,
            ),
        ),
        dbc.Progress(id="progress", value=0, striped=True, animated=True, style={"width": "10rem", "height": "1.3rem"}),
        dcc.Interval(id="tick_interval", interval=TICK_INTERVAL_MS, n_intervals=0, disabled=True),
        dbc.Checklist(
            options=[{"label": "Run", "value": 0}],
            id="run",
            value=[],
            switch=True,
            inline=True,
        ),
        dbc.Button("Step", id="step", disabled=True),
        html.Span(id="simulation_time"),
        dbc.Button("Expand All", id="expand_all", disabled=True),
        dbc.Button("Reset", id="reset", disabled=True),
        dbc.Button("Show Statistics", id="show_statistics", disabled=True),
        dbc.Checklist(
            options=[{"label": "Show Full Labels", "value": 0}],
            id="show_full_labels",
            value=[0] if SHOW_FULL_LABELS else [],
            switch=True,
            inline=True,
            persistence=True,
            persistence_type=USER_STATE_STORAGE_TYPE,
        ),
    ],
    style={"column-gap": "1rem", "display": "flex", "align-items": "center", "margin": "1rem", "flex-wrap": "wrap"},
)
world = dcc.Graph(id="world", config={"displayModeBar": False}, style={"height": "100%", "width": "40%"})
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
    style={"height": "100%", "width": "60%"},
    stylesheet=[
        {"selector": "edge", "style": {"label": "data(answer)", "curve-style": "bezier", "target-arrow-shape": "triangle"}},
        {"selector": "node", "style": {"label": "data(label)"}},
        {"selector": ".has_hidden_child", "style": {"background-color": "red", "line-color": "red"}},
        {"selector": ".is_leaf", "style": {"background-color": "green", "line-color": "green"}},
        {"selector": "label", "style": {"color": "#0095FF"}},
    ],
    autoRefreshLayout=True,
)
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
                    columns=[{"name": x.capitalize(), "id": x} for x in ("generation", "best", "mean", "worst")],
                ),
            ]
        ),
    ],
)
visiblity_state = dcc.Store(id="visiblity_state", storage_type=USER_STATE_STORAGE_TYPE)
selected_bob = dcc.Store(id="selected_bob", storage_type=USER_STATE_STORAGE_TYPE)

app = Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    meta_tags=[
        {
            "name": "viewport",
            "content": "user-scalable=no, initial-scale=1, maximum-scale=1, minimum-scale=1, width=device-width, height=device-height, target-densitydpi=device-dpi",
        }
    ],
    title="Bob Brains",
    update_title=None,
)
app.layout = html.Div(
    [
        html.Div(id="notifications_container"),
        control_panel,
        html.Div([world, cytoscape], style={"display": "flex", "height": "80vh"}),
        statistics_modal,
        visiblity_state,
        selected_bob,
    ],
    style={"height": "90vh", "width": "98vw", "margin": "auto"},
)
server = app.server
executor = Executor(server)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
