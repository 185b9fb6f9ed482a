from dataclasses import dataclass, field
from typing import Literal

import matplotlib.pyplot as plt
import networkx as nx
import plotly.graph_objects as go
from loguru import logger
from matplotlib.axes import Axes

from isee_config.initial._constants import FALLBACK_COLOR
from isee_config.initial._panels import as_panel_sequence
from isee_config.initial._registry import DEFAULT_REGISTRY, PanelRegistry
from isee_config.preview._utils import _panel_color

PLOT_FORMATS = ("static", "interactive", "none")
# Fixed seed keeps node positions stable between calls.
LAYOUT_SEED = 42


@dataclass
class LinkGraphBuilder:
    """
    Build the directed graph of column-selection links between panels.

    Nodes are panel identifiers; an edge ``a -> b`` means panel ``b`` receives
    its column selection from panel ``a``.
    """

    registry: PanelRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)
    strict: bool = False

    def build(self, sequence) -> nx.DiGraph:
        sequence = as_panel_sequence(sequence)
        graph = nx.DiGraph()

        for panel_id, panel in sequence:
            if panel_id in graph:
                logger.warning(
                    "Panel identifier '{}' is used more than once; the graph keeps "
                    "a single node for it.",
                    panel_id,
                )
                continue
            graph.add_node(
                panel_id,
                panel_type=panel.panel_type,
                color=_panel_color(
                    self.registry, panel_id, panel.panel_type, self.strict
                ),
                width=panel.width,
            )

        for panel_id, panel in sequence:
            if not panel.has_selection_source:
                continue
            source = panel.selection_source
            if source not in graph:
                # dangling links are dropped, never turned into new nodes
                logger.warning(
                    "Panel '{}' receives selections from '{}', which is not part of "
                    "the configuration; the link is ignored.",
                    panel_id,
                    source,
                )
                continue
            graph.add_edge(source, panel_id)

        return graph


def build_link_graph(
    sequence,
    registry: PanelRegistry | None = None,
    strict: bool = False,
) -> nx.DiGraph:
    """
    Translate an ``initial`` configuration into a network of panels.

    Parameters
    ----------
    sequence
        The configuration, as accepted by ``as_panel_sequence``.
    registry
        Panel type registry used for node colors.
    strict
        Raise on panels of unregistered type instead of leaving them uncolored.

    Returns
    -------
    networkx.DiGraph
        One node per panel identifier with ``panel_type``, ``color`` and
        ``width`` attributes, and one edge per selection link.
    """
    return LinkGraphBuilder(
        registry=DEFAULT_REGISTRY if registry is None else registry, strict=strict
    ).build(sequence)


def _check_plot_format(plot_format: str) -> None:
    if plot_format not in PLOT_FORMATS:
        raise ValueError(
            f"plot_format must be one of {list(PLOT_FORMATS)}, got '{plot_format}'."
        )


def _node_colors(graph: nx.DiGraph) -> list[str]:
    return [
        color if color is not None else FALLBACK_COLOR
        for _, color in graph.nodes(data="color")
    ]


def network_figure(graph: nx.DiGraph) -> go.Figure:
    """Interactive plotly figure of a panel link graph."""
    pos = nx.spring_layout(graph, seed=LAYOUT_SEED) if len(graph) else {}
    fig = go.Figure()
    for source, target in graph.edges():
        x0, y0 = pos[source]
        x1, y1 = pos[target]
        fig.add_annotation(
            x=x1,
            y=y1,
            ax=x0,
            ay=y0,
            xref="x",
            yref="y",
            axref="x",
            ayref="y",
            showarrow=True,
            arrowhead=2,
            arrowwidth=1.5,
            arrowcolor="grey",
            standoff=12,
        )
    nodes = list(graph.nodes(data=True))
    fig.add_trace(
        go.Scatter(
            x=[pos[node][0] for node, _ in nodes],
            y=[pos[node][1] for node, _ in nodes],
            mode="markers+text",
            text=[node for node, _ in nodes],
            textposition="top center",
            hovertext=[attrs.get("panel_type") for _, attrs in nodes],
            hoverinfo="text",
            marker={"size": 20, "color": _node_colors(graph)},
        )
    )
    fig.update_layout(
        showlegend=False,
        xaxis={"visible": False},
        yaxis={"visible": False},
        plot_bgcolor="white",
    )
    return fig


def render_network(
    graph: nx.DiGraph,
    plot_format: Literal["static", "interactive", "none"] = "static",
    ax: Axes | None = None,
) -> nx.DiGraph:
    """
    Render a panel link graph as a side effect and return it.

    Parameters
    ----------
    graph
        Graph built by ``build_link_graph``.
    plot_format
        ``"static"`` draws on a matplotlib axis, ``"interactive"`` shows a
        plotly widget, ``"none"`` skips rendering.
    ax
        Axis to draw on for ``"static"``. A new figure is created if ``None``.
    """
    _check_plot_format(plot_format)

    if plot_format == "static":
        if ax is None:
            _, ax = plt.subplots()
        if len(graph):
            nx.draw_networkx(
                graph,
                pos=nx.spring_layout(graph, seed=LAYOUT_SEED),
                ax=ax,
                node_color=_node_colors(graph),
                edge_color="grey",
                arrows=True,
                font_size=8,
            )
        ax.set_axis_off()
    elif plot_format == "interactive":
        network_figure(graph).show()
    else:
        logger.info("Returning the graph object...")
    return graph


def view_initial_network(
    sequence,
    plot_format: Literal["static", "interactive", "none"] = "static",
    registry: PanelRegistry | None = None,
    strict: bool = False,
) -> nx.DiGraph:
    """
    View an ``initial`` configuration as a network of panels.

    Panels are the nodes, colored by panel type; selection links between
    panels are directed edges.

    Returns
    -------
    networkx.DiGraph
        The graph underlying the visual representation.
    """
    _check_plot_format(plot_format)
    graph = build_link_graph(sequence, registry=registry, strict=strict)
    return render_network(graph, plot_format=plot_format)
