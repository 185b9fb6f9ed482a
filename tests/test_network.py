import matplotlib.pyplot as plt
import networkx as nx
import plotly.graph_objects as go
import pytest

from isee_config.initial import PanelDescriptor, PanelSequence, UnrecognizedPanelTypeError
from isee_config.preview import (
    LinkGraphBuilder,
    build_link_graph,
    network_figure,
    render_network,
    view_initial_network,
)


def test_linked_panels_give_one_edge(linked_initial):
    graph = build_link_graph(linked_initial)
    assert isinstance(graph, nx.DiGraph)
    assert list(graph.nodes) == ["p1", "p2"]
    assert list(graph.edges) == [("p1", "p2")]
    assert graph.nodes["p1"]["color"] == "#3565AA"
    assert graph.nodes["p2"]["panel_type"] == "FeatureAssayPlot"
    assert graph.nodes["p2"]["width"] == 8


def test_every_panel_is_a_node(default_initial):
    graph = build_link_graph(default_initial)
    assert list(graph.nodes) == list(default_initial.ids)
    assert list(graph.edges) == [("ReducedDimensionPlot1", "FeatureAssayPlot1")]


def test_no_links_gives_no_edges():
    seq = PanelSequence.from_panels(
        [PanelDescriptor("RowDataTable"), PanelDescriptor("ColumnDataTable")]
    )
    graph = build_link_graph(seq)
    assert graph.number_of_nodes() == 2
    assert graph.number_of_edges() == 0


def test_self_loop_is_kept():
    seq = PanelSequence(
        [("loop", PanelDescriptor("ReducedDimensionPlot", selection_source="loop"))]
    )
    assert list(build_link_graph(seq).edges) == [("loop", "loop")]


def test_dangling_source_is_dropped_with_warning(log_records):
    seq = PanelSequence(
        [("p2", PanelDescriptor("FeatureAssayPlot", selection_source="gone"))]
    )
    graph = build_link_graph(seq)
    assert list(graph.nodes) == ["p2"]
    assert graph.number_of_edges() == 0
    warnings = [msg for level, msg in log_records if level == "WARNING"]
    assert len(warnings) == 1
    assert "gone" in warnings[0]


def test_duplicated_ids_share_a_node(linked_initial, log_records):
    seq = PanelSequence(
        list(linked_initial) + [("p1", PanelDescriptor("RowDataTable"))]
    )
    graph = build_link_graph(seq)
    assert graph.number_of_nodes() == 2
    assert graph.nodes["p1"]["panel_type"] == "ReducedDimensionPlot"
    assert any(level == "WARNING" and "p1" in msg for level, msg in log_records)


def test_unknown_type_node_is_uncolored():
    seq = PanelSequence([("fancy", PanelDescriptor("FancyPlotPanel"))])
    assert build_link_graph(seq).nodes["fancy"]["color"] is None
    with pytest.raises(UnrecognizedPanelTypeError):
        LinkGraphBuilder(strict=True).build(seq)


def test_render_none_returns_graph(linked_initial, log_records):
    graph = build_link_graph(linked_initial)
    assert render_network(graph, plot_format="none") is graph
    assert ("INFO", "Returning the graph object...") in log_records


def test_render_static_draws_on_axis(linked_initial):
    fig, ax = plt.subplots()
    graph = build_link_graph(linked_initial)
    assert render_network(graph, plot_format="static", ax=ax) is graph
    assert len(ax.collections) > 0
    plt.close(fig)


def test_render_static_empty_graph():
    fig, ax = plt.subplots()
    render_network(nx.DiGraph(), plot_format="static", ax=ax)
    plt.close(fig)


def test_render_rejects_unknown_format(linked_initial):
    with pytest.raises(ValueError, match="plot_format"):
        view_initial_network(linked_initial, plot_format="igraph")


def test_view_initial_network_without_rendering(linked_initial):
    graph = view_initial_network(linked_initial, plot_format="none")
    assert list(graph.edges) == [("p1", "p2")]


def test_network_figure(linked_initial):
    fig = network_figure(build_link_graph(linked_initial))
    assert isinstance(fig, go.Figure)
    assert len(fig.layout.annotations) == 1
    assert list(fig.data[0].text) == ["p1", "p2"]
    assert list(fig.data[0].marker.color) == ["#3565AA", "#7BB854"]


def test_render_network_rejects_unknown_format(linked_initial):
    graph = build_link_graph(linked_initial)
    with pytest.raises(ValueError, match="plot_format"):
        render_network(graph, plot_format="visNetwork")


def test_plot_format_is_checked_before_building():
    with pytest.raises(ValueError, match="plot_format"):
        view_initial_network("not a configuration", plot_format="igraph")
