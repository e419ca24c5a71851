"""Tests for link band geometry."""

from pathlib import Path

import pytest

from sankey_layout.layout import compute_layout, link_horizontal
from sankey_layout.layout.links import LinkPath, link_offset
from sankey_layout.parser.loader import load_graph

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def _energy():
    graph = load_graph(EXAMPLES_DIR / "energy.mmd")
    compute_layout(graph, width=800, height=400)
    return graph


def _edge_bands(links, attr):
    return sorted(
        ((getattr(lk, attr) - lk.width / 2, getattr(lk, attr) + lk.width / 2) for lk in links),
    )


def test_outgoing_bands_partition_right_edge():
    graph = _energy()
    for node in graph.nodes:
        bands = _edge_bands(graph.outgoing(node), "y0")
        if not bands:
            continue
        assert bands[0][0] == pytest.approx(node.y0)
        for (_, bottom), (top, _) in zip(bands, bands[1:]):
            assert top == pytest.approx(bottom)
        assert bands[-1][1] <= node.y1 + 1e-6


def test_incoming_bands_partition_left_edge():
    graph = _energy()
    for node in graph.nodes:
        bands = _edge_bands(graph.incoming(node), "y1")
        if not bands:
            continue
        assert bands[0][0] == pytest.approx(node.y0)
        for (_, bottom), (top, _) in zip(bands, bands[1:]):
            assert top == pytest.approx(bottom)
        assert bands[-1][1] <= node.y1 + 1e-6


def test_outgoing_links_ordered_by_target_position():
    graph = _energy()
    for node in graph.nodes:
        targets = [graph.target(lk).y0 for lk in graph.outgoing(node)]
        assert targets == sorted(targets)
        attach = [lk.y0 for lk in graph.outgoing(node)]
        assert attach == sorted(attach)


def test_width_sums_fit_nodes():
    graph = _energy()
    for node in graph.nodes:
        height = node.y1 - node.y0
        assert sum(lk.width for lk in graph.outgoing(node)) <= height + 1e-6
        assert sum(lk.width for lk in graph.incoming(node)) <= height + 1e-6


def test_single_scale_for_all_links():
    graph = _energy()
    for link in graph.links:
        assert link.width == pytest.approx(link.value * graph.value_scale)


def test_link_horizontal_endpoints():
    graph = _energy()
    link = graph.links[0]
    path = link_horizontal(graph, link)
    assert path.x0 == graph.source(link).x1
    assert path.x1 == graph.target(link).x0
    assert (path.y0, path.y1, path.width) == (link.y0, link.y1, link.width)


def test_link_path_control_points():
    path = LinkPath(x0=0, y0=10, x1=100, y1=50, width=4)
    assert path.control_points == ((50, 10), (50, 50))
    assert path.to_svg_path() == "M0,10C50,10 50,50 100,50"


def test_link_offset():
    graph = _energy()
    power = graph.get_node("power")
    ordered = power.source_links
    assert link_offset(graph, ordered, ordered[0]) == 0
    first = graph.links[ordered[0]]
    assert link_offset(graph, ordered, ordered[1]) == pytest.approx(first.width)
