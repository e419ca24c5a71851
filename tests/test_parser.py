"""Tests for the Mermaid-style parser and the JSON loader."""

import json
from pathlib import Path

import pytest

from sankey_layout.errors import GraphIntegrityError
from sankey_layout.layout import compute_layout
from sankey_layout.parser.loader import graph_from_dict, load_graph
from sankey_layout.parser.mermaid import parse_sankey_mermaid
from sankey_layout.parser.model import ById

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def test_parse_title():
    graph = parse_sankey_mermaid("%%sankey title: My Flows\n")
    assert graph.title == "My Flows"


def test_parse_links_create_nodes():
    graph = parse_sankey_mermaid("a -->|10| b\nb -->|4| c\n")
    assert [n.id for n in graph.nodes] == ["a", "b", "c"]
    assert [lk.value for lk in graph.links] == [10, 4]
    assert graph.links[0].source_ref == ById("a")
    assert graph.links[0].target_ref == ById("b")


def test_parse_link_value_with_separators():
    graph = parse_sankey_mermaid("a -->| 1,250.5 | b\n")
    assert graph.links[0].value == 1250.5


def test_parse_node_label():
    graph = parse_sankey_mermaid("coal[Hard coal]\ncoal -->|3| power\n")
    assert graph.get_node("coal").label == "Hard coal"
    assert graph.get_node("power").label is None
    assert graph.get_node("power").display_label == "power"


def test_parse_node_directive():
    text = (
        "%%sankey node: coal | Coal | 40\n"
        "%%sankey node: gas | Gas\n"
        "coal -->|25| power\n"
    )
    graph = parse_sankey_mermaid(text)
    coal = graph.get_node("coal")
    assert coal.label == "Coal"
    assert coal.fixed_value == 40
    assert graph.get_node("gas").fixed_value is None
    # Directive nodes come first, in definition order
    assert [n.id for n in graph.nodes] == ["coal", "gas", "power"]


def test_parse_color_directive():
    graph = parse_sankey_mermaid("%%sankey color: coal | #444444\ncoal -->|1| power\n")
    assert graph.colors == {"coal": "#444444"}


def test_comments_and_blank_lines_ignored():
    graph = parse_sankey_mermaid("%% a comment\n\n   \na -->|1| b\n")
    assert len(graph.links) == 1


def test_parse_sankey_beta_block():
    text = (
        "sankey-beta\n"
        "%% source,target,value\n"
        "Salary,Budget,4000\n"
        '"Side job",Budget,500\n'
        "Budget,Rent,1500\n"
    )
    graph = parse_sankey_mermaid(text)
    assert [n.id for n in graph.nodes] == ["Salary", "Budget", "Side job", "Rent"]
    assert graph.links[1].value == 500


def test_csv_rows_need_three_columns():
    with pytest.raises(ValueError, match="Line 2"):
        parse_sankey_mermaid("sankey-beta\na,b\n")


def test_invalid_value():
    with pytest.raises(ValueError, match="invalid flow value"):
        parse_sankey_mermaid("a -->|lots| b\n")


def test_unparseable_line():
    with pytest.raises(ValueError, match="cannot parse"):
        parse_sankey_mermaid("a --> b\n")


def test_graph_from_dict():
    graph = graph_from_dict({
        "title": "T",
        "nodes": [{"id": 1, "label": "One", "value": 9, "color": "#f00"}, {"id": 2}],
        "links": [{"source": 1, "target": 2, "value": 3}],
    })
    assert graph.title == "T"
    assert graph.nodes[0].label == "One"
    assert graph.nodes[0].fixed_value == 9
    assert graph.colors == {1: "#f00"}
    assert graph.links[0].source_ref == ById(1)


def test_graph_from_dict_derives_nodes_from_links():
    graph = graph_from_dict({"links": [
        {"source": "x", "target": "y", "value": 1},
        {"source": "y", "target": "z", "value": 1},
    ]})
    assert [n.id for n in graph.nodes] == ["x", "y", "z"]


def test_graph_from_dict_unknown_link_target():
    graph = graph_from_dict({
        "nodes": [{"id": "x"}],
        "links": [{"source": "x", "target": "nowhere", "value": 1}],
    })
    with pytest.raises(GraphIntegrityError):
        compute_layout(graph)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"nodes": [{"label": "no id"}]},
        {"links": [{"source": "a", "value": 1}]},
    ],
)
def test_graph_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        graph_from_dict(data)


def test_load_graph_examples_agree():
    from_text = load_graph(EXAMPLES_DIR / "energy.mmd")
    from_json = load_graph(EXAMPLES_DIR / "energy.json")
    assert from_text.title == from_json.title
    assert sorted(n.id for n in from_text.nodes) == sorted(n.id for n in from_json.nodes)
    assert len(from_text.links) == len(from_json.links)


def test_load_graph_json(tmp_path):
    path = tmp_path / "flows.json"
    path.write_text(json.dumps({"links": [{"source": "a", "target": "b", "value": 2}]}))
    graph = load_graph(path)
    assert len(graph.nodes) == 2
