# -*- coding: utf-8 -*-

import networkx as nx
import pytest

from deptree.configuration import ArcConfiguration, build_graph
from deptree.convert import from_networkx, to_networkx
from deptree.exceptions import AlreadyGoverned
from deptree.graph import DependencyGraph


def build_forest():
    g = build_graph([
        ArcConfiguration(30, 20, "nsubj", 0.5),
        ArcConfiguration(10, 20, "obj"),
        ArcConfiguration(50, 40),
    ], elements=[30, 20, 10, 40, 50])
    g.set_label(20, "root")
    return g


def test_to_networkx():
    d = to_networkx(build_forest())
    assert isinstance(d, nx.DiGraph)
    assert list(d.nodes()) == [30, 20, 10, 40, 50]
    assert d.nodes[10]["position"] == 2
    assert d.nodes[20]["label"] == "root"
    assert d.edges[30, 20] == {"label": "nsubj", "score": 0.5}
    assert sorted(d.edges()) == [(10, 20), (30, 20), (50, 40)]
    assert nx.is_forest(d)


def test_round_trip():
    g = build_forest()
    back = from_networkx(to_networkx(g))
    assert back == g
    assert back.elements == g.elements
    assert back.attachment_scores == g.attachment_scores


def test_round_trip_cycles():
    g = DependencyGraph(size=3)
    g.set_arc(0, 1)
    g.set_arc(1, 0, allow_cycle=True)
    back = from_networkx(to_networkx(g), allow_cycles=True)
    assert back == g


def test_from_networkx_custom_attributes():
    d = nx.DiGraph()
    d.add_edge("b", "a", type="sup")
    d.add_edge("c", "a", type="att")
    g = from_networkx(d, elements=["c", "a", "b"], label="type")
    assert g.left_dependents("a") == ["c"]
    assert g.right_dependents("a") == ["b"]
    assert g.label("c") == "att"


def test_from_networkx_rejects_two_governors():
    d = nx.DiGraph()
    d.add_edge(1, 2)
    d.add_edge(1, 3)
    with pytest.raises(AlreadyGoverned):
        from_networkx(d)


def test_cycles_agree_with_networkx():
    g = DependencyGraph(size=9)
    arcs = [(0, 1), (1, 2), (3, 4), (4, 5), (6, 6), (7, 3), (8, 7)]
    for dependent, governor in arcs:
        g.set_arc(dependent, governor, allow_cycle=True)
    g.set_arc(2, 0, allow_cycle=True)
    g.set_arc(5, 3, allow_cycle=True)
    expected = sorted(
        sorted(cycle) for cycle in nx.simple_cycles(to_networkx(g))
    )
    found = sorted(
        sorted(arc.dependent for arc in cycle) for cycle in g.get_cycles()
    )
    assert found == expected == [[0, 1, 2], [3, 4, 5], [6]]
