# -*- coding: utf-8 -*-

import pytest

from deptree.configuration import (
    DependencyConfiguration,
    ArcConfiguration,
    RootConfiguration,
    build_graph,
    from_triples,
    to_configurations,
)
from deptree.exceptions import AlreadyGoverned, CycleDetected, InvalidElement


def test_build_with_explicit_elements():
    g = build_graph(
        [ArcConfiguration(11, 12, "det", 0.4), RootConfiguration(12, "root")],
        elements=[11, 12],
    )
    assert g.heads == [12, None]
    assert g.labels == ["det", "root"]
    assert g.attachment_scores == [0.4, 0.0]


def test_root_score():
    g = build_graph([RootConfiguration(0, attachment_score=0.9)], size=1)
    assert g.attachment_score(0) == 0.9
    assert g.label(0) is None


def test_cycles_rejected_by_default():
    configurations = [
        ArcConfiguration(1, 2),
        ArcConfiguration(2, 4),
        ArcConfiguration(3, 2),
        ArcConfiguration(4, 3),
    ]
    with pytest.raises(CycleDetected):
        build_graph(configurations, size=5)
    g = build_graph(configurations, size=5, allow_cycles=True)
    assert g.contains_cycle()


def test_first_failure_propagates():
    with pytest.raises(AlreadyGoverned):
        build_graph([ArcConfiguration(0, 1), ArcConfiguration(0, 2)], size=3)
    with pytest.raises(InvalidElement):
        build_graph([RootConfiguration(7, "root")], size=3)


def test_unknown_configuration():
    with pytest.raises(TypeError):
        build_graph([(0, 1)], size=2)


def test_configuration_equality():
    assert ArcConfiguration(1, 0, "x") == ArcConfiguration(1, 0, "x")
    assert ArcConfiguration(1, 0, "x") != ArcConfiguration(1, 0, "y")
    assert RootConfiguration(1) != ArcConfiguration(1, 0)
    assert len({RootConfiguration(1), RootConfiguration(1)}) == 1


def test_configuration_base_is_abstract():
    with pytest.raises(TypeError):
        DependencyConfiguration()


def test_to_configurations_round_trip():
    g = build_graph([
        ArcConfiguration(0, 2, "nsubj", 0.5),
        RootConfiguration(2, "root", 0.75),
        ArcConfiguration(1, 2, "aux"),
    ], size=3)
    configurations = to_configurations(g)
    assert configurations == [
        ArcConfiguration(0, 2, "nsubj", 0.5),
        ArcConfiguration(1, 2, "aux"),
        RootConfiguration(2, "root", 0.75),
    ]
    rebuilt = build_graph(configurations, size=3)
    assert rebuilt == g
    assert rebuilt.attachment_scores == g.attachment_scores


def test_from_triples():
    triples = [(1, 2, "sup"), (3, 2, "att"), (4, 3, "att")]
    g = from_triples(triples)
    assert g.elements == (1, 2, 3, 4)
    assert g.roots == [2]
    assert g.dependents(2) == [1, 3]
    assert g.label(4) == "att"
    assert g.is_dag()


def test_from_triples_with_cycle():
    triples = [(1, 2, "sup"), (2, 1, "sup")]
    with pytest.raises(CycleDetected):
        from_triples(triples)
    assert from_triples(triples, allow_cycles=True).contains_cycle()
