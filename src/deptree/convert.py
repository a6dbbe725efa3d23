# -*- coding: utf-8 -*-

"""
Conversion between dependency graphs and networkx digraphs. Edges point
from the dependent to its governor, as in argumentation trees.
"""

import networkx as nx

from .graph import DependencyGraph


def to_networkx(graph, label="label", score="score"):
    """
    Returns an nx.DiGraph with one node per element and one edge from every
    dependent to its governor. Nodes carry their `position`, nodes and
    edges the label and attachment score.

    >>> g = DependencyGraph(size=3)
    >>> g.set_arc(0, 1, label="det", score=0.5)
    >>> d = to_networkx(g)
    >>> list(d.edges(data=True))
    [(0, 1, {'label': 'det', 'score': 0.5})]
    >>> d.nodes[2]["position"]
    2
    """
    d = nx.DiGraph()
    for element in graph:
        attrs = {"position": graph.position(element)}
        if graph.is_root(element):
            attrs[label] = graph.label(element)
            attrs[score] = graph.attachment_score(element)
        d.add_node(element, **attrs)
    for arc in graph.arcs():
        d.add_edge(
            arc.dependent,
            arc.governor,
            **{
                label: graph.label(arc.dependent),
                score: graph.attachment_score(arc.dependent),
            }
        )
    return d


def from_networkx(
    digraph, elements=None, label="label", score="score", allow_cycles=False
):
    """
    Returns a DependencyGraph from an nx.DiGraph whose edges point from
    dependents to governors. Without explicit `elements`, nodes with a
    `position` attribute are ordered by it, all others by their sorted ids.
    Labels and scores of root nodes are read from the node data.

    >>> d = nx.DiGraph()
    >>> d.add_edge(1, 2, label="sup")
    >>> d.add_edge(3, 2, label="att")
    >>> g = from_networkx(d)
    >>> g.roots, g.dependents(2)
    ([2], [1, 3])

    Raises:
        AlreadyGoverned: when a node has more than one outgoing edge.
    """
    if elements is None:
        if all("position" in data for _, data in digraph.nodes(data=True)):
            elements = sorted(
                digraph.nodes(), key=lambda n: digraph.nodes[n]["position"]
            )
        else:
            elements = sorted(digraph.nodes())
    graph = DependencyGraph(elements=elements)
    for node, data in digraph.nodes(data=True):
        if data.get(label) is not None:
            graph.set_label(node, data[label])
        if data.get(score):
            graph.set_attachment_score(node, data[score])
    for src, trg, data in digraph.edges(data=True):
        graph.set_arc(
            src,
            trg,
            label=data.get(label),
            score=data.get(score, 0.0),
            allow_cycle=allow_cycles,
        )
    return graph
