# -*- coding: utf-8 -*-

"""
Human readable renderings of dependency graphs: an indented tree dump and
Graphviz dot source. Both only use the public queries of the graph.
"""

from pydot import graph_from_dot_data

LEFT_DEP_PADDING = "+--l "
RIGHT_DEP_PADDING = "+--r "
EMPTY_PADDING = "     "
CONTINUE_PADDING = "|    "
NULL_KEYWORD = "_"

_LEFT, _RIGHT = "l", "r"


def _display_name(graph, element, words):
    if words is None:
        return str(element)
    return words[graph.position(element)]


def _element_string(graph, element, words):
    label = graph.label(element)
    return "{} {}".format(
        _display_name(graph, element, words),
        NULL_KEYWORD if label is None else label,
    )


def _subtree_lines(graph, root, words):
    lines = []
    stack = [(root, None, ())]
    while stack:
        element, side, last_flags = stack.pop()
        padding = ""
        if side is not None:
            # one column per ancestor below the root: blank once the
            # ancestor was the last of its siblings
            padding = "".join(
                EMPTY_PADDING if last else CONTINUE_PADDING
                for last in last_flags[:-1]
            )
            padding += LEFT_DEP_PADDING if side == _LEFT else RIGHT_DEP_PADDING
        lines.append(padding + _element_string(graph, element, words))

        children = [(d, _LEFT) for d in graph.left_dependents(element)]
        children += [(d, _RIGHT) for d in graph.right_dependents(element)]
        for i in reversed(range(len(children))):
            child, child_side = children[i]
            is_last = i == len(children) - 1
            stack.append((child, child_side, last_flags + (is_last,)))
    return lines


def tree_to_string(graph, words=None):
    """
    Returns the tree dump of a dependency graph: one line per element,
    depth first, left dependents before right dependents. Every root starts
    its own block.

    Args:
        graph (DependencyGraph): the graph to print
        words (optional: list): the display names of the elements, in
            linear order. Defaults to the element ids.

    >>> from .configuration import build_graph, ArcConfiguration
    >>> g = build_graph([ArcConfiguration(1, 0, "det"),
    ...                  ArcConfiguration(3, 4)], size=5)
    >>> print(tree_to_string(g))
    0 _
    +--r 1 det
    <BLANKLINE>
    2 _
    <BLANKLINE>
    4 _
    +--l 3 _
    """
    if words is not None:
        assert len(words) == len(graph), "Expected one word per element."
    blocks = [
        "\n".join(_subtree_lines(graph, root, words)) for root in graph.roots
    ]
    return "\n\n".join(blocks)


def _escape(text):
    return str(text).replace("\\", "\\\\").replace('"', "''")


def export_to_dot(graph, words=None):
    """
    Returns the graph as Graphviz dot source. The elements are laid out in
    linear order, arcs point from the governor to the dependent.

    >>> from .graph import DependencyGraph
    >>> g = DependencyGraph(size=2)
    >>> g.set_arc(1, 0, label="obj")
    >>> print(export_to_dot(g, words=["eat", "apples"]))
    digraph G {
    // automatically generated
    subgraph tokens {
    node [shape=box];
    rank=same;
    t0 [label="eat"];
    t1 [label="apples"];
    subgraph linearity {
    edge [weight=8, style=invis];
    t0 -> t1;
    }
    }
    subgraph arcs {
    edge [arrowhead=open];
    t0 -> t1 [label="obj"];
    }
    }
    """
    if words is not None:
        assert len(words) == len(graph), "Expected one word per element."

    template_graph = "digraph G {\n// %s\n%s\n}"  # name content
    template_subgraph = "subgraph %s {\n%s\n}"  # name content
    template_node_label = '%s [label="%s"];'  # id label
    template_edge = "%s -> %s%s;"  # source target attributes

    def node_id(element):
        return "t%d" % graph.position(element)

    # token nodes in linear order, chained by invisible edges
    data = "node [shape=box];\nrank=same;"
    for element in graph:
        name = _display_name(graph, element, words)
        data += "\n" + template_node_label % (node_id(element), _escape(name))
    edges = "edge [weight=8, style=invis];"
    for src, trg in zip(graph.elements, graph.elements[1:]):
        edges += "\n" + template_edge % (node_id(src), node_id(trg), "")
    data += "\n" + template_subgraph % ("linearity", edges)
    content = template_subgraph % ("tokens", data)

    arcs = "edge [arrowhead=open];"
    for arc in graph.arcs():
        label = graph.label(arc.dependent)
        attributes = "" if label is None else ' [label="%s"]' % _escape(label)
        arcs += "\n" + template_edge % (
            node_id(arc.governor),
            node_id(arc.dependent),
            attributes,
        )
    content += "\n" + template_subgraph % ("arcs", arcs)

    return template_graph % ("automatically generated", content)


def render_as_dot(graph, words=None):
    """Returns the parsed pydot graph of the dependency graph."""
    [dot_graph] = graph_from_dot_data(export_to_dot(graph, words=words))
    return dot_graph


def render_as_png(graph, filename, words=None):
    render_as_dot(graph, words=words).write_png(filename)


def render_as_pdf(graph, filename, words=None):
    render_as_dot(graph, words=words).write_pdf(filename)
