# -*- coding: utf-8 -*-

"""
Declarative descriptions of arcs and roots, and the builders that turn
lists of them into dependency graphs.
"""

from abc import ABC, abstractmethod

from .graph import DependencyGraph


class DependencyConfiguration(ABC):
    """Abstract base of the arc and root configurations."""

    def __init__(self, label=None, attachment_score=0.0):
        self.label = label
        self.attachment_score = attachment_score

    @abstractmethod
    def _key(self):
        """Returns the tuple that equality and hashing are based on."""

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())


class ArcConfiguration(DependencyConfiguration):
    def __init__(self, dependent, governor, label=None, attachment_score=0.0):
        """
        The configuration of an arc between a dependent and its governor.

        >>> ArcConfiguration(1, 0, label="nsubj")
        ArcConfiguration(1, 0, label='nsubj', attachment_score=0.0)
        """
        super(ArcConfiguration, self).__init__(label, attachment_score)
        self.dependent = dependent
        self.governor = governor

    def _key(self):
        return (self.dependent, self.governor, self.label,
                self.attachment_score)

    def __repr__(self):
        return (
            "ArcConfiguration({!r}, {!r}, label={!r}, "
            "attachment_score={!r})"
        ).format(
            self.dependent, self.governor, self.label, self.attachment_score
        )


class RootConfiguration(DependencyConfiguration):
    def __init__(self, id_, label=None, attachment_score=0.0):
        """
        The configuration of a root element, which has no governor but may
        carry a label and a score.
        """
        super(RootConfiguration, self).__init__(label, attachment_score)
        self.id = id_

    def _key(self):
        return (self.id, self.label, self.attachment_score)

    def __repr__(self):
        return (
            "RootConfiguration({!r}, label={!r}, attachment_score={!r})"
        ).format(
            self.id, self.label, self.attachment_score
        )


def build_graph(configurations, size=None, elements=None, allow_cycles=False):
    """
    Returns a DependencyGraph built from a list of arc and root
    configurations, applied in order. The first invalid configuration
    raises its error.

    Args:
        configurations (iterable): ArcConfiguration and RootConfiguration
            objects
        size (optional: int): the number of elements, for dense ids
        elements (optional: iterable): the ids of the elements, in linear
            order
        allow_cycles (bool): whether arcs closing a cycle are accepted

    >>> g = build_graph([
    ...     ArcConfiguration(1, 0),
    ...     ArcConfiguration(2, 0),
    ...     RootConfiguration(0, label="root"),
    ... ], size=3)
    >>> g.roots, g.label(0)
    ([0], 'root')
    """
    graph = DependencyGraph(size=size, elements=elements)
    for configuration in configurations:
        if isinstance(configuration, ArcConfiguration):
            graph.set_arc(
                configuration.dependent,
                configuration.governor,
                label=configuration.label,
                score=configuration.attachment_score,
                allow_cycle=allow_cycles,
            )
        elif isinstance(configuration, RootConfiguration):
            if configuration.label is not None:
                graph.set_label(configuration.id, configuration.label)
            if configuration.attachment_score:
                graph.set_attachment_score(
                    configuration.id, configuration.attachment_score
                )
        else:
            raise TypeError(
                "Unknown configuration: {!r}".format(configuration)
            )
    return graph


def to_configurations(graph):
    """
    Returns the configurations describing the graph, one per element in
    linear order. Building a graph from them yields an equal graph.

    >>> g = DependencyGraph(size=2)
    >>> g.set_arc(1, 0, label="obj")
    >>> for configuration in to_configurations(g):
    ...     print(configuration)
    RootConfiguration(0, label=None, attachment_score=0.0)
    ArcConfiguration(1, 0, label='obj', attachment_score=0.0)
    """
    configurations = []
    for element in graph:
        head = graph.head(element)
        label = graph.label(element)
        score = graph.attachment_score(element)
        if head is None:
            configurations.append(RootConfiguration(element, label, score))
        else:
            configurations.append(
                ArcConfiguration(element, head, label, score)
            )
    return configurations


def from_triples(triples, root=0, allow_cycles=False):
    """
    Returns a DependencyGraph from a list of [source, target, relationtype]
    triples, where the source is the dependent and the target its governor.
    Triples pointing to the artificial `root` node only set the label of
    their source. The elements are the sorted ids of all other nodes.

    >>> g = from_triples([(1, 2, 'sup'), (3, 2, 'att'), (4, 3, 'att'),
    ...                   (2, 0, 'ROOT')])
    >>> g.elements
    (1, 2, 3, 4)
    >>> g.roots, g.label(2), g.head(4), g.label(4)
    ([2], 'ROOT', 3, 'att')
    """
    triples = list(triples)
    ids = set(src for src, _, _ in triples)
    ids |= set(trg for _, trg, _ in triples if trg != root)
    graph = DependencyGraph(elements=sorted(ids))
    for src, trg, rel in triples:
        if trg == root:
            graph.set_label(src, rel)
        else:
            graph.set_arc(src, trg, label=rel, allow_cycle=allow_cycles)
    return graph
