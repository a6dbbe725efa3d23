"""
Labeled dependency graphs for the syntactic structure of sentences.

A DependencyGraph holds a fixed linear order of elements (tokens) and the
governor -> dependent arcs between them, each element having at most one
governor. On top of it, the package offers cycle-safe construction,
ancestry and cycle queries, projectivity analysis and the canonical
orderings of dependency trees. Adapters build graphs from configuration
lists, relation triples, CoNLL files, spaCy documents and networkx
digraphs; renderers print them as indented trees or Graphviz dot.
"""

from .configuration import (
    ArcConfiguration,
    RootConfiguration,
    build_graph,
    from_triples,
    to_configurations,
)
from .exceptions import (
    AlreadyGoverned,
    ConllFormatError,
    CycleDetected,
    DependencyGraphException,
    InvalidArc,
    InvalidElement,
    PreconditionViolated,
)
from .graph import Arc, DependencyGraph

__version__ = "0.1.0"
