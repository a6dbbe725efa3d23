# -*- coding: utf-8 -*-

"""
The dependency graph: a set of elements in linear order, connected by
governor -> dependent arcs, each element having at most one governor.

All the mutable state is stored in dense lists indexed by the position of
an element in the linear order. The mapping from element ids to positions
is built once at construction and shared by clones.
"""

import bisect
import logging
from collections import deque, namedtuple

from .exceptions import (
    AlreadyGoverned,
    CycleDetected,
    InvalidArc,
    InvalidElement,
    PreconditionViolated,
)
from .render import tree_to_string


Arc = namedtuple("Arc", ["dependent", "governor"])
"""A directed arc, stored as (dependent, governor)."""


# states of an element during the cycle scan
_UNVISITED, _ON_WALK, _DONE = 0, 1, 2


class DependencyGraph(object):
    def __init__(self, size=None, elements=None):
        """
        A dependency graph over a fixed linear order of elements. Initially
        no arc is set and every element is a root.

        Args:
            size (optional: int): build the dense linear order 0 .. size-1
            elements (optional: iterable): the ids of the elements, in
                linear order

        Raises:
            ValueError: when not exactly one of `size` and `elements` is
                provided, or when the elements are not distinct.

        >>> g = DependencyGraph(size=3)
        >>> g.elements
        (0, 1, 2)
        >>> g.roots
        [0, 1, 2]
        >>> DependencyGraph(elements=[10, 20, 30]).position(20)
        1
        >>> DependencyGraph(size=3, elements=[1, 2, 3])
        Traceback (most recent call last):
        ...
        ValueError: Provide either the size or the elements of the graph.
        """
        if (size is None) == (elements is None):
            raise ValueError(
                "Provide either the size or the elements of the graph."
            )
        if elements is None:
            elements = range(size)
        self.elements = tuple(elements)
        self._positions = {e: i for i, e in enumerate(self.elements)}
        if len(self._positions) != len(self.elements):
            raise ValueError("The elements of the graph must be distinct.")
        n = len(self.elements)
        self._heads = [None] * n
        self._labels = [None] * n
        self._scores = [0.0] * n
        self._tags = [None] * n
        self._left = [[] for _ in range(n)]
        self._right = [[] for _ in range(n)]
        self._roots = list(range(n))

    # ------------------------------------------------------------------
    # elements and positions

    @property
    def size(self):
        return len(self.elements)

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        """Iterate over the elements in linear order."""
        return iter(self.elements)

    def __contains__(self, element):
        return element in self._positions

    def _pos(self, element):
        try:
            return self._positions[element]
        except (KeyError, TypeError):
            raise InvalidElement(element) from None

    def position(self, element):
        """
        Returns the position of the element in the linear order.

        >>> DependencyGraph(elements=[5, 3, 9]).position(9)
        2
        >>> DependencyGraph(size=2).position(4)
        Traceback (most recent call last):
        ...
        deptree.exceptions.InvalidElement: Element [4] is not part of the graph.
        """
        return self._pos(element)

    def element_at(self, position):
        return self.elements[position]

    def _ids(self, positions):
        return [self.elements[p] for p in positions]

    # ------------------------------------------------------------------
    # heads, labels, scores, tags

    def head(self, element):
        """Returns the governor of the element, None for roots."""
        h = self._heads[self._pos(element)]
        return None if h is None else self.elements[h]

    def label(self, element):
        return self._labels[self._pos(element)]

    def attachment_score(self, element):
        return self._scores[self._pos(element)]

    @property
    def heads(self):
        """
        The governors of all the elements in linear order, None for roots.

        >>> g = DependencyGraph(elements=[7, 8, 9])
        >>> g.set_arc(7, 9)
        >>> g.heads
        [9, None, None]
        """
        return [None if h is None else self.elements[h] for h in self._heads]

    @property
    def labels(self):
        return list(self._labels)

    @property
    def attachment_scores(self):
        return list(self._scores)

    def pos_tag(self, element):
        return self._tags[self._pos(element)]

    @property
    def pos_tags(self):
        return list(self._tags)

    def set_pos_tag(self, element, tag):
        """
        Sets the part-of-speech tag of the element. Tags belong to the
        element, not to its arc: they survive arc removal and are not
        compared by equality.

        >>> g = DependencyGraph(size=2)
        >>> g.set_pos_tag(1, "NOUN")
        >>> g.pos_tags
        [None, 'NOUN']
        """
        self._tags[self._pos(element)] = tag

    def set_label(self, element, label):
        """Sets the label of the element, without touching the arcs."""
        self._labels[self._pos(element)] = label

    def set_attachment_score(self, element, score):
        """
        Sets the attachment score of the element. Roots are accepted as
        well, so that incremental parsers can stage the score of an element
        before attaching it.
        """
        pos = self._pos(element)
        if self._heads[pos] is None:
            logging.debug("attachment score %s set on root %s", score, element)
        self._scores[pos] = score

    # ------------------------------------------------------------------
    # roots and dependents

    @property
    def roots(self):
        """The elements without governor, sorted by position."""
        return self._ids(self._roots)

    def is_root(self, element):
        return self._heads[self._pos(element)] is None

    def is_assigned(self, element):
        return self._heads[self._pos(element)] is not None

    def has_single_root(self):
        return len(self._roots) == 1

    def left_dependents(self, element):
        """The dependents preceding the element, sorted by position."""
        return self._ids(self._left[self._pos(element)])

    def right_dependents(self, element):
        """The dependents following the element, sorted by position."""
        return self._ids(self._right[self._pos(element)])

    def dependents(self, element):
        pos = self._pos(element)
        return self._ids(self._left[pos] + self._right[pos])

    def arcs(self):
        """
        Returns all the arcs, in linear order of their dependents.

        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(0, 1)
        >>> g.set_arc(2, 1)
        >>> g.arcs()
        [Arc(dependent=0, governor=1), Arc(dependent=2, governor=1)]
        """
        return [
            Arc(self.elements[d], self.elements[h])
            for d, h in enumerate(self._heads)
            if h is not None
        ]

    def _side(self, dependent_pos, governor_pos):
        if dependent_pos < governor_pos:
            return self._left[governor_pos]
        return self._right[governor_pos]

    # ------------------------------------------------------------------
    # arc mutation

    def set_arc(
        self, dependent, governor, label=None, score=0.0, allow_cycle=False
    ):
        """
        Sets a new arc between the given dependent and governor.

        Raises:
            InvalidElement: when an element is not part of the graph.
            AlreadyGoverned: when the dependent has already a governor.
            CycleDetected: when the arc would close a cycle and
                `allow_cycle` is not set.

        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(0, 1, label="nsubj")
        >>> g.set_arc(2, 1)
        >>> g.left_dependents(1), g.right_dependents(1), g.roots
        ([0], [2], [1])
        >>> g.set_arc(1, 0)
        Traceback (most recent call last):
        ...
        deptree.exceptions.CycleDetected: Arc 1 <- 0 introduces a cycle
        """
        d = self._pos(dependent)
        h = self._pos(governor)
        if self._heads[d] is not None:
            raise AlreadyGoverned(dependent, self.elements[self._heads[d]])
        if not allow_cycle and self.introduces_cycle(dependent, governor):
            raise CycleDetected(dependent, governor)

        self._roots.remove(d)
        self._heads[d] = h
        self._labels[d] = label
        self._scores[d] = score
        bisect.insort(self._side(d, h), d)
        logging.debug("arc %s <- %s set", dependent, governor)

    def remove_arc(self, dependent, governor):
        """
        Removes the arc between the given dependent and governor. The
        dependent becomes a root again.

        Raises:
            InvalidArc: when `governor` is not the head of `dependent`.

        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(2, 0, label="obj", score=0.8)
        >>> g.remove_arc(2, 0)
        >>> g.roots, g.head(2), g.label(2), g.attachment_score(2)
        ([0, 1, 2], None, None, 0.0)
        >>> g.remove_arc(2, 0)
        Traceback (most recent call last):
        ...
        deptree.exceptions.InvalidArc: 2 <- 0
        """
        d = self._pos(dependent)
        h = self._pos(governor)
        if self._heads[d] != h:
            raise InvalidArc(dependent, governor)

        self._side(d, h).remove(d)
        self._heads[d] = None
        self._labels[d] = None
        self._scores[d] = 0.0
        bisect.insort(self._roots, d)
        logging.debug("arc %s <- %s removed", dependent, governor)

    # ------------------------------------------------------------------
    # ancestry

    def _iter_ancestor_positions(self, pos):
        visited = set()
        head = self._heads[pos]
        while head is not None and head not in visited:
            visited.add(head)
            yield head
            head = self._heads[head]

    def iter_ancestors(self, element):
        """
        Iterates over the ancestors of the element, from its governor
        upwards. Each ancestor is yielded once: on a cyclic graph the walk
        ends as soon as an ancestor would be visited a second time.

        >>> g = DependencyGraph(size=4)
        >>> g.set_arc(0, 1)
        >>> g.set_arc(1, 3)
        >>> list(g.iter_ancestors(0))
        [1, 3]
        >>> g.set_arc(3, 0, allow_cycle=True)
        >>> list(g.iter_ancestors(0))
        [1, 3, 0]
        """
        for pos in self._iter_ancestor_positions(self._pos(element)):
            yield self.elements[pos]

    def for_each_ancestor(self, element, callback):
        """Calls `callback` with every ancestor of the element."""
        for ancestor in self.iter_ancestors(element):
            callback(ancestor)

    def any_ancestor(self, element, predicate):
        """
        Returns True if `predicate` holds for any ancestor of the element.
        The walk stops at the first match.
        """
        return any(predicate(a) for a in self.iter_ancestors(element))

    def _is_ancestor_pos(self, candidate, pos):
        return any(
            a == candidate for a in self._iter_ancestor_positions(pos)
        )

    def is_ancestor_of(self, candidate, element):
        """
        Returns True if `candidate` is an ancestor of `element`.

        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(0, 1)
        >>> g.set_arc(1, 2)
        >>> g.is_ancestor_of(2, 0), g.is_ancestor_of(0, 2)
        (True, False)
        """
        return self._is_ancestor_pos(self._pos(candidate), self._pos(element))

    def is_descendant_of(self, element, candidate):
        return self.is_ancestor_of(candidate, element)

    def introduces_cycle(self, dependent, governor):
        """
        Returns True if an arc from `governor` to `dependent` would close a
        cycle, i.e. the two are the same element or the dependent is
        already an ancestor of the governor.
        """
        d = self._pos(dependent)
        h = self._pos(governor)
        return d == h or self._is_ancestor_pos(d, h)

    # ------------------------------------------------------------------
    # cycles

    def _scan(self, first_only):
        """
        Walks up from every element, never walking twice through the same
        element. Returns the cycles found, as lists of positions starting
        at the first revisited element.
        """
        state = [_UNVISITED] * len(self.elements)
        cycles = []
        for start in range(len(self.elements)):
            if state[start] != _UNVISITED:
                continue
            walk = []
            pos = start
            while pos is not None and state[pos] == _UNVISITED:
                state[pos] = _ON_WALK
                walk.append(pos)
                pos = self._heads[pos]
            if pos is not None and state[pos] == _ON_WALK:
                cycle = [pos]
                node = self._heads[pos]
                while node != pos:
                    cycle.append(node)
                    node = self._heads[node]
                cycles.append(cycle)
                logging.debug(
                    "cycle detected through %s", self._ids(cycle)
                )
                if first_only:
                    return cycles
            for p in walk:
                state[p] = _DONE
        return cycles

    def contains_cycle(self):
        """
        Returns True if following the governors upwards from some element
        does not end at a root.

        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(0, 1)
        >>> g.contains_cycle()
        False
        >>> g.set_arc(1, 0, allow_cycle=True)
        >>> g.contains_cycle()
        True
        """
        return bool(self._scan(first_only=True))

    def get_cycles(self):
        """
        Returns the distinct cycles of the graph. Every cycle is a list of
        arcs, starting from the first element found to be revisited and
        following the governors back to it.

        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(1, 2)
        >>> g.set_arc(2, 1, allow_cycle=True)
        >>> g.set_arc(0, 1)
        >>> g.get_cycles()
        [[Arc(dependent=1, governor=2), Arc(dependent=2, governor=1)]]
        """
        return [
            [
                Arc(self.elements[p], self.elements[self._heads[p]])
                for p in cycle
            ]
            for cycle in self._scan(first_only=False)
        ]

    # ------------------------------------------------------------------
    # projectivity

    def is_non_projective_arc(self, dependent):
        """
        Returns True if the arc of the dependent is non-projective: some
        element between the governor and the dependent is not a descendant
        of the governor. Roots are never in a non-projective arc.
        """
        d = self._pos(dependent)
        h = self._heads[d]
        if h is None:
            return False
        return any(
            not self._is_ancestor_pos(h, k)
            for k in range(min(h, d) + 1, max(h, d))
        )

    def non_projective_arcs(self):
        return [
            arc for arc in self.arcs()
            if self.is_non_projective_arc(arc.dependent)
        ]

    def is_non_projective(self):
        return any(self.is_non_projective_arc(e) for e in self.elements)

    def is_projective(self):
        return not self.is_non_projective()

    def is_dag(self):
        """
        Returns True if the graph is a single rooted acyclic graph, i.e. a
        tree.
        """
        return self.has_single_root() and not self.contains_cycle()

    # ------------------------------------------------------------------
    # orderings

    def _require_dag(self):
        if not self.is_dag():
            raise PreconditionViolated(
                "Required a single rooted acyclic graph."
            )

    def in_order(self):
        """
        Returns the elements in projective order: the canonical ordering
        for which the tree is projective. Every governor is preceded by the
        subtrees of its left dependents and followed by the subtrees of its
        right dependents.

        >>> g = DependencyGraph(size=4)
        >>> g.set_arc(0, 2)
        >>> g.set_arc(1, 3)
        >>> g.set_arc(3, 2)
        >>> g.in_order()
        [0, 2, 1, 3]
        """
        self._require_dag()
        order = []
        stack = [(self._roots[0], False)]
        while stack:
            pos, expanded = stack.pop()
            if expanded:
                order.append(self.elements[pos])
                continue
            stack.extend((p, False) for p in reversed(self._right[pos]))
            stack.append((pos, True))
            stack.extend((p, False) for p in reversed(self._left[pos]))
        return order

    def elements_to_in_order_index(self):
        return {e: i for i, e in enumerate(self.in_order())}

    def projective_order(self):
        """
        Returns, for every element in linear order, its index in the
        projective order.

        >>> g = DependencyGraph(size=4)
        >>> g.set_arc(0, 2)
        >>> g.set_arc(1, 3)
        >>> g.set_arc(3, 2)
        >>> g.projective_order()
        [0, 2, 1, 3]
        """
        index = self.elements_to_in_order_index()
        return [index[e] for e in self.elements]

    def _children(self, pos):
        return self._left[pos] + self._right[pos]

    def in_depth_pre_order(self):
        self._require_dag()
        order = []
        stack = list(reversed(self._roots))
        while stack:
            pos = stack.pop()
            order.append(self.elements[pos])
            stack.extend(reversed(self._children(pos)))
        return order

    def in_depth_post_order(self):
        """
        >>> g = DependencyGraph(size=3)
        >>> g.set_arc(0, 1)
        >>> g.set_arc(2, 1)
        >>> g.in_depth_pre_order(), g.in_depth_post_order()
        ([1, 0, 2], [0, 2, 1])
        """
        self._require_dag()
        order = []
        stack = [(pos, False) for pos in reversed(self._roots)]
        while stack:
            pos, expanded = stack.pop()
            if expanded:
                order.append(self.elements[pos])
                continue
            stack.append((pos, True))
            stack.extend((p, False) for p in reversed(self._children(pos)))
        return order

    def _levels(self):
        levels = []
        queue = deque(self._roots)
        while queue:
            level = list(queue)
            queue.clear()
            levels.append(level)
            for pos in level:
                queue.extend(self._children(pos))
        return levels

    def in_breadth_pre_order(self):
        self._require_dag()
        return [self.elements[p] for level in self._levels() for p in level]

    def in_breadth_post_order(self):
        """
        Returns the elements level by level, starting from the deepest one.

        >>> g = DependencyGraph(size=4)
        >>> g.set_arc(0, 1)
        >>> g.set_arc(2, 1)
        >>> g.set_arc(3, 2)
        >>> g.in_breadth_pre_order(), g.in_breadth_post_order()
        ([1, 0, 2, 3], [3, 0, 2, 1])
        """
        self._require_dag()
        return [
            self.elements[p]
            for level in reversed(self._levels())
            for p in level
        ]

    # ------------------------------------------------------------------
    # equality and cloning

    def match_heads(self, other):
        return (
            isinstance(other, DependencyGraph)
            and self.elements == other.elements
            and self._heads == other._heads
        )

    def match_labels(self, other):
        return (
            isinstance(other, DependencyGraph)
            and self.elements == other.elements
            and self._labels == other._labels
        )

    def equals(self, other, labels=True):
        """
        Compares the arcs of two graphs, and their labels when `labels` is
        set. Attachment scores are not compared.
        """
        return self.match_heads(other) and (
            not labels or self.match_labels(other)
        )

    def __eq__(self, other):
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def clone(self):
        """
        Returns an independent copy of the graph. Only the linear order and
        the position index are shared.

        >>> g = DependencyGraph(size=2)
        >>> c = g.clone()
        >>> c.set_arc(0, 1)
        >>> g == c, g.roots, c.roots
        (False, [0, 1], [1])
        """
        c = DependencyGraph.__new__(DependencyGraph)
        c.elements = self.elements
        c._positions = self._positions
        c._heads = list(self._heads)
        c._labels = list(self._labels)
        c._scores = list(self._scores)
        c._tags = list(self._tags)
        c._left = [list(deps) for deps in self._left]
        c._right = [list(deps) for deps in self._right]
        c._roots = list(self._roots)
        return c

    __copy__ = clone

    # ------------------------------------------------------------------
    # representations

    def to_string(self, words=None):
        """Returns the tree dump, naming the elements with `words`."""
        return tree_to_string(self, words=words)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        s = "<DependencyGraph:"
        s += " elements={}".format(list(self.elements))
        s += " heads={}>".format(self.heads)
        return s
