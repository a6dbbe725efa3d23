# -*- coding: utf-8 -*-

"""
Exceptions raised when building and querying dependency graphs.
"""

import networkx as nx


class DependencyGraphException(nx.NetworkXException):
    """ A class for exceptions raised in the handling of dependency
        graphs """


class InvalidElement(DependencyGraphException, KeyError):
    """
    An identifier outside the linear order of the graph was supplied.

    >>> e = InvalidElement(7)
    >>> e.element
    7
    >>> str(e)
    'Element [7] is not part of the graph.'
    """

    def __init__(self, element):
        self.element = element
        super(InvalidElement, self).__init__(element)

    def __str__(self):
        return "Element [{}] is not part of the graph.".format(self.element)


class AlreadyGoverned(DependencyGraphException):
    """ The dependent of a new arc has already a governor. """

    def __init__(self, dependent, governor):
        self.dependent = dependent
        self.governor = governor
        super(AlreadyGoverned, self).__init__(
            "Dependent [{}] has already a head: [{}]".format(
                dependent, governor
            )
        )


class CycleDetected(DependencyGraphException):
    """ Adding an arc would close a cycle in the governor relation. """

    def __init__(self, dependent, governor):
        self.dependent = dependent
        self.governor = governor
        super(CycleDetected, self).__init__(
            "Arc {} <- {} introduces a cycle".format(dependent, governor)
        )


class InvalidArc(DependencyGraphException):
    """
    The arc to remove does not match the current governor of the
    dependent.

    >>> str(InvalidArc(2, 0))
    '2 <- 0'
    """

    def __init__(self, dependent, governor):
        self.dependent = dependent
        self.governor = governor
        super(InvalidArc, self).__init__(
            "{} <- {}".format(dependent, governor)
        )


class PreconditionViolated(DependencyGraphException):
    """ An ordering was requested on a graph that is not a single rooted
        acyclic graph. """


class ConllFormatError(DependencyGraphException):
    """ A line of CoNLL input could not be parsed. """

    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        super(ConllFormatError, self).__init__(
            "Line {}: {} ({!r})".format(line_number, reason, line)
        )
