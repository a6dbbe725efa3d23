# -*- coding: utf-8 -*-

"""
Builds dependency graphs from externally parsed token sequences: CoNLL-U
and CoNLL-X files, and spaCy documents.
"""

import logging
from collections import namedtuple

from .exceptions import ConllFormatError
from .graph import DependencyGraph


Token = namedtuple("Token", ["id", "form", "head", "deprel", "pos"])
"""A parsed token. `head` is None for the root of the sentence."""

# column indices, shared by CoNLL-U and CoNLL-X
ID, FORM, POS, HEAD, DEPREL = 0, 1, 3, 6, 7

NULL_VALUE = "_"


def _parse_line(line_number, line):
    fields = line.split("\t")
    if len(fields) <= DEPREL:
        fields = line.split()
    if len(fields) <= DEPREL:
        raise ConllFormatError(line_number, line, "too few columns")
    try:
        id_ = int(fields[ID])
    except ValueError:
        raise ConllFormatError(line_number, line, "invalid id") from None
    head = fields[HEAD]
    if head in (NULL_VALUE, "0"):
        head = None
    else:
        try:
            head = int(head)
        except ValueError:
            raise ConllFormatError(
                line_number, line, "invalid head"
            ) from None
    return Token(
        id=id_,
        form=fields[FORM],
        head=head,
        deprel=None if fields[DEPREL] == NULL_VALUE else fields[DEPREL],
        pos=None if fields[POS] == NULL_VALUE else fields[POS],
    )


def read_conll(lines):
    """
    Yields the sentences of a CoNLL document as lists of Tokens. Comments,
    multiword token ranges and empty nodes are skipped.

    >>> lines = [
    ...     "# text = Dogs bark.",
    ...     "1\\tDogs\\tdog\\tNOUN\\tNNS\\t_\\t2\\tnsubj\\t_\\t_",
    ...     "2\\tbark\\tbark\\tVERB\\tVBP\\t_\\t0\\troot\\t_\\t_",
    ...     "3\\t.\\t.\\tPUNCT\\t.\\t_\\t2\\tpunct\\t_\\t_",
    ...     "",
    ... ]
    >>> [s] = read_conll(lines)
    >>> s[0]
    Token(id=1, form='Dogs', head=2, deprel='nsubj', pos='NOUN')
    >>> s[1].head is None
    True
    """
    sentence = []
    for line_number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            if sentence:
                yield sentence
                sentence = []
            continue
        if line.startswith("#"):
            continue
        first = line.split(None, 1)[0]
        if "-" in first or "." in first:
            logging.debug("skipping line %d: %s", line_number, first)
            continue
        sentence.append(_parse_line(line_number, line))
    if sentence:
        yield sentence


def from_tokens(tokens, allow_cycles=False):
    """
    Returns a DependencyGraph over the ids of the given tokens, in their
    order. Every token is expected to provide `id`, `head` (None for roots)
    and `deprel`; a `pos` attribute, when present, sets the POS tag.

    >>> tokens = [Token(1, "Dogs", 2, "nsubj", None),
    ...           Token(2, "bark", None, "root", None)]
    >>> g = from_tokens(tokens)
    >>> g.roots, g.label(2), g.head(1)
    ([2], 'root', 2)
    >>> g.pos_tags
    [None, None]
    """
    tokens = list(tokens)
    graph = DependencyGraph(elements=[t.id for t in tokens])
    for token in tokens:
        if getattr(token, "pos", None) is not None:
            graph.set_pos_tag(token.id, token.pos)
        if token.head is None:
            if token.deprel is not None:
                graph.set_label(token.id, token.deprel)
        else:
            graph.set_arc(
                token.id,
                token.head,
                label=token.deprel,
                allow_cycle=allow_cycles,
            )
    return graph


def from_conll(lines, allow_cycles=False):
    """Yields a DependencyGraph for every sentence of a CoNLL document."""
    for sentence in read_conll(lines):
        yield from_tokens(sentence, allow_cycles=allow_cycles)


def load_conll(path, allow_cycles=False):
    """Returns the list of DependencyGraphs of a CoNLL file."""
    with open(path, encoding="utf-8") as f:
        return list(from_conll(f, allow_cycles=allow_cycles))


def from_spacy_doc(doc, allow_cycles=False):
    """
    Returns a DependencyGraph from a parsed spaCy Doc or Span. The elements
    are the token indices. Tokens that are their own head, or whose head
    lies outside the span, become roots.
    """
    graph = DependencyGraph(elements=[token.i for token in doc])
    for token in doc:
        if token.pos_:
            graph.set_pos_tag(token.i, token.pos_)
        deprel = token.dep_ or None
        head = token.head.i
        if head == token.i or head not in graph:
            if deprel is not None:
                graph.set_label(token.i, deprel)
        else:
            graph.set_arc(
                token.i, head, label=deprel, allow_cycle=allow_cycles
            )
    return graph
