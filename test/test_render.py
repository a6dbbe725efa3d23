# -*- coding: utf-8 -*-

import textwrap

import pytest
from pydot import graph_from_dot_data

from deptree.configuration import ArcConfiguration, RootConfiguration
from deptree.configuration import build_graph
from deptree.graph import DependencyGraph
from deptree.render import export_to_dot, render_as_dot, tree_to_string


WORDS = ["You", "cannot", "put", "flavor", "into", "a", "bean", "that", "is",
         "not", "already", "there"]


def build_sentence(head_of_11=8):
    return build_graph([
        ArcConfiguration(0, 2),
        ArcConfiguration(1, 2),
        RootConfiguration(2),
        ArcConfiguration(3, 2),
        ArcConfiguration(4, 6),
        ArcConfiguration(5, 6),
        ArcConfiguration(6, 2),
        ArcConfiguration(7, 8),
        ArcConfiguration(8, 3),
        ArcConfiguration(9, 8),
        ArcConfiguration(10, 11),
        ArcConfiguration(11, head_of_11),
    ], size=12)


def dedent(s):
    return textwrap.dedent(s).strip("\n")


def test_not_initialized():
    expected = dedent("""
        0 _

        1 _

        2 _
        """)
    assert tree_to_string(DependencyGraph(size=3)) == expected


def test_single_root():
    g = build_graph([
        ArcConfiguration(1, 0),
        ArcConfiguration(2, 0),
        ArcConfiguration(3, 4),
        ArcConfiguration(4, 0),
    ], size=5)
    expected = dedent("""
        0 _
        +--r 1 _
        +--r 2 _
        +--r 4 _
             +--l 3 _
        """)
    assert str(g) == expected


def test_two_roots():
    g = build_graph([
        ArcConfiguration(1, 0),
        ArcConfiguration(2, 1),
        ArcConfiguration(3, 4),
    ], size=5)
    expected = dedent("""
        0 _
        +--r 1 _
             +--r 2 _

        4 _
        +--l 3 _
        """)
    assert str(g) == expected


def test_non_projective():
    expected = dedent("""
        2 _
        +--l 0 _
        +--l 1 _
        +--r 3 _
        |    +--r 8 _
        |         +--l 7 _
        |         +--r 9 _
        |         +--r 11 _
        |              +--l 10 _
        +--r 6 _
             +--l 4 _
             +--l 5 _
        """)
    assert str(build_sentence()) == expected


def test_words():
    expected = dedent("""
        put _
        +--l You _
        +--l cannot _
        +--r flavor _
        |    +--r is _
        |         +--l that _
        |         +--r not _
        |         +--r there _
        |              +--l already _
        +--r bean _
             +--l into _
             +--l a _
        """)
    assert build_sentence().to_string(WORDS) == expected


def test_overlapping_continue_paddings():
    expected = dedent("""
        2 _
        +--l 0 _
        +--l 1 _
        +--r 3 _
        |    +--r 8 _
        |    |    +--l 7 _
        |    |    +--r 9 _
        |    +--r 11 _
        |         +--l 10 _
        +--r 6 _
             +--l 4 _
             +--l 5 _
        """)
    assert str(build_sentence(head_of_11=3)) == expected


def test_labels():
    g = DependencyGraph(elements=[1, 2, 3])
    g.set_arc(1, 2, label="nsubj")
    g.set_arc(3, 2, label="punct")
    g.set_label(2, "root")
    expected = dedent("""
        bark root
        +--l Dogs nsubj
        +--r . punct
        """)
    assert tree_to_string(g, words=["Dogs", "bark", "."]) == expected


def test_dependents_do_not_start_blocks():
    g = build_graph([ArcConfiguration(1, 0, "det"), ArcConfiguration(3, 4)],
                    size=5)
    expected = dedent("""
        0 _
        +--r 1 det

        2 _

        4 _
        +--l 3 _
        """)
    assert tree_to_string(g) == expected
    assert g.roots == [0, 2, 4]


def test_pos_tags_are_not_printed():
    g = DependencyGraph(size=2)
    g.set_arc(1, 0, label="obj")
    g.set_pos_tag(0, "VERB")
    g.set_pos_tag(1, "NOUN")
    assert tree_to_string(g, words=["eat", "apples"]) == dedent("""
        eat _
        +--r apples obj
        """)


def test_cyclic_part_is_not_printed():
    g = DependencyGraph(size=3)
    g.set_arc(1, 2)
    g.set_arc(2, 1, allow_cycle=True)
    assert str(g) == "0 _"


def test_wrong_number_of_words():
    with pytest.raises(AssertionError):
        tree_to_string(DependencyGraph(size=2), words=["one"])


def test_export_to_dot():
    g = build_sentence()
    g.set_label(8, 'say "hi"')
    dot = export_to_dot(g, words=WORDS)
    assert dot.startswith("digraph G {")
    assert 't2 [label="put"];' in dot
    assert "t2 -> t0;" in dot
    assert "t3 -> t8 [label=\"say ''hi''\"];" in dot
    assert dot.count(" -> ") == 11 + 11
    assert graph_from_dot_data(dot)


def test_render_as_dot():
    dot_graph = render_as_dot(build_sentence())
    assert dot_graph.get_name() == "G"
