import pytest
from nltk import Tree

from chart_parsers import CFG, CYKParser, EarleyParser, GrammarError, ItemKind
from chart_parsers.__main__ import demo_grammar


def test_items_per_span():
    p = CYKParser(demo_grammar())
    chart = p.parse(["the", "cat", "sleeps"])
    assert chart.total_item_count() == 5
    assert [it.rule.lhs for it in chart.items_spanning(0, 2)] == ["NP"]
    assert [it.rule.lhs for it in chart.items_to(3)] == ["VP", "S"]
    assert all(it.kind is ItemKind.CYK for it in chart.items_from(0))
    assert p.parse_trees(["the", "cat", "sleeps"]) == [
        Tree.fromstring("(S (NP (Det the) (N cat)) (VP sleeps))")
    ]


@pytest.mark.parametrize(
    "sent",
    [
        "the cat sleeps",
        "the cat likes the mat",
        "the dog saw the cat with a telescope",
        "the cat on the mat sleeps with a dog",
        "cat the sleeps",
        "the cat",
    ],
)
def test_agrees_with_earley(sent):
    tokens = sent.split()
    cyk = CYKParser(demo_grammar())
    earley = EarleyParser(demo_grammar())
    assert cyk.recognize(tokens) == earley.recognize(tokens)
    cyk_trees = cyk.parse_trees(tokens)
    earley_trees = earley.parse_trees(tokens)
    assert len(cyk_trees) == len(earley_trees)
    for t in cyk_trees:
        assert t in earley_trees


def test_empty_input_rejected():
    assert CYKParser(demo_grammar()).recognize([]) is False


def test_non_cnf_rejected():
    g = CFG([("S", ["A"]), ("A", ["a"])], "S")
    with pytest.raises(GrammarError):
        CYKParser(g)
