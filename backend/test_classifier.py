"""Tests for first-match node classification"""

import pytest

from graphboard.compiler.classify import catch_all_rule, classify, match_rule
from graphboard.compiler.parser import parse_graph
from graphboard.compiler.types import GroupRule
from graphboard.errors import ClassificationError


def names(group):
    return [n.name for n in group.nodes]


def test_sample_groups(sample_text, sample_rules):
    groups = classify(parse_graph(sample_text), sample_rules)

    assert [g.index for g in groups] == [0, 1]
    assert names(groups[0]) == ["A"]
    assert names(groups[1]) == ["B", "C", "D"]
    assert groups[0].rule.color == "red"


def test_first_match_wins():
    rules = [
        GroupRule.from_strings("^core", "blue"),
        GroupRule.from_strings("core", "green"),
        catch_all_rule(),
    ]

    assert match_rule("core.io", rules) == 0
    assert match_rule("lib.core", rules) == 1
    assert match_rule("main", rules) == 2


def test_every_node_in_exactly_one_group():
    graph = parse_graph("\n".join(f"m{i} -> m{i + 1}" for i in range(20)))
    rules = [
        GroupRule.from_strings("1", "red"),
        GroupRule.from_strings("[02468]$", "blue"),
        catch_all_rule("gray"),
    ]
    groups = classify(graph, rules)

    placed = [n.id for g in groups for n in g.nodes]
    assert sorted(placed) == [n.id for n in graph]


def test_group_order_follows_graph_not_rules():
    graph = parse_graph("b2 -> a1\na2 -> b1")
    rules = [GroupRule.from_strings("^a", "red"), catch_all_rule()]

    groups = classify(graph, rules)

    assert names(groups[0]) == ["a1", "a2"]
    assert names(groups[1]) == ["b2", "b1"]


def test_empty_groups_are_kept_in_rule_order():
    graph = parse_graph("x -> y")
    rules = [GroupRule.from_strings("^nothing", "red"), catch_all_rule()]

    groups = classify(graph, rules)

    assert names(groups[0]) == []
    assert names(groups[1]) == ["x", "y"]


def test_reordering_moves_node_only_to_higher_priority_match():
    graph = parse_graph("core.util -> app")
    core = GroupRule.from_strings("core", "blue")
    util = GroupRule.from_strings("util", "green")
    rest = catch_all_rule()

    before = classify(graph, [core, util, rest])
    after = classify(graph, [util, core, rest])

    assert names(before[0]) == ["core.util"]
    assert names(after[0]) == ["core.util"]
    assert names(before[2]) == names(after[2]) == ["app"]


def test_missing_catch_all_fails_fast():
    graph = parse_graph("A -> B")

    with pytest.raises(ClassificationError) as exc:
        classify(graph, [GroupRule.from_strings("^A", "red")])

    assert exc.value.node_name == "B"


def test_rule_title_is_pattern_text():
    assert GroupRule.from_strings(r"^pkg\.", "red").title == r"^pkg\."
