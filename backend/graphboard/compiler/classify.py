from typing import List, Sequence

from graphboard.compiler.types import Graph, Group, GroupRule, Node
from graphboard.errors import ClassificationError
from graphboard.logging_config import get_logger

logger = get_logger(__name__)

CATCH_ALL_PATTERN = ".*"


def catch_all_rule(color: str = "gray") -> GroupRule:
    return GroupRule.from_strings(CATCH_ALL_PATTERN, color)


def match_rule(name: str, rules: Sequence[GroupRule]) -> int:
    """Index of the first rule matching name. First match wins."""
    for index, rule in enumerate(rules):
        if rule.matches(name):
            return index
    raise ClassificationError(name)


def classify(graph: Graph, rules: Sequence[GroupRule]) -> List[Group]:
    """
    Partition graph nodes into one Group per rule.

    Groups come back in rule order, empty ones included. Within a group
    nodes keep graph (id) order.
    """
    buckets: List[List[Node]] = [[] for _ in rules]
    for node in graph:
        buckets[match_rule(node.name, rules)].append(node)

    groups = [
        Group(index=i, rule=rule, nodes=tuple(bucket))
        for i, (rule, bucket) in enumerate(zip(rules, buckets))
    ]

    logger.info(
        "graph classified",
        rules=len(rules),
        non_empty_groups=sum(1 for g in groups if g.nodes),
    )
    return groups
