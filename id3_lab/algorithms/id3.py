# id3_lab/algorithms/id3.py
# ID3 tree induction: pick the attribute with the largest information gain, split on every
# value of its domain, and recurse on each partition with that attribute removed.
from __future__ import annotations
from typing import List, Sequence, Tuple

from ..core.node import UNKNOWN, DecisionNode, LeafNode, TreeNode
from ..core.schema import Attribute, Record, SchemaError
from .entropy import class_counts, entropy, information_gain, majority_label, partition


def score_attributes(records: Sequence[Record], attributes: Sequence[Attribute]) -> List[Tuple[Attribute, float]]:
    """(attribute, information gain) for every candidate, in candidate order."""
    return [(a, information_gain(records, a)) for a in attributes]


def choose_best_attribute(records: Sequence[Record], attributes: Sequence[Attribute]) -> Attribute:
    """Highest gain wins; on equal gain the earlier candidate is kept."""
    best, _ = _argmax(score_attributes(records, attributes))
    return best


def _argmax(scores: List[Tuple[Attribute, float]]) -> Tuple[Attribute, float]:
    best_attr, best_gain = None, -1.0
    for attr, gain in scores:
        if gain > best_gain:
            best_attr, best_gain = attr, gain
    return best_attr, best_gain


def build(records: Sequence[Record], attributes: Sequence[Attribute], verbose: bool = False) -> TreeNode:
    """
    Grow an ID3 tree.

    Parameters
    ----------
    records : sequence of Record
        Training rows; may be empty (yields an UNKNOWN leaf).
    attributes : sequence of Attribute
        Split candidates in tie-break order. The class attribute must not be
        among them.
    verbose : bool
        If True, print entropy and per-attribute gain at every decision node.
    """
    records = tuple(records)
    attributes = tuple(attributes)
    if records:
        class_index = records[0].schema.class_index
        for a in attributes:
            if a.index == class_index:
                raise SchemaError(f"class attribute {a.name!r} cannot be a split candidate")
    return _build(records, attributes, depth=0, verbose=verbose)


def _build(records: Tuple[Record, ...], attributes: Tuple[Attribute, ...], depth: int, verbose: bool) -> TreeNode:
    # no rows reached this branch
    if not records:
        return LeafNode(UNKNOWN)

    first = records[0].label
    if all(r.label == first for r in records):
        return LeafNode(first)

    # attributes exhausted on an impure set -> majority vote
    if not attributes:
        return LeafNode(majority_label(records))

    scores = score_attributes(records, attributes)
    best, best_gain = _argmax(scores)

    if verbose:
        _narrate(records, scores, best, depth)

    parts = partition(records, best)
    remaining = tuple(a for a in attributes if a != best)
    children = {v: _build(tuple(parts[v]), remaining, depth + 1, verbose) for v in best.values}
    return DecisionNode(attribute=best, children=children)


def _narrate(records, scores, best, depth):
    indent = "|  " * depth
    counts = ", ".join(f"{k}:{v}" for k, v in class_counts(records).items())
    print(f"{indent}Node depth={depth}, n={len(records)}, H={entropy(records):.3f}  (labels: {counts})")
    for attr, gain in scores:
        parts = partition(records, attr)
        vc = ", ".join(f"{v}:{len(rs)}" for v, rs in parts.items())
        print(f"{indent}  - {attr.name:<12} IG={gain:.3f}  (values: {vc})")
    print(f"{indent}=> choose '{best.name}' by information gain\n")
