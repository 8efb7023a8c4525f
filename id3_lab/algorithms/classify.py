# id3_lab/algorithms/classify.py
# Walk a finished tree from the root to a leaf for one record.
from __future__ import annotations
from typing import Any, List, Optional, Tuple

from ..core.node import UNKNOWN, DecisionNode, LeafNode, TreeNode, is_leaf
from ..core.schema import Record

# (attribute name, record value, label when this step ends the walk else None)
PathStep = Tuple[str, Any, Optional[str]]


def classify(model: TreeNode, record: Record):
    """
    Predicted label for `record`, or UNKNOWN when the record carries a value
    that has no branch at some decision node. A record missing an attribute the
    tree reads raises SchemaError.
    """
    node = model
    while isinstance(node, DecisionNode):
        child = node.child(record[node.attribute])
        if child is None:
            return UNKNOWN
        node = child
    if isinstance(node, LeafNode):
        return node.label
    raise TypeError(f"not a tree node: {node!r}")


def explain(model: TreeNode, record: Record) -> List[PathStep]:
    """Root -> leaf path taken by `classify`, one step per decision node visited."""
    path: List[PathStep] = []
    node = model
    while isinstance(node, DecisionNode):
        val = record[node.attribute]
        child = node.child(val)
        if child is None:
            path.append((node.attribute.name, val, UNKNOWN))
            return path
        path.append((node.attribute.name, val, child.label if isinstance(child, LeafNode) else None))
        node = child
    if not isinstance(node, LeafNode):
        raise TypeError(f"not a tree node: {node!r}")
    return path


def tree_depth(node: TreeNode) -> int:
    """Number of decision nodes on the longest root -> leaf path (0 for a lone leaf)."""
    if is_leaf(node):
        return 0
    return 1 + max((tree_depth(c) for c in node.children.values()), default=0)


def count_leaves(node: TreeNode) -> int:
    if is_leaf(node):
        return 1
    return sum(count_leaves(c) for c in node.children.values())
