# id3_lab/plots/text.py
# Indented plain-text dump of a tree.
from __future__ import annotations
from typing import List

from ..core.node import DecisionNode, LeafNode, TreeNode


def export_text(node: TreeNode, indent: str = "  ") -> str:
    """
    Decision: outlook
      If outlook = sunny:
        Leaf: no
    """
    lines: List[str] = []
    _dump(node, 0, indent, lines)
    return "\n".join(lines)


def print_tree(node: TreeNode) -> None:
    print(export_text(node))


def _dump(node: TreeNode, depth: int, indent: str, lines: List[str]) -> None:
    pad = indent * depth
    if isinstance(node, LeafNode):
        lines.append(f"{pad}Leaf: {node.label}")
        return
    if not isinstance(node, DecisionNode):
        raise TypeError(f"not a tree node: {node!r}")
    name = node.attribute.name
    lines.append(f"{pad}Decision: {name}")
    for value, child in node.children.items():
        lines.append(f"{pad}{indent}If {name} = {value}:")
        _dump(child, depth + 2, indent, lines)
