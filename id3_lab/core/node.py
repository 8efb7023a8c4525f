# id3_lab/core/node.py
# The two node kinds an ID3 tree is made of. A model is just its root node.
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

from .schema import Attribute

UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class LeafNode:
    label: str

    def __post_init__(self):
        if self.label is None or self.label == "":
            raise ValueError("a leaf must hold a label")


@dataclass(frozen=True)
class DecisionNode:
    """Routes a record to the child keyed by its value for `attribute`."""
    attribute: Attribute
    children: Mapping[str, "TreeNode"]

    def __post_init__(self):
        # freeze a private copy so the finished tree cannot be edited through the caller's dict
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def child(self, value) -> Optional["TreeNode"]:
        return self.children.get(value)


TreeNode = Union[DecisionNode, LeafNode]


def is_leaf(node: TreeNode) -> bool:
    return isinstance(node, LeafNode)
