from .schema import Attribute, Dataset, Record, Schema, SchemaError
from .node import UNKNOWN, DecisionNode, LeafNode, TreeNode, is_leaf

__all__ = [
    "Attribute", "Dataset", "Record", "Schema", "SchemaError",
    "UNKNOWN", "DecisionNode", "LeafNode", "TreeNode", "is_leaf",
]
