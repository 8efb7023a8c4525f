from .core import (
    UNKNOWN, Attribute, Dataset, DecisionNode, LeafNode, Record, Schema, SchemaError, TreeNode, is_leaf,
)
from .algorithms import build, classify, entropy, explain, information_gain
from .classifier import ID3Classifier, NotFittedError

__version__ = "0.1.0"

__all__ = [
    "UNKNOWN", "Attribute", "Dataset", "DecisionNode", "LeafNode", "Record", "Schema", "SchemaError",
    "TreeNode", "is_leaf",
    "build", "classify", "entropy", "explain", "information_gain",
    "ID3Classifier", "NotFittedError",
]
