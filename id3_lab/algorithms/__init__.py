from .entropy import class_counts, entropy, information_gain, majority_label, partition
from .id3 import build, choose_best_attribute, score_attributes
from .classify import classify, count_leaves, explain, tree_depth

__all__ = [
    "class_counts", "entropy", "information_gain", "majority_label", "partition",
    "build", "choose_best_attribute", "score_attributes",
    "classify", "count_leaves", "explain", "tree_depth",
]
