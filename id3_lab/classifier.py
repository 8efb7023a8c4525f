# id3_lab/classifier.py
from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Optional, Union

import numpy as np

from .algorithms.classify import PathStep, classify, count_leaves, explain, tree_depth
from .algorithms.id3 import build
from .core.node import TreeNode
from .core.schema import Dataset, Record, Schema, SchemaError
from .plots.text import export_text

RecordLike = Union[Record, Mapping[str, Any]]


class NotFittedError(Exception):
    """Raised if estimator is used before fitting."""
    pass


class ID3Classifier:
    """
    ID3 decision-tree learner over categorical datasets.

    Parameters
    ----------
    verbose : bool
        If True, print entropy/IG at each node while fitting.

    Attributes (after fit)
    ----------------------
    root_ : TreeNode
        The trained model; immutable, safe to share across threads.
    schema_ : Schema
        Training schema. Records passed to classify/predict must match it.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.root_: Optional[TreeNode] = None
        self.schema_: Optional[Schema] = None

    # ---------- training ----------

    def fit(self, dataset: Dataset) -> "ID3Classifier":
        if self.verbose:
            print("Starting to build the decision tree...")
        self.root_ = build(dataset.records, dataset.attributes, verbose=self.verbose)
        self.schema_ = dataset.schema
        if self.verbose:
            print("Decision tree built successfully!")
            print("=" * 58)
        return self

    # ---------- inference ----------

    def _check_fitted(self):
        if self.root_ is None:
            raise NotFittedError("Estimator not fitted, call `fit` first.")

    def _as_record(self, record: RecordLike) -> Record:
        if isinstance(record, Record):
            if not record.schema.same_layout(self.schema_):
                raise SchemaError(
                    f"record attributes {record.schema.names} do not match training schema {self.schema_.names}"
                )
            return record
        return self.schema_.record(record)

    def classify(self, record: RecordLike):
        """Predicted label for one record (a Record or a name -> value mapping)."""
        self._check_fitted()
        return classify(self.root_, self._as_record(record))

    def classify_index(self, record: RecordLike) -> int:
        """Index of the predicted label in the class domain; -1 for UNKNOWN or an undeclared label."""
        label = self.classify(record)
        return self.schema_.class_attribute.index_of_value(label)

    def predict(self, records: Iterable[RecordLike]) -> np.ndarray:
        self._check_fitted()
        return np.array([self.classify(r) for r in records], dtype=object)

    def score(self, dataset: Dataset) -> float:
        """Accuracy on a labeled dataset."""
        y = np.array(dataset.labels(), dtype=object)
        if y.size == 0:
            return 0.0
        return float((self.predict(dataset.records) == y).mean())

    # ---------- inspection ----------

    @property
    def depth_(self) -> int:
        self._check_fitted()
        return tree_depth(self.root_)

    @property
    def n_leaves_(self) -> int:
        self._check_fitted()
        return count_leaves(self.root_)

    def export_text(self) -> str:
        self._check_fitted()
        return export_text(self.root_)

    def explain_one(self, record: RecordLike, print_path: bool = True) -> List[PathStep]:
        """
        Return the root->leaf path taken to classify `record`.
        Each step is (attribute_name, record_value, prediction_if_this_step_ends_the_walk).
        """
        self._check_fitted()
        path = explain(self.root_, self._as_record(record))
        if print_path:
            print("Explanation (root → leaf):")
            for i, (feat, val, pred) in enumerate(path):
                arrow = "└─" if i == len(path) - 1 else "├─"
                if pred is not None:
                    print(f"{arrow} {feat} = {val}  →  predict {pred}")
                else:
                    print(f"{arrow} {feat} = {val}")
        return path

    def show(self, out: Optional[str] = None, show: bool = True):
        self._check_fitted()
        # Lazy import to keep matplotlib off the training path
        from .plots.tree_plotter import create_plot
        return create_plot(self.root_, out=out, show=show)
