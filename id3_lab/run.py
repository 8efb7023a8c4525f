# id3_lab/run.py
# Train an ID3 tree on a categorical dataset, print it, report training accuracy, and optionally classify one record.
from __future__ import annotations

import argparse
import os
from typing import Dict, List, Optional, Sequence

import pandas as pd
from sklearn.metrics import accuracy_score, confusion_matrix

from .classifier import ID3Classifier
from .core.schema import Dataset, SchemaError
from .datasets import DATA_DIR, load_dataset

# ---- Tunables (overridable via environment variables) -----------------------
DEFAULT_DATA  = os.getenv("ID3_DATA", "weather.nominal.arff")
DEFAULT_CLASS = os.getenv("ID3_CLASS", "") or None
VERBOSE       = os.getenv("ID3_VERBOSE", "0").lower() not in ("", "0", "false", "no")


def resolve(path: str) -> str:
    """Return an absolute path. Try CWD first, then the bundled data folder."""
    if os.path.isabs(path):
        return path
    if os.path.exists(path):
        return os.path.abspath(path)
    return os.path.join(DATA_DIR, path)


def parse_assignments(pairs: Sequence[str]) -> Dict[str, str]:
    """['outlook=sunny', 'windy=TRUE'] -> {'outlook': 'sunny', 'windy': 'TRUE'}"""
    out: Dict[str, str] = {}
    for p in pairs:
        if "=" not in p:
            raise ValueError(f"expected attr=value, got {p!r}")
        k, v = p.split("=", 1)
        out[k.strip()] = v.strip()
    return out


def confusion_frame(dataset: Dataset, y_pred) -> pd.DataFrame:
    y_true = dataset.labels()
    labels = list(dataset.class_attribute.values)
    labels += [l for l in dict.fromkeys(list(y_true) + list(y_pred)) if l not in labels]
    cm = confusion_matrix(y_true, list(y_pred), labels=labels)
    return pd.DataFrame(cm, index=[f"true_{l}" for l in labels], columns=[f"pred_{l}" for l in labels])


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="ID3 decision tree on a categorical (ARFF/CSV) dataset.")
    ap.add_argument("--data", default=DEFAULT_DATA,
                    help="ARFF or CSV file; bare names are looked up in CWD, then in the bundled data folder")
    ap.add_argument("--class", dest="class_name", default=DEFAULT_CLASS,
                    help="class attribute name (default: last attribute)")
    ap.add_argument("--verbose", action=argparse.BooleanOptionalAction, default=VERBOSE,
                    help="print entropy/IG at each node while building (--no-verbose overrides ID3_VERBOSE)")
    ap.add_argument("--classify", nargs="+", default=[], metavar="ATTR=VALUE",
                    help="classify one record, e.g. --classify outlook=sunny humidity=high ...")
    ap.add_argument("--plot", default="", help="save a matplotlib drawing of the tree to this path")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1) Load
    path = resolve(args.data)
    try:
        dataset = load_dataset(path, class_attribute=args.class_name)
    except FileNotFoundError:
        raise SystemExit(f"[error] dataset not found: {args.data}")
    except (SchemaError, ValueError) as e:
        raise SystemExit(f"[error] could not load {args.data}: {e}")
    print(f"[info] {dataset.relation}: {len(dataset)} records, "
          f"{len(dataset.attributes)} attributes, class = {dataset.class_attribute.name}")

    # 2) Train
    clf = ID3Classifier(verbose=args.verbose).fit(dataset)
    print("Printing the decision tree:")
    print(clf.export_text())

    # 3) Training metrics
    y_pred = clf.predict(dataset.records)
    acc = accuracy_score(dataset.labels(), list(y_pred))
    print(f"\nTraining accuracy: {acc:.3f}  (depth={clf.depth_}, leaves={clf.n_leaves_})")
    print("Confusion matrix (train):")
    print(confusion_frame(dataset, y_pred))

    # 4) Optional single prediction
    if args.classify:
        try:
            query = parse_assignments(args.classify)
            label = clf.classify(query)
            print(f"\nPrediction for {query} → {label}")
            clf.explain_one(query)
        except (SchemaError, ValueError) as e:
            raise SystemExit(f"[error] bad record: {e}")

    # 5) Optional plot
    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        clf.show(out=args.plot, show=False)
        print(f"[saved] {args.plot}")

    return 0


if __name__ == "__main__":
    # Run this
    # python -m id3_lab.run --data weather.nominal.arff --verbose --classify outlook=sunny temperature=cool humidity=high windy=TRUE
    raise SystemExit(main())
