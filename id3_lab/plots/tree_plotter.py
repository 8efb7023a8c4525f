# id3_lab/plots/tree_plotter.py
# Matplotlib drawing of a decision tree: boxed decision nodes, rounded leaves, branch values on the edges.
from __future__ import annotations
from typing import Optional, Tuple

import matplotlib.pyplot as plt

from ..algorithms.classify import count_leaves as get_num_leafs, tree_depth as get_tree_depth
from ..core.node import DecisionNode, LeafNode, TreeNode

decision_box = dict(boxstyle="sawtooth", fc="0.8")
leaf_box     = dict(boxstyle="round4",   fc="0.8")
arrow_args   = dict(arrowstyle="<-")


class _Layout:
    """Cursor state while the tree is laid out left to right, top to bottom."""

    def __init__(self, ax, root: TreeNode):
        self.ax = ax
        self.total_w = float(get_num_leafs(root))
        self.total_d = float(max(get_tree_depth(root), 1))
        self.x_off = -0.5 / self.total_w
        self.y_off = 1.0

    def plot_node(self, text: str, center: Tuple[float, float], parent: Tuple[float, float], box) -> None:
        self.ax.annotate(
            text, xy=parent, xycoords="axes fraction",
            xytext=center, textcoords="axes fraction",
            va="center", ha="center", bbox=box, arrowprops=arrow_args
        )

    def plot_mid_text(self, center, parent, text: str) -> None:
        x_mid = (parent[0] - center[0]) / 2.0 + center[0]
        y_mid = (parent[1] - center[1]) / 2.0 + center[1]
        self.ax.text(x_mid, y_mid, text)

    def plot_tree(self, node: DecisionNode, parent, text: str) -> None:
        n_leafs = get_num_leafs(node)
        center = (self.x_off + (1.0 + float(n_leafs)) / 2.0 / self.total_w, self.y_off)
        self.plot_mid_text(center, parent, text)
        self.plot_node(node.attribute.name, center, parent, decision_box)
        self.y_off = self.y_off - 1.0 / self.total_d
        for value, child in node.children.items():
            if isinstance(child, DecisionNode):
                self.plot_tree(child, center, str(value))
            else:
                self.x_off = self.x_off + 1.0 / self.total_w
                self.plot_node(str(child.label), (self.x_off, self.y_off), center, leaf_box)
                self.plot_mid_text((self.x_off, self.y_off), center, str(value))
        self.y_off = self.y_off + 1.0 / self.total_d


def create_plot(tree: TreeNode, out: Optional[str] = None, show: bool = True):
    """Draw `tree`; save to `out` if given, and open a window if `show`. Returns the figure."""
    fig = plt.figure(1, facecolor="white", figsize=(10, 6))
    fig.clf()
    axprops = dict(xticks=[], yticks=[])
    ax = plt.subplot(111, frameon=False, **axprops)
    if isinstance(tree, LeafNode):
        ax.text(0.5, 0.5, str(tree.label), va="center", ha="center", bbox=leaf_box)
    else:
        _Layout(ax, tree).plot_tree(tree, (0.5, 1.0), "")
    if out:
        fig.savefig(out, bbox_inches="tight")
    if show:
        plt.show()
    return fig
