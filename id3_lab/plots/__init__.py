from .text import export_text, print_tree

__all__ = ["export_text", "print_tree"]
