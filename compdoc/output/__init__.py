"""Output generation module for metadata review.

Provides a human-readable text tree of component metadata records.
"""

from compdoc.output.lib import TreeItem, build_tree, format_metadata_tree

__all__ = [
    "format_metadata_tree",
    "build_tree",
    "TreeItem",
]
