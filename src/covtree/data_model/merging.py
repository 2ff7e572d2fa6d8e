# -*- coding:utf-8 -*-

#  ************************** Copyrights and license ***************************
#
# This file is part of covtree 1.1+main, a coverage tree engine for reports.
# https://github.com/covtree/covtree
#
# _____________________________________________________________________________
#
# Copyright (c) 2022-2026 the covtree authors
#
# This software is distributed under the 3-clause BSD License.
# For more information, see the README.rst file.
#
# ****************************************************************************

"""
Merge coverage trees.

Two trees are merged with :meth:`~covtree.data_model.node.Node.combine_with`,
which behaves somewhat like an addition operator for trees of the same subject:

* commutative: the values of ``a.combine_with(b)`` and ``b.combine_with(a)``
  match since values are merged with ``max``, only the order of the children
  depends on the order of the arguments.
* associative: ``a.combine_with(b).combine_with(c)`` matches
  ``a.combine_with(b.combine_with(c))``.
* identity element: merging a tree with an empty copy of its root returns an
  equal tree.

The merged tree is always a new tree, the input trees can be used afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Iterable

from ..exceptions import NodeMergeError
from ..options import Options
from .node import Node
from .packages import split_packages

LOGGER = logging.getLogger("covtree")


@dataclass
class MergeOptions:
    """Data class to store the merge options."""

    split_packages: bool = False
    skip_mismatched_roots: bool = False


DEFAULT_MERGE_OPTIONS = MergeOptions()


def get_merge_options_from_options(options: Options) -> MergeOptions:
    """Get the merge options."""
    return MergeOptions(
        split_packages=bool(options.get("split_packages")),
        skip_mismatched_roots=bool(options.get("skip_mismatched_roots")),
    )


def _prepare(tree: Node, options: MergeOptions) -> Node:
    if not options.split_packages:
        return tree
    copy = tree.copy_tree()
    split_packages(copy)
    return copy


def merge_trees(
    trees: Iterable[Node], options: MergeOptions = DEFAULT_MERGE_OPTIONS
) -> Node:
    """Merge all the trees into a new tree.

    The roots of all trees must match the root of the first tree. If a root
    differs, the error is raised or, if configured, the tree is skipped
    with a warning.
    """
    merged = None
    for tree in trees:
        prepared = _prepare(tree, options)
        if merged is None:
            merged = prepared.copy_tree() if prepared is tree else prepared
            continue

        try:
            merged = merged.combine_with(prepared)
        except NodeMergeError as exc:
            if not options.skip_mismatched_roots:
                raise
            LOGGER.warning(f"Skipping tree {tree}: {exc}")

    if merged is None:
        raise ValueError("No coverage trees to merge.")

    return merged
