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
The metrics of a coverage tree.

A metric is used for two purposes: it tags the structural level of a node
(module, package, file, class, method) and it identifies the kind of a
measurement value (line coverage, lines of code, ...).
The declaration order is the structural order, from the outermost level to
the values of the leaves.
"""

from __future__ import annotations
from enum import Enum
import functools


@functools.total_ordering
class Metric(Enum):
    """The structural levels and measurement kinds of a coverage tree."""

    MODULE = "module"
    PACKAGE = "package"
    FILE = "file"
    CLASS = "class"
    METHOD = "method"
    LINE = "line"
    BRANCH = "branch"
    INSTRUCTION = "instruction"
    COMPLEXITY = "complexity"
    LOC = "loc"

    @property
    def ordinal(self) -> int:
        """The position of the metric in the structural order."""
        return _ORDINALS[self]

    @property
    def is_container(self) -> bool:
        """True if the metric tags a structural level of the tree."""
        return self in CONTAINER_METRICS

    @property
    def is_leaf(self) -> bool:
        """True if the metric is a coverage that is only stored as value."""
        return self in LEAF_METRICS

    @property
    def is_coverage(self) -> bool:
        """True if values of this metric are coverages."""
        return self.is_container or self.is_leaf

    @classmethod
    def from_tag(cls, tag: str) -> Metric:
        """Get the metric for a case insensitive name.

        >>> Metric.from_tag("Line")
        <Metric.LINE: 'line'>
        """
        try:
            return cls(tag.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown metric {tag!r}.") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Metric):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __str__(self) -> str:
        return self.name


_ORDINALS = {metric: ordinal for ordinal, metric in enumerate(Metric)}

CONTAINER_METRICS = frozenset(
    [Metric.MODULE, Metric.PACKAGE, Metric.FILE, Metric.CLASS, Metric.METHOD]
)
LEAF_METRICS = frozenset([Metric.LINE, Metric.BRANCH, Metric.INSTRUCTION])
