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
Aggregation of values over a subtree.

Each metric has an evaluator which computes the value of the metric for the
tree starting at a given node. The tree itself doesn't know how values are
aggregated, it looks up the evaluator by metric in :data:`EVALUATORS`.
"""

from __future__ import annotations
import functools
from typing import TYPE_CHECKING, Callable, Optional

from .metric import Metric
from .values import Coverage, LinesOfCode, Value

if TYPE_CHECKING:
    from .node import Node

Evaluator = Callable[["Node"], Optional[Value]]


def sum_values(metric: Metric, node: Node) -> Optional[Value]:
    """Sum the values of the metric stored in the tree starting with the node."""
    values = [
        value
        for descendant in node.iter_tree()
        if (value := descendant.get_stored_value(metric)) is not None
    ]
    if not values:
        return None
    return functools.reduce(lambda left, right: left + right, values)


def is_covered(node: Node) -> bool:
    """Check if at least one line of the tree starting with the node is covered."""
    line_coverage = sum_values(Metric.LINE, node)
    return isinstance(line_coverage, Coverage) and line_coverage.covered > 0


def count_covered_nodes(metric: Metric, node: Node) -> Optional[Value]:
    """Count the covered and missed nodes of the metric.

    If there is no node of the metric the stored values are summed up.
    """
    nodes = node.get_all(metric)
    if not nodes:
        return sum_values(metric, node)

    covered = sum(1 for element in nodes if is_covered(element))
    return Coverage(metric, covered, len(nodes) - covered)


def count_lines_of_code(node: Node) -> Optional[Value]:
    """Sum the lines of code, fall back to the total number of lines."""
    if (loc := sum_values(Metric.LOC, node)) is not None:
        return loc

    line_coverage = sum_values(Metric.LINE, node)
    if isinstance(line_coverage, Coverage):
        return LinesOfCode(line_coverage.total)
    return None


EVALUATORS: dict[Metric, Evaluator] = {
    **{
        metric: functools.partial(count_covered_nodes, metric)
        for metric in (
            Metric.MODULE,
            Metric.PACKAGE,
            Metric.FILE,
            Metric.CLASS,
            Metric.METHOD,
        )
    },
    **{
        metric: functools.partial(sum_values, metric)
        for metric in (
            Metric.LINE,
            Metric.BRANCH,
            Metric.INSTRUCTION,
            Metric.COMPLEXITY,
        )
    },
    Metric.LOC: count_lines_of_code,
}


def evaluate(metric: Metric, node: Node) -> Optional[Value]:
    """Get the value of the metric aggregated over the tree starting with the node."""
    return EVALUATORS[metric](node)
