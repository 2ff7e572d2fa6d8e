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

"""Factories for the node kinds of a coverage tree."""

from .metric import Metric
from .node import Node


def module_node(name: str) -> Node:
    """Create the node of a module, usually the root of a tree."""
    return Node(Metric.MODULE, name)


def package_node(name: str) -> Node:
    """Create the node of a package.

    The dotted name of the package is used as path, e.g. ``a.b`` is ``a/b``.
    """
    return Node(Metric.PACKAGE, name)


def file_node(name: str) -> Node:
    """Create the node of a source file."""
    return Node(Metric.FILE, name)


def class_node(name: str) -> Node:
    """Create the node of a class."""
    return Node(Metric.CLASS, name)


def method_node(name: str, signature: str = "", line_number: int = 0) -> Node:
    """Create the node of a method.

    Args:
        name (str):
            The name of the method.
        signature (str, optional):
            The signature of the method, e.g. ``(Ljava/lang/String;)V``.
        line_number (int, optional):
            The first line of the method, 0 if unknown.
    """
    if line_number < 0:
        raise ValueError(f"Line number must not be negative, got {line_number}.")
    return Node(Metric.METHOD, name, signature=signature, line_number=line_number)


NODE_FACTORIES = {
    Metric.MODULE: module_node,
    Metric.PACKAGE: package_node,
    Metric.FILE: file_node,
    Metric.CLASS: class_node,
    Metric.METHOD: method_node,
}


def create_node(metric: Metric, name: str) -> Node:
    """Create a node of the structural level given by the metric."""
    try:
        factory = NODE_FACTORIES[metric]
    except KeyError:
        raise ValueError(f"Metric {metric} is not a structural level.") from None
    return factory(name)
