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

"""Package names and the package hierarchy of a module."""

from __future__ import annotations
import logging

from ..utils import force_unix_separator
from .kinds import package_node
from .metric import Metric
from .node import Node

LOGGER = logging.getLogger("covtree")


def normalize_package_name(name: str) -> str:
    r"""Get the dotted name of a package given as path.

    >>> normalize_package_name("edu/hm/hafner")
    'edu.hm.hafner'
    >>> normalize_package_name("edu\\hm\\hafner")
    'edu.hm.hafner'
    """
    return force_unix_separator(name).replace("/", ".")


def _find_or_create_package(name: str, parent: Node) -> Node:
    if (existing := _find_child(parent, name)) is not None:
        return existing
    package = package_node(name)
    parent.add_child(package)
    return package


def _find_child(parent: Node, name: str) -> Node | None:
    return next(
        (child for child in parent.children if child.matches(Metric.PACKAGE, name)),
        None,
    )


def _move_content(source: Node, target: Node) -> None:
    for child in source.children:
        source.remove_child(child)
        existing = next(
            (node for node in target.children if node.matches_node(child)), None
        )
        if existing is None:
            target.add_child(child)
        else:
            _move_content(child, existing)

    for value in source.values:
        if (stored := target.get_stored_value(value.metric)) is None:
            target.add_value(value)
        else:
            target.replace_value(stored.add(value))
    for path in source.sources:
        if path not in target.sources:
            target.add_source(path)


def split_packages(module: Node) -> None:
    """Split the dotted package children of the node into a package hierarchy.

    The packages ``a`` and ``a.b`` become the package ``a`` with the child ``b``.
    Packages which exist twice afterwards are joined recursively: children
    with the same identity are joined as well, values of the same metric
    are summed and missing sources are appended.
    """
    packages = [child for child in module.children if child.metric == Metric.PACKAGE]
    for package in packages:
        module.remove_child(package)

    for package in packages:
        *parents, local_name = package.name.split(".")
        current = module
        for part in parents:
            current = _find_or_create_package(part, current)

        if (existing := _find_child(current, local_name)) is None:
            LOGGER.debug(f"Add package {package.name} as {local_name} to {current}.")
            target = package_node(local_name)
            current.add_child(target)
        else:
            LOGGER.debug(f"Join package {package.name} with {existing}.")
            target = existing
        _move_content(package, target)
