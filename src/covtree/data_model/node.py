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
A hierarchical decomposition of coverage results.

A coverage tree consists of :class:`Node` objects. Each node is tagged with
a :class:`~covtree.data_model.metric.Metric` that defines the structural level
(module, package, file, class, method) and owns its children and a set of
values (at most one value per metric).

A node references its parent, the ``children`` list of the parent owns the
node. Removing a child clears its parent.

A tree must be acyclic and siblings must have a unique identity, i.e. the
metric and the name (plus the signature for overloaded methods); both
invariants are checked when a child is added.

Kind specific behavior (the local path of packages and files, the
signature and line number of methods) is selected by the metric tag of
the node, see :mod:`covtree.data_model.kinds` for the factories.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterable, Iterator, Optional

from ..exceptions import (
    DuplicateChildError,
    DuplicateValueError,
    MetricMismatchError,
    MissingValueError,
    NameMismatchError,
    NoParentError,
    SanityCheckError,
    TreeCycleError,
    TreeStructureError,
)
from ..utils import is_blank, name_hash_code
from .evaluators import evaluate
from .metric import Metric
from .values import Value

LOGGER = logging.getLogger("covtree")

ROOT = "^"
"""The name of the parent of a root node."""

DEFAULT_PACKAGE = "-"
"""The local path of the default (unnamed) package."""


def _package_path(node: Node) -> str:
    return node.merge_path(node.name.replace(".", "/"))


def _file_path(node: Node) -> str:
    return node.merge_path(node.name)


LOCAL_PATHS: dict[Metric, Callable[[Node], str]] = {
    Metric.PACKAGE: _package_path,
    Metric.FILE: _file_path,
}
"""The metrics of nodes contributing to the path of their descendants."""


class Node:
    """A node of a coverage tree.

    Args:
        metric (Metric):
            The structural level of the node.
        name (str):
            The human readable name of the node.
        signature (str, optional):
            The signature of a method node.
        line_number (int, optional):
            The first line of a method node.
    """

    __slots__ = (
        "_metric",
        "_name",
        "_signature",
        "_line_number",
        "_sources",
        "_children",
        "_values",
        "_parent",
    )

    def __init__(
        self,
        metric: Metric,
        name: str,
        *,
        signature: str = "",
        line_number: int = 0,
    ) -> None:
        if metric is not Metric.METHOD and (signature or line_number):
            raise ValueError(
                f"Only method nodes have a signature and a line number, got {metric}."
            )
        self._metric = metric
        self._name = name
        self._signature = signature
        self._line_number = line_number
        self._sources = list[str]()
        self._children = list[Node]()
        self._values = dict[Metric, Value]()
        self._parent: Optional[Node] = None

    @property
    def metric(self) -> Metric:
        """The metric (structural level) of this node."""
        return self._metric

    @property
    def name(self) -> str:
        """The human readable name of this node."""
        return self._name

    @property
    def signature(self) -> str:
        """The signature of a method, empty for all other nodes."""
        return self._signature

    @property
    def line_number(self) -> int:
        """The line number of a method, 0 for all other nodes."""
        return self._line_number

    @property
    def sources(self) -> list[str]:
        """The source paths of this node."""
        return list(self._sources)

    @property
    def children(self) -> list[Node]:
        """The children of this node."""
        return list(self._children)

    @property
    def values(self) -> list[Value]:
        """The values stored at this node, without the values of the children."""
        return list(self._values.values())

    # Structure

    @property
    def parent(self) -> Node:
        """Get the parent node.

        Raises NoParentError for the root of a tree.
        """
        if self._parent is None:
            raise NoParentError(f"Parent of node {self} is not set.")
        return self._parent

    def is_root(self) -> bool:
        """Check if this node is the root of the tree."""
        return self._parent is None

    def has_parent(self) -> bool:
        """Check if this node has a parent node."""
        return not self.is_root()

    def has_children(self) -> bool:
        """Check if this node has children."""
        return bool(self._children)

    def _is_child(self, node: Node) -> bool:
        return any(child is node for child in self._children)

    def _is_ancestor_or_self(self, node: Node) -> bool:
        current: Optional[Node] = self
        while current is not None:
            if current is node:
                return True
            current = current.parent if current.has_parent() else None
        return False

    def add_child(self, child: Node) -> None:
        """Append the node to the children of this node.

        Adding a child which is already a child of this node does nothing.
        """
        if child.has_parent() and child.parent is self:
            return
        if self._is_ancestor_or_self(child):
            raise TreeCycleError(
                f"The node {child} is an ancestor of {self}, cannot add it as child."
            )
        if child.has_parent():
            raise TreeStructureError(
                f"The node {child} is already a child of {child.parent}, cannot add it to {self}."
            )
        for sibling in self._children:
            if sibling.matches_node(child):
                raise DuplicateChildError(
                    f"The node {self} already has a child {sibling}, cannot add {child}."
                )

        self._children.append(child)
        child._parent = self

    def add_all_children(self, children: Iterable[Node]) -> None:
        """Append all the nodes to the children of this node."""
        for child in children:
            self.add_child(child)

    def remove_child(self, child: Node) -> None:
        """Remove the node from the children of this node."""
        if not self._is_child(child):
            raise TreeStructureError(
                f"The node {child} is not a child of this node {self}."
            )

        self._children = [node for node in self._children if node is not child]
        child._parent = None

    def clear_children(self) -> None:
        """Remove all children of this node."""
        for child in self.children:
            self.remove_child(child)

    def add_value(self, value: Value) -> None:
        """Add the value, there must not be a value for the metric yet."""
        if value.metric in self._values:
            raise DuplicateValueError(
                f"There is already a value {self._values[value.metric]} for the metric"
                f" {value.metric} in node {self}, cannot add {value}."
            )
        self._values[value.metric] = value

    def add_all_values(self, values: Iterable[Value]) -> None:
        """Add all the values to this node."""
        for value in values:
            self.add_value(value)

    def replace_value(self, value: Value) -> None:
        """Store the value, replacing the value of the same metric if there is one."""
        self._values[value.metric] = value

    def add_source(self, source: str) -> None:
        """Append the path to the sources of this node."""
        self._sources.append(source)

    def add_all_sources(self, sources: Iterable[str]) -> None:
        """Append all the paths to the sources of this node."""
        self._sources.extend(sources)

    def iter_tree(self) -> Iterator[Node]:
        """Iterate over this node and all its descendants in pre-order."""
        yield self
        for child in self._children:
            yield from child.iter_tree()

    # Paths and names

    def get_path(self) -> str:
        """Get the path of this node, empty for nodes without a local path."""
        local_path = LOCAL_PATHS.get(self.metric)
        return "" if local_path is None else local_path(self)

    def merge_path(self, local_path: str) -> str:
        """Get the local path prefixed with the path of the parent node.

        The local path of the default package ``-`` is mapped to an empty path.
        """
        if local_path == DEFAULT_PACKAGE:
            return ""

        if self.has_parent():
            parent_path = self.parent.get_path()

            if is_blank(parent_path):
                return local_path
            if is_blank(local_path):
                return parent_path
            return f"{parent_path}/{local_path}"

        return local_path

    def get_parent_name(self) -> str:
        """Get the dotted name of all direct ancestors with the metric of the parent.

        Returns ROOT if there is no parent.
        """
        if self.is_root():
            return ROOT

        parent_metric = self.parent.metric
        names = list[str]()
        node: Optional[Node] = self.parent
        while node is not None and node.metric == parent_metric:
            names.insert(0, node.name)
            node = node.parent if node.has_parent() else None
        return ".".join(names)

    # Metrics

    def get_metrics(self) -> list[Metric]:
        """Get the sorted metrics of the tree starting with this node."""
        metrics = {self.metric, *self._values}
        for child in self._children:
            metrics.update(child.get_metrics())
        return sorted(metrics)

    def get_metrics_distribution(self) -> dict[Metric, Value]:
        """Get the aggregated values of all metrics of the tree starting with this node."""
        distribution = dict[Metric, Value]()
        for metric in self.get_metrics():
            value = self.get_value(metric)
            if value is None:
                raise MissingValueError(
                    f"Node {self} has no value for metric {metric}."
                )
            distribution[metric] = value
        return distribution

    def get_value(self, metric: Metric) -> Optional[Value]:
        """Get the value of the metric aggregated over the tree starting with this node."""
        return evaluate(metric, self)

    def get_stored_value(self, metric: Metric) -> Optional[Value]:
        """Get the value of the metric stored at this node, without aggregation."""
        return self._values.get(metric)

    # Search

    def get_all(self, metric: Metric) -> list[Node]:
        """Get all nodes of the metric in the tree starting with this node.

        The nodes of the children come first, the node itself is the last one.
        """
        if metric.is_leaf:
            raise SanityCheckError(
                f"Metric {metric} is only used for values, not for nodes."
            )
        return self._get_all(metric)

    def _get_all(self, metric: Metric) -> list[Node]:
        nodes = list[Node]()
        for child in self._children:
            nodes.extend(child._get_all(metric))
        if self.metric == metric:
            nodes.append(self)
        return nodes

    def find(self, metric: Metric, name: str) -> Optional[Node]:
        """Find a node with the metric and the name in the tree starting with this node."""
        return self._find(lambda node: node.matches(metric, name))

    def find_by_hash_code(self, metric: Metric, hash_code: int) -> Optional[Node]:
        """Find a node with the metric and the hash code of the name or the path.

        Hash codes can collide, see :meth:`matches_hash_code`.
        """
        return self._find(lambda node: node.matches_hash_code(metric, hash_code))

    def _find(self, predicate: Callable[[Node], bool]) -> Optional[Node]:
        if predicate(self):
            return self
        for child in self._children:
            if (node := child._find(predicate)) is not None:
                return node
        return None

    def matches(self, metric: Metric, name: str) -> bool:
        """Check if this node has the metric and the name."""
        return self.metric == metric and self.name == name

    def matches_node(self, other: Node) -> bool:
        """Check if the other node has the identity of this node.

        Siblings with the same identity are not allowed. Overloaded methods
        share a name, so the signature is part of the identity.
        """
        return self.matches(other.metric, other.name) and (
            self.signature == other.signature
        )

    def matches_hash_code(self, metric: Metric, hash_code: int) -> bool:
        """Check if this node has the metric and the hash code of the name or the path.

        The hash code is computed with :func:`~covtree.utils.name_hash_code`.
        This is a best effort check to avoid computing the paths of all nodes
        when matching many nodes, two different names can have the same hash code.
        """
        if self.metric != metric:
            return False
        return (
            name_hash_code(self.name) == hash_code
            or name_hash_code(self.get_path()) == hash_code
        )

    # Copies

    def copy_empty(self) -> Node:
        """Get a copy of this node without parent, children, values and sources."""
        return Node(
            self.metric,
            self.name,
            signature=self.signature,
            line_number=self.line_number,
        )

    def copy_tree(self, parent: Optional[Node] = None) -> Node:
        """Get a copy of the tree starting with this node.

        The copy is added as child to the given parent. The values are shared
        with this tree since they are immutable.
        """
        copy = self.copy_empty()
        if parent is not None:
            parent.add_child(copy)

        for child in self._children:
            child.copy_tree(copy)
        copy.add_all_values(self._values.values())
        copy.add_all_sources(self._sources)

        return copy

    # Merge

    def combine_with(self, other: Node) -> Node:
        """Get a new tree with the merged nodes of this and the other tree.

        The roots of both trees must have the same identity. Values of
        the same node are merged with ``max``, children which exist only in one
        tree are copied and missing sources are appended. Both trees are not
        changed.
        """
        if other.metric != self.metric:
            raise MetricMismatchError(
                f"Cannot merge nodes of different metrics: {self} - {other}"
            )
        if other.name != self.name:
            raise NameMismatchError(
                f"Cannot merge nodes with different names: {self} - {other}"
            )

        LOGGER.debug(f"Merge tree {other} into {self}.")
        combined = self.copy_tree()
        combined._combine_children(other)
        return combined

    def _combine_children(self, other: Node) -> None:
        for source in other._sources:
            if source not in self._sources:
                self._sources.append(source)

        for metric, value in other._values.items():
            if metric in self._values:
                self._values[metric] = self._values[metric].max(value)
            else:
                self._values[metric] = value

        for other_child in other._children:
            existing_child = next(
                (
                    child
                    for child in self._children
                    if child.matches_node(other_child)
                ),
                None,
            )
            if existing_child is None:
                other_child.copy_tree(self)
            else:
                existing_child._combine_children(other_child)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.metric == other.metric
            and self.name == other.name
            and self.signature == other.signature
            and self.line_number == other.line_number
            and self._sources == other._sources
            and self._children == other._children
            and self._values == other._values
        )

    def __hash__(self) -> int:
        return hash((self.metric, self.name))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.metric!s}, {self.name!r})"

    def __str__(self) -> str:
        return f"[{self.metric}] {self.name} <{len(self._children)}>"
