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

# pylint: disable=missing-function-docstring,missing-module-docstring

import logging
from typing import Optional

import pytest

from covtree import (
    Coverage,
    LinesOfCode,
    MergeOptions,
    Metric,
    Node,
    class_node,
    file_node,
    merge_trees,
    method_node,
    module_node,
    package_node,
)
from covtree.data_model.merging import get_merge_options_from_options
from covtree.exceptions import (
    IncompatibleValueError,
    MetricMismatchError,
    NameMismatchError,
    NodeMergeError,
)
from covtree.options import Options


def _module(name: str = "app", **files: tuple[int, int]) -> Node:
    root = module_node(name)
    for filename, (covered, missed) in files.items():
        source = file_node(f"{filename}.c")
        source.add_value(Coverage(Metric.LINE, covered, missed))
        root.add_child(source)
    return root


def _line_coverage(tree: Node, filename: str) -> Optional[Coverage]:
    source = tree.find(Metric.FILE, filename)
    assert source is not None
    value = source.get_stored_value(Metric.LINE)
    assert value is None or isinstance(value, Coverage)
    return value


def test_merge_with_copy(coverage_tree: Node) -> None:
    merged = coverage_tree.combine_with(coverage_tree.copy_tree())

    assert merged == coverage_tree
    assert merged is not coverage_tree


def test_merge_with_itself(coverage_tree: Node) -> None:
    assert coverage_tree.combine_with(coverage_tree) == coverage_tree


def test_merge_with_empty_root(coverage_tree: Node) -> None:
    empty = coverage_tree.copy_empty()

    assert coverage_tree.combine_with(empty) == coverage_tree
    assert empty.combine_with(coverage_tree) == coverage_tree


def test_merge_uses_maximum() -> None:
    first = _module(a=(2, 8))
    second = _module(a=(7, 3), b=(1, 1))

    merged = first.combine_with(second)

    assert [child.name for child in merged.children] == ["a.c", "b.c"]
    assert _line_coverage(merged, "a.c") == Coverage(Metric.LINE, 7, 3)
    assert _line_coverage(merged, "b.c") == Coverage(Metric.LINE, 1, 1)
    assert merged.get_value(Metric.LINE) == Coverage(Metric.LINE, 8, 4)


def test_merge_does_not_change_inputs() -> None:
    first = _module(a=(2, 8))
    second = _module(a=(7, 3), b=(1, 1))
    first_copy = first.copy_tree()
    second_copy = second.copy_tree()

    merged = first.combine_with(second)

    assert first == first_copy
    assert second == second_copy
    added = merged.find(Metric.FILE, "b.c")
    original = second.find(Metric.FILE, "b.c")
    assert added is not None
    assert added is not original
    assert added.parent is merged
    assert original is not None
    assert original.parent is second


def test_merge_adds_values() -> None:
    first = _module(a=(2, 8))
    second = _module(a=(7, 3))
    second.add_value(LinesOfCode(42))

    merged = first.combine_with(second)

    assert merged.values == [LinesOfCode(42)]
    assert first.values == []


def test_merge_is_associative() -> None:
    first = _module(a=(2, 8))
    second = _module(a=(7, 3), b=(1, 1))
    third = _module(a=(5, 5), b=(2, 0))

    left = first.combine_with(second).combine_with(third)
    right = first.combine_with(second.combine_with(third))

    assert left == right
    assert _line_coverage(left, "a.c") == Coverage(Metric.LINE, 7, 3)
    assert _line_coverage(left, "b.c") == Coverage(Metric.LINE, 2, 0)


def test_merge_values_are_commutative() -> None:
    first = _module(a=(2, 8), b=(1, 1))
    second = _module(a=(7, 3), b=(1, 1))

    assert first.combine_with(second) == second.combine_with(first)


def test_merge_nested_children() -> None:
    first = module_node("app")
    package = package_node("edu")
    first.add_child(package)
    package.add_child(file_node("A.java"))

    second = module_node("app")
    other_package = package_node("edu")
    second.add_child(other_package)
    other_package.add_child(file_node("B.java"))

    merged = first.combine_with(second)

    assert [child.name for child in merged.children] == ["edu"]
    assert [child.name for child in merged.children[0].children] == [
        "A.java",
        "B.java",
    ]
    assert [child.name for child in package.children] == ["A.java"]


def test_merge_matches_children_by_metric_and_name() -> None:
    first = module_node("app")
    first.add_child(package_node("util"))
    second = module_node("app")
    second.add_child(file_node("util"))

    merged = first.combine_with(second)

    assert [str(child) for child in merged.children] == [
        "[PACKAGE] util <0>",
        "[FILE] util <0>",
    ]


def _calculator(*methods: tuple[str, int, int]) -> Node:
    calc = class_node("Calc")
    for signature, covered, missed in methods:
        method = method_node("add", signature)
        method.add_value(Coverage(Metric.LINE, covered, missed))
        calc.add_child(method)
    return calc


def test_merge_overloaded_methods() -> None:
    first = _calculator(("(II)I", 1, 3), ("(DD)D", 2, 2))
    second = _calculator(("(DD)D", 4, 0), ("(JJ)J", 1, 0))

    merged = first.combine_with(second)

    assert [
        (child.signature, child.get_stored_value(Metric.LINE))
        for child in merged.children
    ] == [
        ("(II)I", Coverage(Metric.LINE, 1, 3)),
        ("(DD)D", Coverage(Metric.LINE, 4, 0)),
        ("(JJ)J", Coverage(Metric.LINE, 1, 0)),
    ]


def test_merged_nodes_keep_their_parents(coverage_tree: Node) -> None:
    source = coverage_tree.combine_with(coverage_tree.copy_tree()).find(
        Metric.FILE, "Main.java"
    )
    assert source is not None
    assert source.get_path() == "edu/hm/Main.java"
    assert source.get_parent_name() == "edu.hm"

    method = merge_trees([coverage_tree, coverage_tree]).find(Metric.METHOD, "main")
    assert method is not None
    assert method.get_parent_name() == "Main"
    assert method.parent.parent.get_path() == "edu/hm/Main.java"


def test_merge_different_metrics() -> None:
    with pytest.raises(
        MetricMismatchError,
        match=r"Cannot merge nodes of different metrics: \[MODULE\] app <0> - \[PACKAGE\] app <0>",
    ):
        module_node("app").combine_with(package_node("app"))


def test_merge_different_names() -> None:
    with pytest.raises(
        NameMismatchError,
        match=r"Cannot merge nodes with different names: \[MODULE\] app <0> - \[MODULE\] lib <0>",
    ):
        module_node("app").combine_with(module_node("lib"))


def test_merge_incompatible_values() -> None:
    first = _module(a=(2, 8))
    second = _module(a=(2, 9))

    with pytest.raises(IncompatibleValueError, match="totals differ"):
        first.combine_with(second)
    assert _line_coverage(first, "a.c") == Coverage(Metric.LINE, 2, 8)


def test_merge_trees() -> None:
    trees = [
        _module(a=(2, 8)),
        _module(a=(7, 3), b=(1, 1)),
        _module(a=(5, 5), c=(0, 3)),
    ]

    merged = merge_trees(trees)

    assert [child.name for child in merged.children] == ["a.c", "b.c", "c.c"]
    assert _line_coverage(merged, "a.c") == Coverage(Metric.LINE, 7, 3)
    assert merged == trees[0].combine_with(trees[1]).combine_with(trees[2])


def test_merge_single_tree() -> None:
    tree = _module(a=(2, 8))

    merged = merge_trees([tree])

    assert merged == tree
    assert merged is not tree


def test_merge_no_trees() -> None:
    with pytest.raises(ValueError, match="No coverage trees to merge"):
        merge_trees([])


def test_merge_trees_with_mismatched_root() -> None:
    trees = [_module(a=(2, 8)), _module("lib", a=(7, 3))]

    with pytest.raises(NodeMergeError):
        merge_trees(trees)


def test_merge_trees_skips_mismatched_root(caplog: pytest.LogCaptureFixture) -> None:
    trees = [_module(a=(2, 8)), _module("lib", a=(7, 3)), _module(a=(4, 6))]

    with caplog.at_level(logging.WARNING, logger="covtree"):
        merged = merge_trees(trees, MergeOptions(skip_mismatched_roots=True))

    assert _line_coverage(merged, "a.c") == Coverage(Metric.LINE, 4, 6)
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Skipping tree [MODULE] lib <1>: Cannot merge nodes with different names: [MODULE] app <1> - [MODULE] lib <1>"
    ]


def test_merge_trees_with_split_packages() -> None:
    first = module_node("app")
    dotted = package_node("edu.hm")
    first.add_child(dotted)
    source = file_node("X.java")
    source.add_value(Coverage(Metric.LINE, 1, 1))
    dotted.add_child(source)

    second = module_node("app")
    edu = package_node("edu")
    second.add_child(edu)
    hm = package_node("hm")
    edu.add_child(hm)
    other_source = file_node("X.java")
    other_source.add_value(Coverage(Metric.LINE, 2, 0))
    hm.add_child(other_source)

    merged = merge_trees([first, second], MergeOptions(split_packages=True))

    assert [child.name for child in merged.children] == ["edu"]
    merged_source = merged.find(Metric.FILE, "X.java")
    assert merged_source is not None
    assert merged_source.get_path() == "edu/hm/X.java"
    assert merged_source.get_stored_value(Metric.LINE) == Coverage(Metric.LINE, 2, 0)
    # The input is not changed
    assert [child.name for child in first.children] == ["edu.hm"]


def test_merge_options_from_options() -> None:
    options = Options(split_packages=True, skip_mismatched_roots=False)

    assert get_merge_options_from_options(options) == MergeOptions(
        split_packages=True, skip_mismatched_roots=False
    )
    assert get_merge_options_from_options(Options()) == MergeOptions()
