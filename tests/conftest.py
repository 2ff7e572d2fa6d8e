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

import pytest

from covtree import (
    Coverage,
    CyclomaticComplexity,
    Metric,
    Node,
    class_node,
    file_node,
    method_node,
    module_node,
    package_node,
)


def _method(name: str, line_number: int, covered: int, missed: int) -> Node:
    method = method_node(name, "()V", line_number)
    method.add_value(Coverage(Metric.LINE, covered, missed))
    return method


@pytest.fixture
def coverage_tree() -> Node:
    r"""A small tree of a Java module.

    app
    +-- edu.hm
    |   +-- Main.java
    |       +-- Main
    |           +-- main   LINE 8/2, BRANCH 3/1, COMPLEXITY 3
    |           +-- helper LINE 0/4, BRANCH 0/2, COMPLEXITY 2
    +-- edu.hm.util
        +-- Util.java
            +-- Util
                +-- parse  LINE 5/5, COMPLEXITY 1
    """
    main = _method("main", 5, 8, 2)
    main.add_value(Coverage(Metric.BRANCH, 3, 1))
    main.add_value(CyclomaticComplexity(3))
    helper = _method("helper", 20, 0, 4)
    helper.add_value(Coverage(Metric.BRANCH, 0, 2))
    helper.add_value(CyclomaticComplexity(2))
    parse = _method("parse", 3, 5, 5)
    parse.add_value(CyclomaticComplexity(1))

    main_class = class_node("Main")
    main_class.add_all_children([main, helper])
    main_file = file_node("Main.java")
    main_file.add_source("src/main/java/edu/hm/Main.java")
    main_file.add_child(main_class)
    main_package = package_node("edu.hm")
    main_package.add_child(main_file)

    util_class = class_node("Util")
    util_class.add_child(parse)
    util_file = file_node("Util.java")
    util_file.add_child(util_class)
    util_package = package_node("edu.hm.util")
    util_package.add_child(util_file)

    root = module_node("app")
    root.add_source("src/main/java")
    root.add_all_children([main_package, util_package])
    return root


@pytest.fixture
def nested_tree() -> Node:
    r"""A tree with nested packages and classes.

    app
    +-- edu
        +-- hm
            +-- Main.java
                +-- Outer
                    +-- Inner
                        +-- run
    """
    inner = class_node("Inner")
    inner.add_child(method_node("run", "()V", 12))
    outer = class_node("Outer")
    outer.add_child(inner)
    source = file_node("Main.java")
    source.add_child(outer)
    hm = package_node("hm")
    hm.add_child(source)
    edu = package_node("edu")
    edu.add_child(hm)
    root = module_node("app")
    root.add_child(edu)
    return root
