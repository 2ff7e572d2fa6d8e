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

"""A hierarchical tree of coverage results which can be queried and merged."""

from .data_model.kinds import (
    class_node,
    create_node,
    file_node,
    method_node,
    module_node,
    package_node,
)
from .data_model.merging import DEFAULT_MERGE_OPTIONS, MergeOptions, merge_trees
from .data_model.metric import Metric
from .data_model.node import ROOT, Node
from .data_model.packages import normalize_package_name, split_packages
from .data_model.values import (
    Coverage,
    CyclomaticComplexity,
    LinesOfCode,
    Value,
)
from .utils import name_hash_code
from .version import __version__

__all__ = [
    "DEFAULT_MERGE_OPTIONS",
    "ROOT",
    "Coverage",
    "CyclomaticComplexity",
    "LinesOfCode",
    "MergeOptions",
    "Metric",
    "Node",
    "Value",
    "__version__",
    "class_node",
    "create_node",
    "file_node",
    "merge_trees",
    "method_node",
    "module_node",
    "name_hash_code",
    "normalize_package_name",
    "package_node",
    "split_packages",
]
