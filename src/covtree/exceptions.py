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

"""Exceptions used in covtree."""


class TreeStructureError(AssertionError):
    """Raised when an operation would break the parent/child bookkeeping."""


class TreeCycleError(TreeStructureError):
    """Raised when a node should become a descendant of itself."""


class DuplicateChildError(TreeStructureError):
    """Raised when a sibling with the same identity already exists."""


class DuplicateValueError(ValueError):
    """Raised when a node already holds a value for the metric."""


class NodeMergeError(ValueError):
    """Exception for tree merge errors."""


class MetricMismatchError(NodeMergeError):
    """Raised when the roots of two merged trees use different metrics."""


class NameMismatchError(NodeMergeError):
    """Raised when the roots of two merged trees have different names."""


class IncompatibleValueError(ValueError):
    """Raised when two values cannot be added or compared."""


class NoParentError(LookupError):
    """Raised when the parent of a root node is requested."""


class MissingValueError(LookupError):
    """Raised when a metric of a tree can't be resolved to a value."""


class SanityCheckError(AssertionError):
    """Raised when a sanity check fails."""


class ConfigurationError(ValueError):
    """Raised for invalid configuration entries."""
