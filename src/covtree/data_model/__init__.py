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
The covtree data model.

This package represents the core data structures. The modules don't depend
on any other covtree module except for the exceptions, the options and the
utils.

:class:`~covtree.data_model.node.Node` is the only entity of a coverage tree.
The kind of a node is given by its :class:`~covtree.data_model.metric.Metric`,
the measurements are :class:`~covtree.data_model.values.Value` objects which
are aggregated over a subtree by the evaluator of the metric.
"""
