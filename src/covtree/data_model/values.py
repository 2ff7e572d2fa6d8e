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
The measurement values stored at the nodes of a coverage tree.

All values are immutable, so they can be shared between trees.
Two operations combine values of the same metric:

* ``add`` (``+``) sums two values, e.g. to aggregate the values of a subtree.
* ``max`` selects the better one of two values that describe the same
  element, e.g. the line coverage of one file in two test runs.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, NoReturn, TypeVar

from ..exceptions import IncompatibleValueError
from .metric import Metric

_V = TypeVar("_V", bound="Value")


class Value(ABC):
    """Base class for a measurement value of one metric."""

    metric: Metric

    @abstractmethod
    def add(self: _V, other: _V) -> _V:
        """Get the sum of this and the other value."""

    @abstractmethod
    def max(self: _V, other: _V) -> _V:
        """Get the maximum of this and the other value."""

    def __add__(self: _V, other: _V) -> _V:
        return self.add(other)

    def _ensure_compatible(self, other: Value) -> None:
        if type(other) is not type(self):
            self._raise_incompatible(other, "types differ")
        if other.metric != self.metric:
            self._raise_incompatible(other, "metrics differ")

    def _raise_incompatible(self, other: Value, reason: str) -> NoReturn:
        raise IncompatibleValueError(
            f"Cannot combine {self!r} and {other!r}: {reason}."
        )


@dataclass(frozen=True)
class Coverage(Value):
    """The coverage of a metric, e.g. the covered lines of a file."""

    metric: Metric
    covered: int
    """How many elements were covered."""

    missed: int
    """How many elements were not covered."""

    def __post_init__(self) -> None:
        if not self.metric.is_coverage:
            raise ValueError(f"Metric {self.metric} is not a coverage metric.")
        if self.covered < 0 or self.missed < 0:
            raise ValueError(
                f"Coverage must not be negative, got {self.covered}/{self.missed}."
            )

    @staticmethod
    def new_empty(metric: Metric) -> Coverage:
        """Create an empty coverage."""
        return Coverage(metric, 0, 0)

    @property
    def total(self) -> int:
        """Get the number of covered and missed elements."""
        return self.covered + self.missed

    @property
    def covered_percentage(self) -> Fraction:
        """Get the ratio of covered elements in percent.

        >>> Coverage(Metric.LINE, 1, 3).covered_percentage
        Fraction(25, 1)
        >>> Coverage(Metric.LINE, 0, 0).covered_percentage
        Fraction(0, 1)
        """
        if not self.total:
            return Fraction(0)
        return Fraction(100 * self.covered, self.total)

    @property
    def missed_percentage(self) -> Fraction:
        """Get the ratio of missed elements in percent."""
        if not self.total:
            return Fraction(0)
        return 100 - self.covered_percentage

    def is_set(self) -> bool:
        """Check if there is at least one element."""
        return self.total > 0

    def add(self, other: Coverage) -> Coverage:
        self._ensure_compatible(other)
        return Coverage(
            self.metric, self.covered + other.covered, self.missed + other.missed
        )

    def max(self, other: Coverage) -> Coverage:
        """Get the coverage with more covered elements.

        Both coverages must describe the same elements, so the totals must
        be equal.
        """
        self._ensure_compatible(other)
        if self.total != other.total:
            self._raise_incompatible(other, "totals differ")
        return other if other.covered > self.covered else self

    def __str__(self) -> str:
        return (
            f"{self.metric}: {float(self.covered_percentage):.2f}%"
            f" ({self.covered}/{self.total})"
        )


@dataclass(frozen=True)
class IntegerValue(Value):
    """Base class of the values which are a simple count, e.g. the lines of code.

    The subclasses fix the metric of the count.
    """

    value: int
    metric: ClassVar[Metric]

    def __post_init__(self) -> None:
        if not hasattr(type(self), "metric"):
            raise TypeError(
                f"{type(self).__name__} has no metric, use one of its subclasses."
            )

    def add(self: _I, other: _I) -> _I:
        self._ensure_compatible(other)
        return type(self)(self.value + other.value)

    def max(self: _I, other: _I) -> _I:
        self._ensure_compatible(other)
        return other if other.value > self.value else self

    def __str__(self) -> str:
        return f"{self.metric}: {self.value}"


_I = TypeVar("_I", bound=IntegerValue)


@dataclass(frozen=True)
class LinesOfCode(IntegerValue):
    """The number of lines of code."""

    metric: ClassVar[Metric] = Metric.LOC


@dataclass(frozen=True)
class CyclomaticComplexity(IntegerValue):
    """The cyclomatic complexity."""

    metric: ClassVar[Metric] = Metric.COMPLEXITY
