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


_HASH_MODULUS = 1 << 32
_HASH_SIGN_BIT = 1 << 31


def name_hash_code(text: str) -> int:
    """Get a hash of the text which is stable across processes.

    The builtin ``hash()`` of a ``str`` is salted per interpreter, so it can't be
    used to match nodes of reports created by different runs.
    The hash is computed like the string hash of the JVM, which allows lookups
    with hash codes written by Java based coverage tools:

    >>> name_hash_code("")
    0
    >>> name_hash_code("a")
    97
    >>> name_hash_code("ab")
    3105
    """
    code_units = text.encode("utf-16-be")
    result = 0
    for index in range(0, len(code_units), 2):
        unit = (code_units[index] << 8) | code_units[index + 1]
        result = (31 * result + unit) % _HASH_MODULUS

    return result - _HASH_MODULUS if result & _HASH_SIGN_BIT else result


def is_blank(text: str) -> bool:
    """Check if the text is empty or contains only whitespace."""
    return not text.strip()


def force_unix_separator(path: str) -> str:
    """Get the path with / independent from OS."""
    return path.replace("\\", "/")
