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
The configuration of covtree.

The configuration is read from ``covtree.toml`` or from the
``[tool.covtree]`` table of ``pyproject.toml``::

    [tool.covtree]
    verbose = true
    split-packages = true
"""

from __future__ import annotations
import logging
import os
import sys
from typing import Any, Optional

from .exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

LOGGER = logging.getLogger("covtree")

DEFAULT_OPTIONS: dict[str, bool] = {
    "verbose": False,
    "force_color": False,
    "no_color": False,
    "split_packages": False,
    "skip_mismatched_roots": False,
}


class Options:
    """Wrapper for holding the configuration."""

    def __init__(self, **kwargs: Any) -> None:
        self.__dict__.update(kwargs)

    def get(self, name: str) -> Any:
        """Function to get an option by name."""
        return self.__dict__.get(name)

    def __repr__(self) -> str:
        entries = ", ".join(f"{key}={value!r}" for key, value in self.__dict__.items())
        return f"{self.__class__.__name__}({entries})"


def find_config_name(root: str, filename: str) -> Optional[str]:
    """Find the configuration to use."""
    if root:
        filename = os.path.join(root, filename)

    if os.path.isfile(filename):
        return filename

    return None


def config_entries_from_dict(data: dict[str, Any], filename: str) -> dict[str, bool]:
    """Check the entries of a configuration table and map them to option names."""
    entries = dict[str, bool]()
    for key, value in data.items():
        name = key.replace("-", "_")
        if name not in DEFAULT_OPTIONS:
            raise ConfigurationError(f"{filename}: Unknown option {key!r}.")
        if not isinstance(value, bool):
            raise ConfigurationError(
                f"{filename}: Option {key!r} must be a boolean, got {value!r}."
            )
        entries[name] = value

    return entries


def load_config(root: str = "") -> dict[str, bool]:
    """Load the configuration found by the default names in the directory."""
    if filename := find_config_name(root, "covtree.toml"):
        with open(filename, "rb") as buf:
            data = tomllib.load(buf)
        LOGGER.debug(f"Using configuration {filename}.")
        return config_entries_from_dict(data, filename)

    if filename := find_config_name(root, "pyproject.toml"):
        with open(filename, "rb") as buf:
            data = tomllib.load(buf)
        if (covtree_section := data.get("tool", {}).get("covtree")) is not None:
            LOGGER.debug(f"Using configuration of {filename}.")
            return config_entries_from_dict(covtree_section, filename)

    return {}


def get_options(root: str = "", **overrides: bool) -> Options:
    """Get the options from the defaults, the configuration file and the overrides."""
    unknown = sorted(set(overrides) - set(DEFAULT_OPTIONS))
    if unknown:
        raise ConfigurationError(f"Unknown options: {', '.join(unknown)}.")

    return Options(**{**DEFAULT_OPTIONS, **load_config(root), **overrides})
