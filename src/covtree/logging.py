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

import logging
import os
import sys
from typing import Any, Optional
from colorlog import ColoredFormatter

from .options import Options

LOGGER = logging.getLogger("covtree")
DEFAULT_LOGGING_HANDLER = logging.StreamHandler(sys.stderr)

LOG_FORMAT = "(%(levelname)s) %(message)s"
COLOR_LOG_FORMAT = f"%(log_color)s{LOG_FORMAT}"


def __colored_formatter(options: Optional[Options] = None) -> ColoredFormatter:
    """Configure the colored logging formatter."""
    force_color = bool(options.get("force_color")) if options is not None else False
    no_color = bool(options.get("no_color")) if options is not None else False

    return ColoredFormatter(
        COLOR_LOG_FORMAT,
        datefmt=None,
        reset=True,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "blue",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        secondary_log_colors={},
        style="%",
        force_color=force_color,
        no_color=no_color,
        stream=sys.stderr,
    )


def _ci_logging_prefixes() -> Optional[dict[int, str]]:
    if "TF_BUILD" in os.environ:
        return {
            logging.WARNING: "##vso[task.logissue type=warning]",
            logging.ERROR: "##vso[task.logissue type=error]",
        }
    if "GITHUB_ACTIONS" in os.environ:
        return {
            logging.WARNING: "::warning::",
            logging.ERROR: "::error::",
        }
    return None


class CiFormatter(logging.Formatter):
    """Formatter for the warnings and errors annotated by a CI system."""

    def __init__(self, prefixes: dict[int, str]) -> None:
        super().__init__(fmt=LOG_FORMAT)
        self.prefixes = prefixes

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno in self.prefixes:
            return f"{self.prefixes[record.levelno]}{super().format(record)}"
        return ""


def configure_logging() -> None:
    """Configure the logging module."""
    DEFAULT_LOGGING_HANDLER.setFormatter(__colored_formatter())
    logging.basicConfig(level=logging.INFO, handlers=[DEFAULT_LOGGING_HANDLER])

    if (prefixes := _ci_logging_prefixes()) is not None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CiFormatter(prefixes))
        logging.getLogger().addHandler(handler)

    def exception_hook(exc_type: Any, exc_value: Any, exc_traceback: Any) -> None:
        logging.exception(
            "Uncaught EXCEPTION", exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = exception_hook


def update_logging(options: Options) -> None:
    """Update the logger configuration depending on the options."""
    if options.get("verbose"):
        LOGGER.setLevel(logging.DEBUG)

    # Update the formatter of the default logger depending on options
    DEFAULT_LOGGING_HANDLER.setFormatter(__colored_formatter(options))
