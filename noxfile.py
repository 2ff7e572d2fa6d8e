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

import os
from pathlib import Path
import re
from runpy import run_path
import shutil

import nox


DEFAULT_TEST_DIRECTORIES = ["src", "tests"]
DEFAULT_LINT_ARGUMENTS = [
    "noxfile.py",
    "setup.py",
] + DEFAULT_TEST_DIRECTORIES

CI_RUN = "GITHUB_ACTION" in os.environ

nox.options.sessions = ["qa"]


def get_covtree_version() -> str:
    """Get the current covtree version without the date."""
    return re.sub(
        r"\.d\d+$",
        "",
        run_path(str(Path(__file__).parent / "src" / "covtree" / "version.py"))[
            "__version__"
        ],
    )


def install_dev_requirements(session: nox.Session, *requirements: str) -> None:
    """Install the needed development packages."""
    session.install(*requirements)


@nox.session(python=False)
def qa(session: nox.Session) -> None:
    """Run the quality tests."""
    for session_id in ["lint", "tests"]:
        session.log(f"Notify session {session_id}")
        session.notify(session_id, [])


@nox.session(python=False)
def lint(session: nox.Session) -> None:
    """Run the linters."""
    session.notify("ruff_check")
    session.notify("ruff_format")
    session.notify("bandit")
    session.notify("pylint")
    session.notify("mypy")


@nox.session
def ruff_check(session: nox.Session) -> None:
    """Run ruff check command."""
    install_dev_requirements(session, "ruff")
    if session.posargs:
        args = session.posargs
    else:
        args = ["."]
    session.run("ruff", "check", *args)


@nox.session
def ruff_format(session: nox.Session) -> None:
    """Run ruff format command."""
    install_dev_requirements(session, "ruff")
    if session.posargs:
        args = session.posargs
    else:
        args = ["--diff", "."]
    session.run("ruff", "format", *args)


@nox.session
def bandit(session: nox.Session) -> None:
    """Run bandit, a security linter."""
    install_dev_requirements(session, "bandit")
    if session.posargs:
        args = session.posargs
    else:
        args = ["-r", "src"]
    session.run("bandit", *args)


@nox.session
def pylint(session: nox.Session) -> None:
    """Run pylint command."""
    install_dev_requirements(session, "pylint", "nox", "pytest")
    session.install("-e", ".")
    if session.posargs:
        args = session.posargs
    else:
        args = DEFAULT_LINT_ARGUMENTS
    session.run("pylint", *args)


@nox.session
def mypy(session: nox.Session) -> None:
    """Run mypy command."""
    install_dev_requirements(session, "mypy", "nox", "pytest")
    session.install("-e", ".")
    if session.posargs:
        args = session.posargs
    else:
        args = DEFAULT_LINT_ARGUMENTS
    session.run("mypy", *args)


@nox.session
def tests(session: nox.Session) -> None:
    """Run the tests and the doctests."""
    use_coverage = os.environ.get("USE_COVERAGE") == "true"
    requirements = ["pytest"]
    if use_coverage:
        requirements += ["coverage", "pytest-cov"]
    install_dev_requirements(session, *requirements)
    session.install("-e", ".")

    args = ["-m", "pytest", "--doctest-modules"]
    if use_coverage:
        args += ["--cov=src", "--cov-branch"]
    args += session.posargs
    if "--" not in args:
        args += ["--"] + DEFAULT_TEST_DIRECTORIES

    # Delay the session failure,
    # even if command fail we want to get the coverage report.
    try:
        session.run(
            "python",
            *args,
        )
    finally:
        if use_coverage:
            session.run("coverage", "xml")
            if not CI_RUN:
                session.run("coverage", "html")


@nox.session
def build_distribution(session: nox.Session) -> None:
    """Build a wheel."""
    install_dev_requirements(session, "build", "twine")
    # Remove old dist if present
    dist_dir = Path("dist")
    if dist_dir.exists():
        shutil.rmtree(dist_dir)
    session.run("python", "-m", "build")
    session.log(f"Built covtree {get_covtree_version()}.")
    session.run(
        "twine", "check", *[str(p) for p in dist_dir.glob("*")], external=True
    )
