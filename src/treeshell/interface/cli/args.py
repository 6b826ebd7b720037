from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeshell.domain.config import NAMING_POLICIES, SUPPORTED_LOCALES
from treeshell.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the TreeShell CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeshell",
        description=i18n.t("app.description"),
    )

    # --- Session Root ---
    p.add_argument(
        "-p", "--path",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.path"),
    )

    # --- Snapshot Options ---
    p.add_argument(
        "--naming",
        dest="naming_policy",
        choices=NAMING_POLICIES,
        default=None,
        help=i18n.t("cli.args.naming"),
    )
    p.add_argument(
        "--follow-symlinks",
        action="store_true",
        help=i18n.t("cli.args.follow_symlinks"),
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help=i18n.t("cli.args.sort"),
    )

    # --- Interface ---
    p.add_argument(
        "--line-input",
        action="store_true",
        help=i18n.t("cli.args.line_input"),
    )
    p.add_argument(
        "--lang",
        dest="locale",
        choices=SUPPORTED_LOCALES,
        default=None,
        help=i18n.t("cli.args.lang"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--no-log-file",
        action="store_true",
        help=i18n.t("cli.args.no_log_file"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags that were not given are left out so they do not mask values
    coming from the preferences file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.input_path is not None:
        overrides["input_path"] = args.input_path
    if args.naming_policy:
        overrides["naming_policy"] = args.naming_policy
    if args.locale:
        overrides["locale"] = args.locale

    if args.follow_symlinks:
        overrides["follow_symlinks"] = True
    if args.sort:
        overrides["sort_entries"] = True
    if args.line_input:
        overrides["input_mode"] = "line"
    if args.no_log_file:
        overrides["log_to_file"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
