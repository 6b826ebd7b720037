from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration loading and merging
(defaults, preferences file and CLI overrides), logging bootstrap, the
initial snapshot build and the interactive menu loop.
"""

import sys
from typing import Any, Dict, List, Optional, TextIO

from treeshell.core.session import TreeSession
from treeshell.core.snapshot.builder import NamingPolicy, SnapshotOptions
from treeshell.core.validator import validate_config
from treeshell.domain.config import get_default_config, load_config
from treeshell.domain.errors import TreeShellError
from treeshell.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from treeshell.interface.cli import args as cli_args
from treeshell.interface.cli.menu import MenuController
from treeshell.interface.cli.reader import ConsoleReader
from treeshell.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STARTUP_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
) -> int:
    """
    Execute the interactive CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Input stream for prompts (defaults to sys.stdin).
        stdout: Output stream for the menu (defaults to sys.stdout).
        stderr: Stream for fatal startup messages (defaults to sys.stderr).

    Returns:
        int: 0 on normal exit, 1 if the initial snapshot cannot be built,
             130 if interrupted.
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    if sys.platform == "win32" and stdout is None:
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (Defaults vs preferences file, then CLI flags)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging and locale bootstrap
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=get_default_log_path() if conf["log_to_file"] else None,
        file_level="DEBUG" if conf["log_level"] == "DEBUG" else "INFO",
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")
    i18n.load_locale(conf["locale"])

    reader = ConsoleReader(stdin, line_mode=conf["input_mode"] == "line")

    try:
        # 4. Initial snapshot (fatal on failure)
        session = _open_session(conf, reader, out, err)
        if session is None:
            return EXIT_STARTUP_FAILURE

        # 5. Interactive loop
        MenuController(session, reader, out).run()
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.info(msg)
        print(msg, file=err)
        return EXIT_INTERRUPTED

    logger.info("Session closed.")
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())

# -----------------------------------------------------------------------------
# SESSION BOOTSTRAP
# -----------------------------------------------------------------------------

def _open_session(
        conf: Dict[str, Any],
        reader: ConsoleReader,
        out: TextIO,
        err: TextIO,
) -> Optional[TreeSession]:
    """Resolve the root path (prompting if needed) and build the first snapshot."""
    path = conf["input_path"]
    if not path:
        print(i18n.t("cli.prompts.path"), end="", file=out, flush=True)
        path = reader.read_token()

    if not path:
        msg = i18n.t("cli.errors.no_path")
        logger.info(msg)
        print(f"\nERROR: {msg}", file=err)
        return None

    options = SnapshotOptions(
        naming_policy=NamingPolicy(conf["naming_policy"]),
        follow_symlinks=conf["follow_symlinks"],
        sort_entries=conf["sort_entries"],
    )

    try:
        return TreeSession.open(path, options)
    except TreeShellError as e:
        msg = i18n.t(e.message_key, default=str(e), **e.format_args())
        logger.info(f"Startup failed: {e}")
        print(f"ERROR: {msg}", file=err)
        return None

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged, preventing schema pollution.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    run()
