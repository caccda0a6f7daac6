"""report-buildpacks: list every app's staged buildpacks and flag the stale ones.

Usage:
  cf-report-buildpacks report-buildpacks [--output-json] [--quiet] [--verbose]
  --output-json  Send JSON to stdout instead of a rendered table
  --quiet        Suppress progress messages on stderr
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from buildpack_report.plugin import COMMAND_NAME, PLUGIN_METADATA
from buildpack_report.services.buildpack_report_service import build_report
from buildpack_report.services.cf_session import load_session
from buildpack_report.services.errors import CloudFoundryAPIError, SessionError
from buildpack_report.services.report_renderer import render


def _setup_logging(quiet: bool = False, verbose: bool = False) -> logging.Logger:
    """Progress and errors go to stderr; stdout carries only the report."""
    log = logging.getLogger("buildpack_report")
    if verbose:
        log.setLevel(logging.DEBUG)
    elif quiet:
        log.setLevel(logging.WARNING)
    else:
        log.setLevel(logging.INFO)
    if not log.handlers:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        log.addHandler(sh)
    log.propagate = False
    return log


def build_parser() -> argparse.ArgumentParser:
    command = PLUGIN_METADATA.command(COMMAND_NAME)
    parser = argparse.ArgumentParser(prog="cf-report-buildpacks", description=command.help_text)
    parser.add_argument("--version", action="version", version=f"%(prog)s {PLUGIN_METADATA.version}")
    sub = parser.add_subparsers(dest="command", required=True)
    p = sub.add_parser(
        command.name,
        help=command.help_text,
        description=command.help_text,
        epilog=f"cf CLI plugin usage: {command.usage} (requires cf CLI >= {PLUGIN_METADATA.min_cli_version})",
    )
    p.add_argument("--output-json", action="store_true", help=command.options["output-json"])
    p.add_argument("--quiet", action="store_true", help=command.options["quiet"])
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = _setup_logging(quiet=args.quiet, verbose=args.verbose)

    try:
        session = load_session()
        with session.client() as client:
            rows = build_report(client)
    except (CloudFoundryAPIError, SessionError) as e:
        log.error("%s", e)
        return 1

    render(rows, sys.stdout, output_json=args.output_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
