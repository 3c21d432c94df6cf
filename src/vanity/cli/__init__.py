"""Vanity CLI — serve one import root from the command line.

Entry point registered as ``vanity`` in ``pyproject.toml``::

    [project.scripts]
    vanity = "vanity.cli:main"
"""

import argparse
import logging
import sys

EXAMPLES = """\
examples:
  vanity 'rsc.io/*' 'https://github.com/rsc/*'
  vanity 9fans.net/go https://github.com/9fans/go
"""

LOG_FORMAT = "vanity: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``vanity`` command."""
    parser = argparse.ArgumentParser(
        prog="vanity",
        description=(
            "HTTP server for a custom Go import domain. Answers requests under "
            "<import> with a go-import meta tag naming <repo>, and redirects "
            "browsers to the repository. If both end in /*, the matching path "
            "element is substituted into the repository URL on each request."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("import_path", metavar="import", help="Import path root (may end in /*)")
    parser.add_argument("repo_path", metavar="repo", help="Repository root URL (may end in /*)")
    parser.add_argument(
        "--addr",
        default=None,
        metavar="ADDRESS",
        help="Serve HTTP on ADDRESS (default :http, or :https with --tls)",
    )
    parser.add_argument(
        "--tls",
        action="store_true",
        help="Serve HTTPS using <host>.crt and <host>.key from the current directory",
    )
    parser.add_argument(
        "--vcs",
        default="git",
        metavar="SYSTEM",
        help="Version control system: git, hg, or svn (default git)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker count (0=auto-detect from CPU count)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error", "critical"),
        help="Log level (default info)",
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=("text", "json"),
        help="Server log format (default text)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``vanity`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        format=LOG_FORMAT,
        level=args.log_level.upper(),
    )

    from vanity.cli._run import run_server

    run_server(args)
