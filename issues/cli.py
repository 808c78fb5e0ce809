"""Command line parsing and dispatch.

Fetches the issues of a GitHub project and prints a table of the last
``count`` of them (oldest of the selection first). Usage:

    issues <user> <project> [count]
    issues -h | --help

Exit status: 0 on success or help, 2 when the API answers with an error,
1 on any other failure (logged with traceback to stderr).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Sequence, TextIO, Tuple

from issues.adapters import GitHubAdapter, IssueSource
from issues.config import load_config
from issues.logging import IssuesLogging
from issues.models import HELP, FetchFailure, FetchResult, FetchSuccess, Issue, IssuesQuery, ParsedArgs
from issues.table_formatter import print_table_for_columns

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 4
COLUMNS = ["number", "created_at", "title"]
API_NAME = "Github"
DEFAULT_CONFIG_PATH = Path("config.yaml")


class InvalidCountError(ValueError):
    """Count argument is not a positive integer."""

    pass


def usage() -> str:
    return f"usage: issues <user> <project> [ count | {DEFAULT_COUNT} ]"


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises on bad input instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    # -h/--help map to HELP instead of exiting.
    parser = _Parser(prog="issues", add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to YAML config file",
    )
    parser.add_argument("positionals", nargs="*")
    return parser


def _parse(argv: Sequence[str]) -> argparse.Namespace:
    # Unknown switches are dropped rather than counted as positionals.
    parsed, _ = _build_parser().parse_known_intermixed_args(list(argv))
    return parsed


def args_to_internal_representation(positionals: Sequence[str]) -> ParsedArgs:
    """Map positional arguments to a query; any other arity means HELP."""
    if len(positionals) == 2:
        user, project = positionals
        return IssuesQuery(user=user, project=project, count=DEFAULT_COUNT)
    if len(positionals) == 3:
        user, project, raw_count = positionals
        # Plain ASCII digits only: no sign, whitespace or underscores.
        if not (raw_count.isascii() and raw_count.isdigit()):
            raise InvalidCountError(f"count must be a positive integer, got {raw_count!r}")
        count = int(raw_count)
        if count < 1:
            raise InvalidCountError(f"count must be positive, got {count}")
        return IssuesQuery(user=user, project=project, count=count)
    return HELP


def parse_command_line(argv: Sequence[str]) -> Tuple[ParsedArgs, Path]:
    """Return the parsed arguments together with the config file path.

    Malformed options (e.g. ``-c`` without a value) count as a usage error
    and give HELP, like a bad argument count.
    """
    try:
        options = _parse(argv)
    except _UsageError as e:
        logger.debug("Usage error: %s", e)
        return HELP, DEFAULT_CONFIG_PATH
    if options.help:
        return HELP, options.config
    return args_to_internal_representation(options.positionals), options.config


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Return an IssuesQuery, or HELP for -h/--help or a bad argument count.

    The help flag wins over positionals. A count that is not a positive
    integer raises InvalidCountError.
    """
    return parse_command_line(argv)[0]


def decode_response(result: FetchResult, out: TextIO | None = None) -> List[Issue]:
    """Return the issues of a successful fetch.

    On failure print the API's message and exit with status 2. A failure
    body without "message" raises KeyError.
    """
    if isinstance(result, FetchSuccess):
        logger.debug("Decoding API response")
        return result.payload
    if isinstance(result, FetchFailure):
        print(f"Error fetching from {API_NAME}: {result.payload['message']}", file=out)
        raise SystemExit(2)
    raise TypeError(f"Unexpected fetch result: {result!r}")


def sort_into_descending_order(issues: Sequence[Issue]) -> List[Issue]:
    """Most recent first; equal timestamps keep their input order."""
    logger.debug("Sorting %d issues into descending order", len(issues))
    return sorted(issues, key=lambda issue: issue["created_at"], reverse=True)


def last(issues: Sequence[Issue], count: int) -> List[Issue]:
    """First count entries of a descending list, returned oldest first."""
    logger.debug("Extracting first %d items from list", count)
    return list(reversed(issues[:count]))


def process(query: IssuesQuery, source: IssueSource, out: TextIO | None = None) -> None:
    """Fetch, decode, sort, limit and print the table for query."""
    result = source.fetch(query.user, query.project)
    issues = decode_response(result, out=out)
    latest = last(sort_into_descending_order(issues), query.count)
    print_table_for_columns(latest, COLUMNS, out=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args, then print usage or the issues table.

    Usage is printed before the config file is read. Config, count and
    fetch errors are logged with traceback and give status 1.
    """
    argv = list(argv) if argv is not None else sys.argv[1:]

    try:
        parsed, config_path = parse_command_line(argv)
        if parsed == HELP:
            print(usage())
            return 0
        config = load_config(config_path)
        IssuesLogging(config.logging).setup()
        source = GitHubAdapter(api_url=config.github.api_url, user_agent=config.github.user_agent)
        process(parsed, source)
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
