from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from jirafield.app import run_field_update_step
from jirafield.common.logging import configure_logging
from jirafield.config.step import FieldUpdateStepConfig
from jirafield.domain.fields import check_field_id
from jirafield.domain.run import RunResult
from jirafield.domain.selectors import ChangelogIssueSelector, ExplicitIssueSelector

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from jirafield.domain.ports.selection import IssueSelector

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jirafield",
        description="Jira: update a custom field on the issues of a build",
    )
    parser.add_argument(
        "--field-id",
        type=str,
        required=True,
        help="Numeric custom field id, e.g. 10100 for customfield_10100",
    )
    parser.add_argument(
        "--field-value",
        type=str,
        default="",
        help="Field value; $VAR and ${VAR} are expanded from the environment",
    )
    parser.add_argument(
        "--multiple",
        action="store_true",
        help="Submit the value as a one-element list (multi-value fields)",
    )
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--issue",
        dest="issues",
        action="append",
        default=[],
        help="Issue key to update; may be repeated or comma separated",
    )
    selection.add_argument(
        "--changelog-file",
        type=str,
        help="File of change messages to scan for issue keys ('-' for stdin)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def _read_changelog(path: str) -> list[str]:
    if path == "-":
        return sys.stdin.readlines()
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise ValueError(f"Cannot read changelog file {path}: {exc}") from exc


def _build_selector(args: argparse.Namespace) -> IssueSelector | None:
    if args.issues:
        return ExplicitIssueSelector(issue_keys=tuple(args.issues))
    if args.changelog_file:
        return ChangelogIssueSelector.from_lines(_read_changelog(args.changelog_file))
    return None


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        validation = check_field_id(parsed_args.field_id)
        if not validation.ok:
            raise ValueError(validation.message)  # noqa: TRY301
        config = FieldUpdateStepConfig.from_strings(
            field_id=parsed_args.field_id,
            field_value=parsed_args.field_value,
            field_type_multiple=parsed_args.multiple,
        )
        selector = _build_selector(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        outcome = run_field_update_step(config, selector=selector)
    except Exception:
        log.exception("Fatal error during issue field update")
        sys.exit(1)

    if outcome.result is RunResult.FAILURE:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
