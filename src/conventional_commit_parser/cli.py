"""Command-line entry point: parse a commit message from a file or stdin."""

import argparse
import json
import os
import sys
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from . import __version__
from .commit import ConventionalCommit, Footer
from .errors import ErrorFormatter, ParseError
from .logging_config import configure_logging, get_logger
from .parser import parse, parse_body, parse_footers, parse_summary

logger = get_logger(__name__)

MODES = ['message', 'summary', 'body', 'footers']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='conventional-commit-parser',
        description='Parse a commit message following the Conventional Commits specification',
        epilog='Example: git log -1 --format=%B | conventional-commit-parser --json'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-m', '--mode', choices=MODES, default='message', help='Which part of a message the input holds (default: message)')
    parser.add_argument('-f', '--file', type=str, metavar='PATH', help='Read the message from PATH instead of stdin')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--log-level', type=str, metavar='LEVEL', help='Log level (default: LOG_LEVEL env var or WARNING)')

    return parser


def _read_message(path: Optional[str], stdin: TextIO) -> str:
    if path:
        with open(path, encoding='utf-8') as handle:
            return handle.read()
    return stdin.read()


def _describe_footers(footers: List[Footer]) -> List[str]:
    return [f"  - {footer.token} [{footer.separator.name.lower()}]: {footer.content}" for footer in footers]


def _describe_commit(commit: ConventionalCommit) -> str:
    lines = [
        f"type:     {commit.commit_type.value}",
        f"scope:    {commit.scope or '-'}",
        f"summary:  {commit.summary}",
        f"breaking: {'yes' if commit.is_breaking_change else 'no'}",
    ]
    if commit.body:
        lines.append("body:")
        lines.extend(f"  {line}" for line in commit.body.splitlines())
    if commit.footers:
        lines.append("footers:")
        lines.extend(_describe_footers(list(commit.footers)))
    return "\n".join(lines)


def render(mode: str, text: str, as_json: bool) -> str:
    """Parse `text` in the given mode and render the result."""
    if mode == 'body':
        body = parse_body(text)
        return json.dumps({'body': body}, indent=2) if as_json else (body or '')

    if mode == 'footers':
        footers = parse_footers(text)
        if as_json:
            return json.dumps({'footers': [footer.to_dict() for footer in footers]}, indent=2)
        return "\n".join(_describe_footers(footers))

    commit = parse_summary(text) if mode == 'summary' else parse(text)
    return json.dumps(commit.to_dict(), indent=2) if as_json else _describe_commit(commit)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level or os.getenv("LOG_LEVEL", "WARNING"), stream=stderr)

    try:
        text = _read_message(args.file, stdin)
    except OSError as e:
        stderr.write(f"Cannot read {args.file}: {e}\n")
        return 2

    try:
        output = render(args.mode, text, args.json)
    except ParseError as e:
        logger.debug(ErrorFormatter.format_error_concise(e))
        stderr.write(ErrorFormatter.format_error_detailed(e) + "\n")
        return 1

    stdout.write(output + "\n")
    return 0


if __name__ == '__main__':
    sys.exit(main())
