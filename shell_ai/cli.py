"""
CLI entrypoint for shell_ai.

Reads the user key, validates the words typed after the command, asks the
completion service for a shell command and prints it. Run as
`python -m shell_ai` or through the `q` console script.
"""
from __future__ import annotations

import argparse
import sys
import time
from typing import Mapping, Optional, Sequence

from . import __version__ as VERSION
from . import auth
from . import client
from . import config
from . import timing


OPTIONS = ("--debug", "--version")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=config.COMMAND_NAME,
        description="Turn a natural-language request into a shell command.",
        add_help=False,
    )
    p.add_argument("--debug", action="store_true",
                   help="Enable timestamped step/timing logs on stderr.")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Split argv into leading options and phrase words. Only exact OPTIONS
    tokens count, and only before the first word; a single "--" ends them.
    """
    argv = list(argv)
    i = 0
    while i < len(argv) and argv[i] in OPTIONS:
        i += 1
    opts, words = argv[:i], argv[i:]
    if words and words[0] == "--":
        words = words[1:]
    return opts, words


def render_failure(result: client.CompletionResult) -> list[str]:
    kind = result.failure
    if kind is client.FailureKind.UNPARSEABLE:
        return [config.MSG_UNPARSEABLE]
    if kind is client.FailureKind.NO_COMPLETION:
        return [config.MSG_NO_COMPLETION]
    return [result.detail, config.MSG_COMMAND_FAILED]


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    exec_path: Optional[str] = None,
) -> int:
    opts, words = split_argv(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(opts)

    if args.version:
        print(f"shell-ai {VERSION}")
        return 0

    timing.DEBUG_TIMING = bool(args.debug)
    timing.START_TS = time.perf_counter()

    user_key = auth.read_user_key(environ)
    if user_key is None:
        # Path the onboarding text tells the user to move into their bin dir
        print(auth.onboarding_text(exec_path or sys.argv[0]))
        return 1

    if not words:
        print(config.USAGE)
        return 1

    phrase = client.join_phrase(words)
    timing.status(f"Phrase: {phrase!r}")

    try:
        result = client.request_completion(user_key, phrase)
    except Exception as e:
        print(e)
        print(config.MSG_COMMAND_FAILED)
        return 1

    if not result.ok:
        timing.status(f"Failed: {result.failure.value}")
        for line in render_failure(result):
            print(line)
        return 1

    print(result.completion)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
