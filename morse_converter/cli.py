"""Command line encoder/decoder."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

from .application.state import ConverterState
from .config import load_config
from .domain.symbols import SYMBOL_PAIRS, find_collisions
from .integrations.clipboard import SystemClipboard
from .logging_config import setup_logging

logger = logging.getLogger("morse_app.cli")


FLAGS = (
    (("-d", "--decode"), "Decode space separated Morse tokens instead of encoding text."),
    (("--copy",), "Also copy the result to the system clipboard."),
    (("--json",), "Print a JSON object with mode, input and output."),
    (("--collisions",), "List Morse tokens shared by more than one character and exit."),
)
FLAG_OPTIONS = frozenset({"-h", "--help"}.union(*(names for names, _help in FLAGS)))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morse",
        description="Convert text to Morse code, or Morse code back to text.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Input to convert. Read from standard input when omitted.",
    )
    for names, help_text in FLAGS:
        parser.add_argument(*names, action="store_true", help=help_text)
    return parser


def _split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate registered flags from input words, keeping word order.

    Morse tokens such as `---` look like options to argparse, so anything that
    is not a registered flag is treated as input. Words after `--` are always
    input.
    """
    flags: list[str] = []
    words: list[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            words.extend(argv[index + 1 :])
            break
        if arg in FLAG_OPTIONS:
            flags.append(arg)
        else:
            words.append(arg)
    return flags, words


def _read_input(words: list[str], stdin: TextIO) -> str:
    if words:
        return " ".join(words)
    value = stdin.read()
    if value.endswith("\n"):
        value = value[:-1]
        if value.endswith("\r"):
            value = value[:-1]
    return value


def _print_collisions(stdout: TextIO) -> None:
    for token, chars in find_collisions(SYMBOL_PAIRS).items():
        claimed = " ".join(repr(char) for char in chars)
        print(f"{token}\t{claimed}\tdecodes to {chars[-1]!r}", file=stdout)


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    setup_logging(load_config(), console=False)
    parser = _build_parser()
    flags, words = _split_argv(list(sys.argv[1:] if argv is None else argv))
    args = parser.parse_args(flags)

    if args.collisions:
        _print_collisions(stdout)
        return 0

    state = ConverterState(logger, clipboard=SystemClipboard() if args.copy else None)
    source = _read_input(words, stdin)
    if args.decode:
        mode = "decode"
        result = state.update_morse(source)
    else:
        mode = "encode"
        result = state.update_text(source)

    if args.json:
        print(
            json.dumps({"mode": mode, "input": source, "output": result}, ensure_ascii=False),
            file=stdout,
        )
    else:
        print(result, file=stdout)

    if args.copy and not state.copy_to_clipboard(result):
        print("Warning: could not copy the result to the clipboard.", file=stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
