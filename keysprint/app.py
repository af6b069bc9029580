"""Application entry point and control loop for the keysprint typing test."""

from __future__ import annotations

import argparse
import curses
import dataclasses
import logging
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from keysprint.core.config import LOG_LEVELS, TestConfig, load_config
from keysprint.core.errors import KeysprintError
from keysprint.core.render import KeyKind, Style
from keysprint.core.results import summary_lines
from keysprint.core.session import SessionState, TestResult, TypingSession
from keysprint.core.wordlists import BuiltInWordlist
from keysprint.core.words import WordSource, select_word_source
from keysprint.ui.models import RESTART_HINT, Line, Text
from keysprint.ui.terminal import TerminalUI

logger = logging.getLogger(__name__)

_RESULT_STYLES = (Style.PLAIN, Style.HINT, Style.PLAIN, Style.SPEED, Style.HIGHLIGHT)


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None, console: bool = True) -> None:
    """Configure application-wide logging with a standard format.

    Records go to ``log_file`` when one is given. Otherwise they go to stderr,
    unless ``console`` is false because curses owns the screen, in which case
    they are dropped.
    """
    options: Dict[str, Any] = {}
    if log_file is not None:
        options["filename"] = str(log_file)
    elif not console:
        options["handlers"] = [logging.NullHandler()]
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        **options,
    )


class Keysprint:
    """Runs typing tests on a terminal until the user quits."""

    def __init__(
        self,
        config: TestConfig,
        ui: TerminalUI,
        source: WordSource,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.ui = ui
        self.source = source
        self._clock = clock
        self.session: Optional[TypingSession] = None

    def restart(self) -> TypingSession:
        """Throw away the current test and lay out a fresh one."""
        self.ui.reset_screen()
        words = self.source.next_words(self.config.num_words)
        self.ui.display_lines_bottom([RESTART_HINT])
        self.ui.display_words(words)
        self.session = TypingSession(words, clock=self._clock)
        logger.info("New test with %d words", len(words))
        return self.session

    def test(self) -> Tuple[bool, Optional[TestResult]]:
        """Feed keys to the current session until it ends.

        Returns whether a restart was asked for, and the result when the text
        was completed.
        """
        session = self.session if self.session is not None else self.restart()
        while True:
            step = session.process(self.ui.read_key())
            self.ui.apply(step.directives)
            if step.state.is_terminal:
                break

        if step.state is SessionState.DONE:
            result = session.result()
            return self.display_results(result), result
        logger.info("Test ended early: %s", step.state.value)
        return step.state is SessionState.RESTART, None

    def display_results(self, result: TestResult) -> bool:
        """Show the results screen and wait for ctrl-r (True) or ctrl-c (False)."""
        self.ui.reset_screen()
        lines: List[Line] = [
            (Text(line, style),)
            for line, style in zip(summary_lines(result, self.config.text_name()), _RESULT_STYLES)
        ]
        self.ui.display_lines(lines)
        self.ui.display_lines_bottom([RESTART_HINT])
        self.ui.hide_cursor()

        while True:
            kind = self.ui.read_key().kind
            if kind is KeyKind.RESTART:
                to_restart = True
                break
            if kind is KeyKind.QUIT:
                to_restart = False
                break

        self.ui.show_cursor()
        return to_restart

    def play(self) -> None:
        self.restart()
        while True:
            to_restart, _ = self.test()
            if not to_restart:
                logger.info("Quitting")
                return
            self.restart()


def build_parser(prog: str = "keysprint", description: str = "Terminal typing speed test") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("-n", "--num-words", type=int, default=None, help="Number of words in each test.")
    parser.add_argument(
        "-w",
        "--wordlist",
        choices=[item.value for item in BuiltInWordlist],
        default=None,
        help="Built-in word list to draw from.",
    )
    parser.add_argument("-f", "--wordlist-file", type=Path, default=None, help="Whitespace separated word list file.")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file (default: ~/.keysprint/config.yaml).")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging level.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file (otherwise they are dropped while the test runs).")
    return parser


def resolve_config(args: argparse.Namespace) -> TestConfig:
    config = load_config(args.config)
    if args.wordlist:
        # a -w flag beats a word-list file named in the config file
        config = dataclasses.replace(config, wordlist_file=None)
    return config.with_overrides(
        num_words=args.num_words,
        wordlist=BuiltInWordlist.from_name(args.wordlist) if args.wordlist else None,
        wordlist_file=args.wordlist_file,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def _fail(message: str) -> int:
    print(f"keysprint: {message}", file=sys.stderr)
    return 1


def run(argv: Optional[List[str]] = None, wrapper: Callable[..., Any] = curses.wrapper) -> int:
    """Parse arguments, build the word source and run tests until the user quits."""
    args = build_parser().parse_args(argv)
    try:
        config = resolve_config(args)
    except ValueError as exc:
        return _fail(str(exc))
    configure_logging(config.log_level, config.log_file, console=False)

    try:
        source = select_word_source(config)

        def _main(screen: Any) -> None:
            Keysprint(config, TerminalUI.start(screen), source).play()

        wrapper(_main)
    except KeysprintError as exc:
        logger.error("Fatal: %s", exc.msg)
        return _fail(exc.msg)
    return 0


def random_word(argv: Optional[List[str]] = None) -> int:
    """Print one random word from the configured word source."""
    args = build_parser("keysprint-word", "Print a random word").parse_args(argv)
    try:
        config = resolve_config(args)
    except ValueError as exc:
        return _fail(str(exc))
    configure_logging(config.log_level, config.log_file)
    try:
        print(select_word_source(config).next_word())
    except KeysprintError as exc:
        return _fail(exc.msg)
    return 0


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


def word_entry() -> None:
    raise SystemExit(random_word())
