# cli.py

import sys
import argparse
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console

from . import messages
from .config import (
    Options, SigHash, SigHashType, get_work_dir,
    parse_count, parse_index, parse_require, parse_sighash
)
from .display import Renderer
from .errors import ConsoleError, fail_with
from .document import vertical, format_error
from .logger import Logger

# Allowed positional argument counts per command: (minimum, maximum or None)
COMMAND_ARITY: Dict[str, Tuple[int, Optional[int]]] = {
    "init": (1, 1),
    "listaddr": (0, 1),
    "genaddr": (0, 1),
    "dumpkey": (0, 1),
    "decodetx": (1, None),
    "buildtx": (2, 2),
    "signtx": (0, None),
}


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems as console errors instead of exiting."""

    def error(self, message):
        raise ConsoleError(
            vertical([format_error(message), messages.usage()]),
            message
        )


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=messages.PROGRAM, add_help=False)
    parser.add_argument('-c', '--count', type=parse_count, default=Options.count)
    parser.add_argument('-i', '--index', type=parse_index, default=Options.index)
    parser.add_argument('-N', '--internal', action='store_true')
    parser.add_argument('-r', '--require', type=parse_require, default=Options.require)
    parser.add_argument('-H', '--sighash',
        type=lambda value: parse_sighash(value).kind,
        default=SigHashType.ALL)
    parser.add_argument('-A', '--anyonecanpay', action='store_true')
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('-v', '--version', action='store_true')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    parser.add_argument('--no-color', action='store_true',
        help='Write plain text without terminal styling')
    parser.add_argument('words', nargs='*')
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[Options, List[str]]:
    """Parse the command line into options and the command words."""
    args = build_parser().parse_intermixed_args(argv)
    options = Options(
        count=args.count,
        index=args.index,
        internal=args.internal,
        require=args.require,
        sighash=SigHash(args.sighash, args.anyonecanpay),
        help=args.help,
        version=args.version,
        enable_logging=args.enable_logging,
        log_file=args.log_file,
        no_color=args.no_color,
    )
    return options, args.words


def process(options: Options, words: List[str],
            renderer: Renderer, logger: Logger,
            console: Optional[Console] = None) -> None:
    # -h and -v can be called without a command
    if options.help:
        renderer.render(messages.usage())
        return
    if options.version:
        renderer.render(messages.version())
        return
    if not words:
        renderer.render(messages.usage())
        return

    command, args = words[0], words[1:]
    if command not in COMMAND_ARITY:
        raise ConsoleError(messages.invalid_command(command), f"Invalid command: {command}")

    work_dir = get_work_dir(logger=logger)
    if work_dir.created:
        renderer.render(work_dir.notice())
    messages.print_warning(console or Console(
        highlight=False,
        no_color=options.no_color,
        force_terminal=not options.no_color,
    ))

    low, high = COMMAND_ARITY[command]
    if len(args) < low or (high is not None and len(args) > high):
        logger.debug(f"Wrong argument count for {command}: {len(args)}")
        renderer.render(messages.usage())
        return

    if command == "signtx":
        renderer.render(messages.not_implemented(command))
        return

    logger.info(f"Running {command} in {work_dir.path}")
    # Wallet operations live in an external library
    raise ConsoleError(messages.not_implemented(command), f"Command not implemented: {command}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    # Parse errors are rendered before options exist
    renderer = Renderer(use_color="--no-color" not in argv)
    try:
        options, words = parse_args(argv)
        logger = Logger(__name__, options.enable_logging, options.log_file)
        renderer = Renderer(logger=logger, use_color=not options.no_color)
        process(options, words, renderer, logger)
    except ConsoleError as e:
        renderer.logger.error(f"Fatal: {e}")
        fail_with(e.doc, renderer=renderer)


if __name__ == "__main__":
    main()
