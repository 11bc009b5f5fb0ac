# messages.py

"""Fixed documents shown by the ``hw`` command line: usage, version, warning."""

from typing import List, NamedTuple, Optional

from rich.console import Console
from rich.panel import Panel
from rich.align import Align

from .document import (
    Document, vertical, nest,
    format_title, format_static, format_error
)
from .display import StyleDefinitions, pad
from .formats import FormatTag

VERSION = "0.1.1.0"
PROGRAM = "hw"
USAGE_HEADER = f"Usage: {PROGRAM} [<options>] <command> [<args>]"
WARNING_TEXT = "This software is experimental. Use only small amounts of Bitcoins"
COLUMN_WIDTH = 24


class OptionHelp(NamedTuple):
    short: str
    long: str
    metavar: Optional[str]
    description: str


class CommandHelp(NamedTuple):
    name: str
    args: str
    description: str


OPTIONS: List[OptionHelp] = [
    OptionHelp("-c", "--count", "INT",
               "Address generation count. Implies address command"),
    OptionHelp("-i", "--index", "INT",
               "Address key index. Implies address or dumpkey command"),
    OptionHelp("-N", "--internal", None,
               "Use internal address chain. Implies address or dumpkey command"),
    OptionHelp("-r", "--require", "INT",
               "Number of required keys (M) when generating M of N addresses"),
    OptionHelp("-H", "--sighash", "SIGHASH",
               "Type of signature. Can be ALL|NONE|SINGLE"),
    OptionHelp("-A", "--anyonecanpay", None,
               "Sign a transaction with the AnyoneCanPay flag set"),
    OptionHelp("-h", "--help", None, "Display this help message"),
    OptionHelp("-v", "--version", None, "Display wallet version information"),
    OptionHelp("", "--enable-logging", None, "Enable debug logging"),
    OptionHelp("", "--log-file", "PATH", "Log file path (use \"-\" for stderr)"),
    OptionHelp("", "--no-color", None, "Write plain text without terminal styling"),
]

COMMANDS: List[CommandHelp] = [
    CommandHelp("init", "<seed>", "Initialize a new wallet from a seed"),
    CommandHelp("listaddr", "[acc]", "List addresses in your account"),
    CommandHelp("genaddr", "[acc]", "Generate new addresses for your account"),
    CommandHelp("dumpkey", "[acc]", "Dump account key to stdout"),
    CommandHelp("decodetx", "<tx>", "Decode a transaction in HEX format"),
    CommandHelp("buildtx", "[(txid,index)] [(addr,amount)]", "Build a new transaction"),
    CommandHelp("signtx", "", "Sign a transaction"),
]


def _row(left: str, description: str) -> Document:
    # Overlong left columns push the description onto the next line
    if len(left) >= COLUMN_WIDTH:
        return vertical([format_static(left), _row("", description)])
    return format_static(pad(COLUMN_WIDTH, left)) + format_static(description)


def option_rows() -> List[Document]:
    rows = []
    for opt in OPTIONS:
        flags = f"{opt.short}, {opt.long}" if opt.short else opt.long
        if opt.metavar:
            flags = f"{flags}={opt.metavar}"
        rows.append(_row(flags, opt.description))
    return rows


def command_rows() -> List[Document]:
    return [_row(f"{cmd.name} {cmd.args}".rstrip(), cmd.description) for cmd in COMMANDS]


def usage() -> Document:
    """Full help: header, options and commands."""
    return vertical([
        format_title(USAGE_HEADER),
        format_title("Options:"),
        nest(2, vertical(option_rows())),
        format_title("Commands:"),
        nest(2, vertical(command_rows())),
    ])


def version() -> Document:
    return format_static("haskoin wallet version") & format_title(VERSION)


def invalid_command(name: str) -> Document:
    return format_error("Invalid command:") & format_static(name)


def not_implemented(name: str) -> Document:
    return format_error("Command not implemented:") & format_static(name)


def print_warning(console: Optional[Console] = None) -> None:
    """Show the experimental-software warning in a panel."""
    console = console or Console(highlight=False)
    definitions = StyleDefinitions()
    console.print(
        Panel(
            Align.center(WARNING_TEXT),
            title="Warning",
            title_align="right",
            border_style=definitions.get_rich_style(FormatTag.TESTNET_MARKER),
            style=definitions.get_rich_style(FormatTag.TITLE),
            padding=(0, 2),
            expand=True,
        )
    )
