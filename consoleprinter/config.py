# config.py

import os
from enum import Enum
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .document import Document, format_static, format_file_path, format_error
from .errors import ConsoleError
from .logger import Logger

MAX_INDEX = 0x80000000
MIN_REQUIRE, MAX_REQUIRE = 1, 16


class SigHashType(Enum):
    ALL = "ALL"
    NONE = "NONE"
    SINGLE = "SINGLE"


@dataclass(frozen=True)
class SigHash:
    """Signature type requested for transaction signing."""
    kind: SigHashType = SigHashType.ALL
    anyone_can_pay: bool = False


@dataclass
class Options:
    """Command-line options with the wallet's defaults."""
    count: int = 5
    index: int = 0
    internal: bool = False
    require: int = 2
    sighash: SigHash = field(default_factory=SigHash)
    help: bool = False
    version: bool = False
    enable_logging: bool = False
    log_file: Optional[str] = None
    no_color: bool = False


def _invalid(option: str, value: str, hint: str = "") -> ConsoleError:
    return ConsoleError.from_message(f"Invalid {option} option{hint}: {value}")


def _parse_int(option: str, value: str, hint: str = "") -> int:
    try:
        return int(value)
    except ValueError:
        raise _invalid(option, value, hint) from None


def parse_count(value: str) -> int:
    count = _parse_int("count", value)
    if count <= 0:
        raise _invalid("count", value)
    return count


def parse_index(value: str) -> int:
    index = _parse_int("index", value)
    if not 0 <= index < MAX_INDEX:
        raise _invalid("index", value)
    return index


def parse_require(value: str) -> int:
    hint = f" (between {MIN_REQUIRE} and {MAX_REQUIRE})"
    require = _parse_int("require", value, hint)
    if not MIN_REQUIRE <= require <= MAX_REQUIRE:
        raise _invalid("require", value, hint)
    return require


def parse_sighash(value: str, anyone_can_pay: bool = False) -> SigHash:
    try:
        kind = SigHashType(value)
    except ValueError:
        raise ConsoleError.from_message("Invalid SigHash. Has to be ALL|NONE|SINGLE") from None
    return SigHash(kind, anyone_can_pay)


@dataclass(frozen=True)
class WorkDir:
    """The wallet working directory and whether this run created it."""
    path: str
    created: bool = False

    def notice(self) -> Document:
        """The one-line announcement shown when the directory is new."""
        return format_static("Haskoin working directory created:") & format_file_path(self.path)


def get_home(environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve the wallet home from $HASKOIN_HOME, falling back to $HOME."""
    environ = os.environ if environ is None else environ
    home = environ.get("HASKOIN_HOME") or environ.get("HOME")
    if not home:
        raise ConsoleError.from_message(
            "Please set $HASKOIN_HOME or $HOME environment variables"
        )
    return home


def get_work_dir(environ: Optional[Mapping[str, str]] = None,
                 logger: Optional[Logger] = None) -> WorkDir:
    """
    Return ``<home>/.haskoin/wallet``, creating it owner-only when missing.

    The result records whether the wallet directory was created by this
    call, so callers can render its notice.
    """
    logger = logger or Logger(__name__)
    haskoin_dir = os.path.join(get_home(environ), ".haskoin")
    wallet_dir = os.path.join(haskoin_dir, "wallet")
    try:
        if not os.path.isdir(haskoin_dir):
            os.mkdir(haskoin_dir, 0o700)
        created = not os.path.isdir(wallet_dir)
        if created:
            os.mkdir(wallet_dir, 0o700)
    except OSError as e:
        logger.error(f"Working directory setup failed: {e}")
        raise ConsoleError(
            format_error("Could not create working directory:")
            & format_file_path(wallet_dir),
            f"Could not create working directory: {wallet_dir}"
        ) from e
    if created:
        logger.debug(f"Created working directory {wallet_dir}")
    return WorkDir(wallet_dir, created)

