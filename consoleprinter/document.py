# document.py

"""
Document algebra for console output.

A document is an immutable tree built bottom-up by callers and handed to the
renderer in one piece. ``concat`` folds away ``EMPTY`` so that the renderer
sees a canonical empty node wherever nothing was produced.
"""

from dataclasses import dataclass
from typing import Iterable

from .formats import Format, FormatTag


class Document:
    """Base class of all document nodes."""

    def __add__(self, other: "Document") -> "Document":
        if not isinstance(other, Document):
            return NotImplemented
        return concat(self, other)

    def __and__(self, other: "Document") -> "Document":
        if not isinstance(other, Document):
            return NotImplemented
        return horizontal(self, other)


@dataclass(frozen=True)
class Empty(Document):
    """Identity element. Carries no content."""


@dataclass(frozen=True)
class Concat(Document):
    left: Document
    right: Document


@dataclass(frozen=True)
class Newline(Document):
    """Ends the current line and continues with ``inner`` at the baseline."""
    inner: Document


@dataclass(frozen=True)
class Nest(Document):
    """Indents ``inner`` by ``amount`` columns, for line breaks inside ``inner`` only."""
    amount: int
    inner: Document


@dataclass(frozen=True)
class Text(Document):
    format: Format


EMPTY = Empty()


def empty() -> Document:
    return EMPTY


def text(fmt: Format) -> Document:
    return Text(fmt)


def concat(a: Document, b: Document) -> Document:
    """Join two documents on the same line, absorbing empties on either side."""
    if isinstance(b, Empty):
        return a
    if isinstance(a, Empty):
        return b
    return Concat(a, b)


def horizontal(a: Document, b: Document) -> Document:
    """Join two documents with a single unstyled space."""
    return concat(concat(a, format_static(" ")), b)


def vertical(docs: Iterable[Document]) -> Document:
    """
    Stack documents one per line.

    Empty entries are skipped entirely: they produce neither content nor a
    blank line. Every remaining entry is followed by a ``Newline`` holding the
    rest of the stack, so the last entry ends with ``Newline(EMPTY)``, which
    the renderer collapses.
    """
    result: Document = EMPTY
    for doc in reversed([d for d in docs if not isinstance(d, Empty)]):
        result = concat(doc, Newline(result))
    return result


def nest(amount: int, inner: Document) -> Document:
    if amount < 0:
        raise ValueError(f"Nest amount must be non-negative, got {amount}")
    return Nest(amount, inner)


# Tagged text shortcuts

def format_title(content: str) -> Document:
    return text(Format(FormatTag.TITLE, content))


def format_static(content: str) -> Document:
    return text(Format(FormatTag.STATIC, content))


def format_account(content: str) -> Document:
    return text(Format(FormatTag.ACCOUNT, content))


def format_pubkey(content: str) -> Document:
    return text(Format(FormatTag.PUBKEY, content))


def format_file_path(content: str) -> Document:
    return text(Format(FormatTag.FILE_PATH, content))


def format_key(content: str) -> Document:
    return text(Format(FormatTag.KEY, content))


def format_deriv(content: str) -> Document:
    return text(Format(FormatTag.DERIV, content))


def format_mnemonic(content: str) -> Document:
    return text(Format(FormatTag.MNEMONIC, content))


def format_address(content: str) -> Document:
    return text(Format(FormatTag.ADDRESS, content))


def format_internal_address(content: str) -> Document:
    return text(Format(FormatTag.INTERNAL_ADDRESS, content))


def format_tx_hash(content: str) -> Document:
    return text(Format(FormatTag.TX_HASH, content))


def format_positive_amount(content: str) -> Document:
    return text(Format(FormatTag.POSITIVE_AMOUNT, content))


def format_negative_amount(content: str) -> Document:
    return text(Format(FormatTag.NEGATIVE_AMOUNT, content))


def format_fee(content: str) -> Document:
    return text(Format(FormatTag.FEE, content))


def format_true(content: str) -> Document:
    return text(Format(FormatTag.BOOLEAN_TRUE, content))


def format_false(content: str) -> Document:
    return text(Format(FormatTag.BOOLEAN_FALSE, content))


def format_cash(content: str) -> Document:
    return text(Format(FormatTag.CASH_UNIT, content))


def format_bitcoin(content: str) -> Document:
    return text(Format(FormatTag.BITCOIN_UNIT, content))


def format_testnet(content: str) -> Document:
    return text(Format(FormatTag.TESTNET_MARKER, content))


def format_error(content: str) -> Document:
    return text(Format(FormatTag.ERROR, content))
