# formats.py

from enum import Enum
from dataclasses import dataclass


class FormatTag(Enum):
    """Semantic role of a piece of console text. The tag alone decides presentation."""
    TITLE = "title"
    STATIC = "static"
    ACCOUNT = "account"
    PUBKEY = "pubkey"
    FILE_PATH = "file_path"
    KEY = "key"
    DERIV = "deriv"
    MNEMONIC = "mnemonic"
    ADDRESS = "address"
    INTERNAL_ADDRESS = "internal_address"
    TX_HASH = "tx_hash"
    POSITIVE_AMOUNT = "positive_amount"
    NEGATIVE_AMOUNT = "negative_amount"
    FEE = "fee"
    BOOLEAN_TRUE = "boolean_true"
    BOOLEAN_FALSE = "boolean_false"
    CASH_UNIT = "cash_unit"
    BITCOIN_UNIT = "bitcoin_unit"
    TESTNET_MARKER = "testnet_marker"
    ERROR = "error"


@dataclass(frozen=True)
class Format:
    """
    A tagged piece of literal text.

    The content is displayed as-is and never re-parsed.
    """
    tag: FormatTag
    content: str

    def __len__(self) -> int:
        return len(self.content)
