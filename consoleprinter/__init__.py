# __init__.py

from .formats import Format, FormatTag
from .document import (
    Document, Empty, Concat, Newline, Nest, Text, EMPTY,
    empty, text, concat, horizontal, vertical, nest,
    format_title, format_static, format_account, format_pubkey,
    format_file_path, format_key, format_deriv, format_mnemonic,
    format_address, format_internal_address, format_tx_hash,
    format_positive_amount, format_negative_amount, format_fee,
    format_true, format_false, format_cash, format_bitcoin,
    format_testnet, format_error
)
from .display import Renderer, StyleDefinitions, render, pad
from .errors import ConsoleError, fail_with
from .logger import Logger

__all__ = [
    "Format", "FormatTag",
    "Document", "Empty", "Concat", "Newline", "Nest", "Text", "EMPTY",
    "empty", "text", "concat", "horizontal", "vertical", "nest",
    "format_title", "format_static", "format_account", "format_pubkey",
    "format_file_path", "format_key", "format_deriv", "format_mnemonic",
    "format_address", "format_internal_address", "format_tx_hash",
    "format_positive_amount", "format_negative_amount", "format_fee",
    "format_true", "format_false", "format_cash", "format_bitcoin",
    "format_testnet", "format_error",
    "Renderer", "StyleDefinitions", "render", "pad",
    "ConsoleError", "fail_with", "Logger",
]
