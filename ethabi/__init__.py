"""Ethereum contract ABI type strings, tokens, signatures, functions and topic filters."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "filter",
    "function",
    "log",
    "param_type",
    "params",
    "signature",
    "state_mutability",
    "token",
    "tokenizer",
    "util",
]