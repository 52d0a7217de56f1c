"""Function and event signature hashes."""

from __future__ import annotations

from collections.abc import Iterable

from Crypto.Hash import keccak

from .param_type import ParamType, write_param_type


def _signature_hash(name: str, params: Iterable[ParamType]) -> bytes:
    types = ",".join(write_param_type(param) for param in params)
    text = f"{name}({types})"
    return keccak.new(digest_bits=256, data=text.encode("utf-8")).digest()


def short_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """The 4-byte selector of ``name(params...)``."""
    return _signature_hash(name, params)[:4]


def long_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """The full 32-byte Keccak-256 hash of ``name(params...)``."""
    return _signature_hash(name, params)