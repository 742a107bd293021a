"""Helpers for encoding calls and results against entry points."""

from __future__ import annotations

from typing import Any, Tuple

from eth_abi import decode, encode

from .abi_types import EntryPoint


def encode_call(entry: EntryPoint, *args: Any) -> bytes:
    return entry.selector + encode(list(entry.input_types), list(args))


def decode_arguments(entry: EntryPoint, data: bytes) -> Tuple[Any, ...]:
    return tuple(decode(list(entry.input_types), data[4:]))


def encode_result(entry: EntryPoint, value: Any) -> bytes:
    if not entry.outputs:
        return b""
    return encode(list(entry.outputs), [value])


def decode_result(entry: EntryPoint, data: bytes) -> Any:
    """Decode the single return value of ``entry``.

    Raises an ``eth_abi`` decoding error for empty or truncated data, which is
    what a call to an address without code produces.
    """

    if not entry.outputs:
        return None
    return decode(list(entry.outputs), data)[0]
