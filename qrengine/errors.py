# -*- coding: utf-8 -*-
"""
Exceptions raised by the QR engine.

Boundary errors (overflow, invalid characters) derive from ``ValueError`` so
callers that already handle bad input generically keep working.
"""


class QREngineError(Exception):
    """Base class for all engine errors."""


class DataOverflowError(QREngineError, ValueError):
    """The encoded payload does not fit into the fixed symbol capacity."""

    def __init__(self, bit_length: int, capacity: int):
        self.bit_length = bit_length
        self.capacity = capacity
        super().__init__(
            f"Encoded payload needs {bit_length} bits but version 2-M "
            f"holds only {capacity} data bits")


class InvalidCharacterError(QREngineError, ValueError):
    """The text contains a character outside the QR alphanumeric alphabet."""

    def __init__(self, char: str, index: int):
        self.char = char
        self.index = index
        super().__init__(
            f"Character {char!r} at index {index} is not encodable in "
            f"alphanumeric mode (0-9, A-Z, space, $%*+-./:)")


class InternalError(QREngineError, RuntimeError):
    """An internal invariant of the fixed configuration was violated."""
