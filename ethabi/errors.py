"""Exceptions raised while handling ABI types and data."""


class AbiError(Exception):
    """Base class for every error raised by this package."""


class InvalidNameError(AbiError):
    """A type name could not be parsed."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid name: {name!r}")
        self.name = name


class InvalidDataError(AbiError):
    """Data does not match what was expected."""

    def __init__(self, message: str = "invalid data") -> None:
        super().__init__(message)


class ParseIntError(AbiError, ValueError):
    """A decimal number inside a type name could not be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid integer: {text!r}")
        self.text = text