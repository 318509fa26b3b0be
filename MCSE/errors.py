"""
Exception taxonomy for MCSE.

Both concrete errors are fatal: configuration problems abort before any
synthesis, unknown symbols abort before any audio is produced.
"""


class MorseError(Exception):
    """Base class for all MCSE errors."""


class ConfigError(MorseError, ValueError):
    """Invalid synthesis configuration (wpm, sample rate, tone parameters)."""


class UnknownSymbolError(MorseError, ValueError):
    """A character outside the fixed symbol table was looked up."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Looked up an unknown character, {char!r}")
