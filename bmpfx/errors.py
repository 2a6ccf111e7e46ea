from __future__ import annotations


class BmpfxError(Exception):
    """Base class for bmpfx failures."""


class MalformedContainerError(BmpfxError, ValueError):
    """The bitmap header does not describe the bytes that were read."""


class OutputUnavailableError(BmpfxError, RuntimeError):
    """The output file could not be opened or written."""


class UnknownFilterError(BmpfxError, KeyError):
    """No catalog entry matches the requested filter."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
