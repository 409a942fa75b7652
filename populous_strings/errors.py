"""Error taxonomy for strings-file handling.

All errors raised by this package derive from :class:`StringsError`. File-level
operations always wrap the lower-level exception (``raise ... from exc``) so the
original cause stays reachable through :attr:`StringsError.cause`.
"""

from __future__ import annotations

from typing import Optional


class StringsError(Exception):
    """Base class for every error raised by populous_strings."""

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def describe(self) -> str:
        """Return a user-facing message: top-level description plus wrapped cause, if any."""
        msg = str(self)
        if self.__cause__ is not None:
            cause_msg = str(self.__cause__) or type(self.__cause__).__name__
            return f"{msg}: {cause_msg}"
        return msg


class MalformedInput(StringsError, ValueError):
    """The byte buffer violates the structure of the strings-file format."""


class EncodingError(StringsError, ValueError):
    """A string cannot be represented as 16-bit code units in a strings file."""


class IOFailure(StringsError):
    """Underlying storage could not be opened, read or written."""


class MissingPathError(StringsError, RuntimeError):
    """An operation needs a file path and none has been chosen yet."""
