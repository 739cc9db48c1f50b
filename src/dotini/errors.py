# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:52:03
# @Author : Chloride

__all__ = ['IniParseError', 'MalformedInputError', 'IniFileError']


class IniParseError(Exception):
    """Base of everything `dotini` raises."""
    pass


class MalformedInputError(IniParseError):
    """A line does not match either the section header
    or the `key=value` shape.

    `lineno` is 1-based, counting blank lines too.
    """
    def __init__(self, lineno: int, line: str, reason: str) -> None:
        super().__init__(f'line {lineno}: {reason}: {line!r}')
        self.lineno = lineno
        self.line = line
        self.reason = reason


class IniFileError(IniParseError):
    """The file could not be opened, read or decoded.

    The underlying exception is kept in `cause` (and chained as well).
    """
    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f'cannot read {filename!r}: {cause}')
        self.filename = filename
        self.cause = cause
