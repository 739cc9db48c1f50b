# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:31:09
# @Author : Chloride

"""Plain INI reader.

Grammar, line by line (`\\n` separated, a trailing `\\r` is fine):

    ```ini
    [section]       ; opens, or reopens and merges into, `section`
    key = value     ; split on the first '='
    ```

Blank lines are skipped. Anything else, comments included, is a
`MalformedInputError`. So is a pair before the first header, unless
another `OrphanPolicy` is chosen.
"""

import logging
from enum import Enum
from io import StringIO, TextIOBase
from os import PathLike

from chardet import detect as guess_codec

from .abstract import FileHandler
from .errors import IniFileError, IniParseError, MalformedInputError
from .model import IniDocument, IniSection

__all__ = ['OrphanPolicy', 'IniParser', 'IniFileReader', 'parse', 'parse_file']

logger = logging.getLogger(__name__)

DEFAULT_SECTION = 'untagged'


class OrphanPolicy(str, Enum):
    """What to do with `key=value` lines before any section header."""
    ERROR = 'error'
    DROP = 'drop'
    COLLECT = 'collect'  # into `default_section`


class IniParser:
    """Holds one parsed `IniDocument` until `into_document()` takes it.

    Create it by `from_string()`, `from_file()` or `from_stream()`
    rather than calling the constructor.
    """
    def __init__(self, document: IniDocument) -> None:
        self.__doc: IniDocument | None = document

    @staticmethod
    def readstream(
        buf: TextIOBase, *,
        orphans: OrphanPolicy | str = OrphanPolicy.ERROR,
        default_section: str = DEFAULT_SECTION
    ) -> IniDocument:
        """Read a decoded text stream into a new document.

        Stops at the first bad line, no partial result is returned.
        """
        orphans = OrphanPolicy(orphans)
        ret = IniDocument()
        this_sect: IniSection | None = None
        lineno = 0
        for lineno, raw in enumerate(buf, 1):
            raw = raw.rstrip('\n').rstrip('\r')
            i = raw.strip()
            if not i:
                continue

            if i[0] == '[':
                if i[-1] != ']':
                    raise MalformedInputError(
                        lineno, raw, 'unterminated section header')
                decl = i[1:-1].strip()
                if not decl:
                    raise MalformedInputError(
                        lineno, raw, 'empty section name')
                if decl in ret:
                    logger.debug('line %d: reopen [%s]', lineno, decl)
                else:
                    logger.debug('line %d: open [%s]', lineno, decl)
                this_sect = ret.setdefault(decl)
                continue

            key, sep, val = i.partition('=')
            if not sep:
                raise MalformedInputError(lineno, raw, "missing '='")
            key = key.strip()
            if not key:
                raise MalformedInputError(lineno, raw, 'empty key')

            if this_sect is None:
                match orphans:
                    case OrphanPolicy.ERROR:
                        raise MalformedInputError(
                            lineno, raw, 'key-value pair before any section')
                    case OrphanPolicy.DROP:
                        logger.warning(
                            'line %d: "%s" dropped, no section opened yet.',
                            lineno, key)
                        continue
                    case OrphanPolicy.COLLECT:
                        this_sect = ret.setdefault(default_section)
            this_sect[key] = val.strip()

        logger.debug('%d section(s) read from %d line(s)', len(ret), lineno)
        return ret

    @classmethod
    def from_stream(cls, buf: TextIOBase, **options) -> 'IniParser':
        return cls(cls.readstream(buf, **options))

    @classmethod
    def from_string(cls, content: str, **options) -> 'IniParser':
        return cls.from_stream(StringIO(content), **options)

    @classmethod
    def from_file(
        cls, path: str | PathLike[str],
        encoding: str | None = None, *,
        detect_encoding: bool = True,
        **options
    ) -> 'IniParser':
        """Read and parse a whole INI file.

        Raises `IniFileError` if it cannot be opened, read or decoded.
        """
        reader = IniFileReader(
            path, encoding, detect_encoding=detect_encoding, **options)
        return cls(reader.read())

    @property
    def consumed(self) -> bool:
        return self.__doc is None

    @property
    def document(self) -> IniDocument:
        """Peek at the result without taking it."""
        if self.__doc is None:
            raise IniParseError('document has already been taken')
        return self.__doc

    def into_document(self) -> IniDocument:
        """Hand the document over. The parser is consumed afterwards."""
        doc = self.document
        self.__doc = None
        return doc

    def __repr__(self) -> str:
        if self.__doc is None:
            return f'<{type(self).__name__} (consumed)>'
        return f'<{type(self).__name__} sections={len(self.__doc)}>'


class IniFileReader(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        detect_encoding: bool = True,
        orphans: OrphanPolicy | str = OrphanPolicy.ERROR,
        default_section: str = DEFAULT_SECTION
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._detect = detect_encoding
        self._orphans = OrphanPolicy(orphans)
        self._default_section = default_section

    def decode(self) -> str:
        """Read the file as text.

        Try `encoding` (or utf-8 with optional BOM) first; on failure
        fall back to `chardet` unless `detect_encoding=False`.
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise IniFileError(self._fn, e) from e

        try:
            return raw.decode(self._codec or 'utf-8-sig')
        except LookupError as e:
            raise IniFileError(self._fn, e) from e
        except UnicodeDecodeError as e:
            if not self._detect:
                raise IniFileError(self._fn, e) from e
            return self._decode_guessed(raw, e)

    def _decode_guessed(self, raw: bytes, err: UnicodeDecodeError) -> str:
        codec = guess_codec(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < 0.8):
            raise IniFileError(self._fn, err) from err

        logger.info('%s: decoding as %s (confidence %.2f)',
                    self._fn, codec['encoding'], codec['confidence'])
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError) as e:
            raise IniFileError(self._fn, e) from e

    def read(self) -> IniDocument:
        return IniParser.readstream(
            StringIO(self.decode()),
            orphans=self._orphans,
            default_section=self._default_section)

    def __str__(self) -> str:
        return f"INI file: {super().__str__()} ({self._codec or 'auto'})"


def parse(content: str, **options) -> IniParser:
    """Shortcut of `IniParser.from_string()`."""
    return IniParser.from_string(content, **options)


def parse_file(path: str | PathLike[str], **options) -> IniParser:
    """Shortcut of `IniParser.from_file()`."""
    return IniParser.from_file(path, **options)
