# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:05:41
# @Author : Chloride

"""
Basically INI Structure: a dict of sections, each a dict of `str: str`.

No inheritance, no `+=`, no value conversion. Both classes compare
equal to plain dicts holding the same pairs.
"""

from collections.abc import Mapping, MutableMapping
from typing import Iterator

__all__ = ['IniSection', 'IniDocument']


class IniSection(MutableMapping[str, str]):
    """Key-value pairs of one INI section.

    All pairs *should* be `str: str` (values may be empty strings),
    however in runtime we wouldn't limit that much.
    """
    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] %r' % (self._name, self._data)

    def to_dict(self) -> dict[str, str]:
        """A plain copy of the pairs."""
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """A whole INI file. Sections keep the order they first appeared in.

    Assigning a plain dict creates a new `IniSection` holding a copy,
    so the document never shares storage with external dicts.
    """
    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        if not key:
            raise ValueError('section name must not be empty')
        self.__sections[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.to_dict()!r})'

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """If `key` not in self, then add it (filled with `default`).

        Either way the *live* section is returned, so writes on it
        go straight into the document.
        """
        if key not in self.__sections:
            self[key] = default or {}
        return self.__sections[key]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Plain nested dict copy, e.g. for `json.dumps()`."""
        return {k: v.to_dict() for k, v in self.__sections.items()}
