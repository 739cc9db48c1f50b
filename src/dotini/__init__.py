# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:38:55
# @Author : Chloride

"""Parse INI text into a dict of sections, each a dict of `str: str`.

    ```python
    >>> from dotini import parse
    >>> doc = parse('[user]\\nname = John Doe').into_document()
    >>> doc['user']['name']
    'John Doe'
    ```
"""

import logging

from .errors import IniFileError, IniParseError, MalformedInputError
from .model import IniDocument, IniSection
from .parser import IniFileReader, IniParser, OrphanPolicy, parse, parse_file

__all__ = [
    'parse', 'parse_file',
    'IniParser', 'IniFileReader', 'OrphanPolicy',
    'IniDocument', 'IniSection',
    'IniParseError', 'MalformedInputError', 'IniFileError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
