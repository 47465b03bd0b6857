"""
Word list reader.

One word per line, UTF-8. Every call to read_words() opens the file
afresh, so the two passes over the list each get their own handle.
"""

import logging
from pathlib import Path
from typing import Iterator, Union

from sedwords.errors import WordListUnavailableError

logger = logging.getLogger(__name__)


def open_wordlist(path: Union[str, Path], encoding: str = "utf-8"):
    """Open the word list, raising WordListUnavailableError on failure."""
    try:
        return open(path, "r", encoding=encoding)
    except OSError as e:
        raise WordListUnavailableError(path, e.strerror or str(e)) from e


def read_words(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield each line of the word list with its line terminator removed.

    The file is opened before the first word is yielded, so an
    unreadable path fails on the first next() call.
    """
    fh = open_wordlist(path, encoding)
    with fh:
        count = 0
        try:
            for line in fh:
                count += 1
                yield line.rstrip("\r\n")
        except UnicodeDecodeError as e:
            raise WordListUnavailableError(path, str(e)) from e
    logger.debug(f"Read {count} lines from {path}")
