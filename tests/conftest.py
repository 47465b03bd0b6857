"""
Shared fixtures for sedwords tests
"""

import pytest

from sedwords.config import Config


@pytest.fixture
def default_config():
    """Configuration with built-in defaults, ignoring the environment"""
    return Config()


@pytest.fixture
def write_wordlist(tmp_path):
    """Write words to a word list file and return its path"""
    def _write(words, name="words.txt", newline="\n"):
        path = tmp_path / name
        path.write_text(newline.join(words) + newline, encoding="utf-8")
        return path
    return _write
