"""SedMatch dataclass"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SedMatch:
    """A word pair the pattern word converts between"""
    pattern_word: str
    from_word: str
    to_word: str

    def as_tuple(self) -> Tuple[str, str, str]:
        return (self.pattern_word, self.from_word, self.to_word)
