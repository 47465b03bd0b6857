"""
sedwords - find words that double as sed substitute commands

A word like "statement" reads as ``s/a/emen/`` with ``t`` as the
delimiter. This package finds such words in a word list, then finds
pairs of other words in the same list that the command turns into
each other ("cat" -> "cement").

Usage:
    from sedwords import find_sed_pairs

    for match in find_sed_pairs("/usr/share/dict/words"):
        print(match.pattern_word, match.from_word, match.to_word)
"""

from sedwords.types.candidate import Candidate
from sedwords.types.sed_match import SedMatch
from sedwords.extractor import extract_candidates, parse_candidate
from sedwords.aggregator import aggregate_hits, mask_first, select_matches
from sedwords.finder import find_sed_pairs, find_sed_pairs_in_words
from sedwords.errors import SedWordsError, WordListUnavailableError

__all__ = [
    'Candidate',
    'SedMatch',
    'extract_candidates',
    'parse_candidate',
    'aggregate_hits',
    'mask_first',
    'select_matches',
    'find_sed_pairs',
    'find_sed_pairs_in_words',
    'SedWordsError',
    'WordListUnavailableError',
]

__version__ = '1.2.0'
