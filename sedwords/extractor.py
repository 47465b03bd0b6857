"""
Candidate Extractor - first pass over the word list

Finds words of the shape ``s<d>search<d>replace<d>`` where ``<d>`` is the
word's second character. For "statement" the delimiter is ``t``:

    s t a t emen t
      ^ ^ ^ ^    ^
      | | | |    closing delimiter
      | | | replace fragment
      | | middle delimiter
      | search fragment
      opening delimiter

A word qualifies when:
  1. it starts with the marker letter
  2. its second character is also its last character
  3. the second character appears exactly once more in between
  4. both runs between delimiters are non-empty
  5. the two runs differ ("sununu" would turn "nu" into "nu")
"""

import re
import logging
from typing import Dict, Iterable, Optional, Pattern

from sedwords.types.candidate import Candidate

logger = logging.getLogger(__name__)

WORD_SHAPE = re.compile(r'^\w*$')

# marker + delimiter + fragment + delimiter + fragment + delimiter
SHAPE_MIN_LENGTH = 5


def build_shape_pattern(marker: str, delimiter: str) -> Pattern:
    """Compile the substitute-command shape for one delimiter."""
    m = re.escape(marker)
    d = re.escape(delimiter)
    return re.compile(f'^{m}{d}([^{d}]+){d}([^{d}]+){d}$')


def parse_candidate(word: str, marker: str = "s", min_length: int = 5) -> Optional[Candidate]:
    """
    Parse a single word into a Candidate.

    Returns:
        Candidate with empty hit counts, or None when the word does not
        have the substitute-command shape.
    """
    if len(word) < max(min_length, SHAPE_MIN_LENGTH) or word[0] != marker:
        return None
    if not WORD_SHAPE.match(word):
        return None

    match = build_shape_pattern(marker, word[1]).match(word)
    if not match:
        return None

    logger.debug(word)
    search, replace = match.group(1), match.group(2)
    if search == replace:
        return None

    return Candidate(word=word, search=search, replace=replace)


def extract_candidates(
    words: Iterable[str],
    marker: str = "s",
    min_length: int = 5,
) -> Dict[str, Candidate]:
    """
    Build the candidate set from a full pass over the word list.

    Duplicate lines map to the same key; the last one seen wins.
    """
    logger.debug("Building pattern list ...")
    candidates: Dict[str, Candidate] = {}
    for word in words:
        candidate = parse_candidate(word, marker, min_length)
        if candidate is None:
            continue
        logger.debug(f"{candidate.word} => {candidate.search} {candidate.replace}")
        candidates[word] = candidate

    logger.info(f"Found {len(candidates)} pattern words")
    return candidates
