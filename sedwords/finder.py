"""
Two-pass pipeline: extract candidates, aggregate hits, select pairs.

The extractor finishes before the aggregator starts, and both finish
before any match is returned.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from sedwords.aggregator import aggregate_hits, select_matches
from sedwords.config import Config, config as default_config
from sedwords.extractor import extract_candidates
from sedwords.types.sed_match import SedMatch
from sedwords.wordlist import read_words

logger = logging.getLogger(__name__)


def find_sed_pairs_in_words(
    words: Sequence[str],
    config: Optional[Config] = None,
) -> List[SedMatch]:
    """Run both passes over an in-memory word list."""
    cfg = config or default_config
    candidates = extract_candidates(words, cfg.marker, cfg.min_length)
    aggregate_hits(words, candidates, cfg.sentinel)
    return list(select_matches(candidates, cfg.sentinel))


def find_sed_pairs(
    path: Union[str, Path],
    config: Optional[Config] = None,
) -> List[SedMatch]:
    """
    Run both passes over a word list file.

    Args:
        path: One word per line
        config: Overrides the environment-derived configuration

    Returns:
        Matches ordered by pattern word, then by hit key

    Raises:
        WordListUnavailableError: If the file cannot be opened for either pass
    """
    cfg = config or default_config
    candidates = extract_candidates(
        read_words(path, cfg.encoding), cfg.marker, cfg.min_length
    )
    aggregate_hits(read_words(path, cfg.encoding), candidates, cfg.sentinel)
    matches = list(select_matches(candidates, cfg.sentinel))
    logger.info(f"{len(matches)} word pairs in {path}")
    return matches
