"""
Pair Aggregator - second pass over the word list

Every line is masked against both fragments of every candidate. Masking
replaces the first occurrence of a fragment with the sentinel, so for
the candidate "statement" (search "a", replace "emen"):

    bat       -> b!t          (search)
    cat       -> c!t          (search)
    cement    -> c!t          (replace)
    statement -> st!tement    (search), stat!t (replace)

A hit key reached by exactly two lines ("c!t") means one line turns
into the other under the candidate's substitution. Keys reached once
have no partner; keys reached three or more times are ambiguous and
are not reported.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional

from sedwords.types.candidate import Candidate
from sedwords.types.sed_match import SedMatch

logger = logging.getLogger(__name__)

PAIR_COUNT = 2


def mask_first(line: str, fragment: str, sentinel: str = "!") -> Optional[str]:
    """Replace the first occurrence of fragment in line with sentinel."""
    if not fragment or fragment not in line:
        return None
    return line.replace(fragment, sentinel, 1)


def unmask(hit_key: str, fragment: str, sentinel: str = "!") -> str:
    """Put fragment back in place of the first sentinel in hit_key."""
    return hit_key.replace(sentinel, fragment, 1)


def aggregate_hits(
    lines: Iterable[str],
    candidates: Dict[str, Candidate],
    sentinel: str = "!",
) -> Dict[str, Candidate]:
    """
    Accumulate hit counts for every candidate, in place.

    Every line counts, duplicates included. A line may add one hit via
    the search fragment and one via the replace fragment.
    """
    logger.debug("Searching for matches ...")
    ordered = [candidates[word] for word in sorted(candidates)]
    total = 0
    for line in lines:
        total += 1
        for candidate in ordered:
            hit_key = mask_first(line, candidate.search, sentinel)
            if hit_key is not None:
                candidate.record_hit(hit_key)
            hit_key = mask_first(line, candidate.replace, sentinel)
            if hit_key is not None:
                candidate.record_hit(hit_key)

    logger.info(f"Matched {total} lines against {len(ordered)} pattern words")
    return candidates


def select_matches(
    candidates: Dict[str, Candidate],
    sentinel: str = "!",
) -> Iterator[SedMatch]:
    """Yield a SedMatch for every hit key counted exactly twice."""
    for word in sorted(candidates):
        candidate = candidates[word]
        for hit_key in sorted(candidate.hit_counts):
            if candidate.hit_counts[hit_key] != PAIR_COUNT:
                continue
            yield SedMatch(
                pattern_word=word,
                from_word=unmask(hit_key, candidate.search, sentinel),
                to_word=unmask(hit_key, candidate.replace, sentinel),
            )
