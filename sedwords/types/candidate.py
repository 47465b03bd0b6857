"""Candidate dataclass"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Candidate:
    """A word that reads as ``s<d>search<d>replace<d>``"""
    word: str
    search: str
    replace: str
    hit_counts: Dict[str, int] = field(default_factory=dict)

    def record_hit(self, hit_key: str) -> int:
        """Count one more word that masks to hit_key."""
        self.hit_counts[hit_key] = self.hit_counts.get(hit_key, 0) + 1
        return self.hit_counts[hit_key]
