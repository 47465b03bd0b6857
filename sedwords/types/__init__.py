"""Record types shared by the extraction and aggregation passes"""

from sedwords.types.candidate import Candidate
from sedwords.types.sed_match import SedMatch

__all__ = [
    'Candidate',
    'SedMatch',
]
