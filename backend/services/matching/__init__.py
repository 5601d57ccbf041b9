"""CV-to-job match scoring engine."""

from services.matching.composer import SCORE_WEIGHTS, build_report, compose_overall_score
from services.matching.engine import PairScore, score, score_matrix

__all__ = [
    "SCORE_WEIGHTS",
    "PairScore",
    "build_report",
    "compose_overall_score",
    "score",
    "score_matrix",
]
