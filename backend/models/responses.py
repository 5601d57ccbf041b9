from pydantic import BaseModel

from models.schemas.match_report import MatchReport


class PairResult(BaseModel):
    candidate_index: int
    job_index: int
    report: MatchReport


class BatchMatchResponse(BaseModel):
    results: list[PairResult] = []
    pairs: int = 0
