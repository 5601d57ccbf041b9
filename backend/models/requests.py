from pydantic import BaseModel, Field

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_specification import JobSpecification


class MatchRequest(BaseModel):
    candidate: CandidateProfile = Field(default_factory=CandidateProfile, description="Parsed CV data")
    job: JobSpecification = Field(..., description="Job specification to score against")


class BatchMatchRequest(BaseModel):
    candidates: list[CandidateProfile] = Field(..., description="Parsed CVs")
    jobs: list[JobSpecification] = Field(..., description="Job specifications")
