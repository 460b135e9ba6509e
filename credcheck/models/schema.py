from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel


class ArticleRequest(BaseModel):
    article: Optional[str] = None


class Criterion(str, Enum):
    CLAIMS_TO_EVIDENCE = "claimsToEvidence"
    EVIDENCE_TYPE = "evidenceType"
    INDEPENDENT_ANALYSIS = "independentAnalysis"
    HEADLINE_CONSISTENCY = "headlineConsistency"
    INCENDIARY_NATURE = "incendiaryNature"


class CriterionDetail(BaseModel):
    score: Union[int, float]
    html: str


class AssessmentDetails(BaseModel):
    # field names mirror Criterion values; extra keys from the model are dropped
    claimsToEvidence: CriterionDetail
    evidenceType: CriterionDetail
    independentAnalysis: CriterionDetail
    headlineConsistency: CriterionDetail
    incendiaryNature: CriterionDetail

    @classmethod
    def uniform(cls, score: Union[int, float] = 50, html: str = "") -> "AssessmentDetails":
        return cls(**{c.value: CriterionDetail(score=score, html=html) for c in Criterion})


class AssessmentResult(BaseModel):
    score: Union[int, float]
    rating: str
    summary: str
    details: AssessmentDetails


class MetadataResult(BaseModel):
    title: str
    url: str


class ErrorResponse(BaseModel):
    error: str
