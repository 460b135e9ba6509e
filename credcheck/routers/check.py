# credcheck/routers/check.py

"""
POST /api/check: credibility assessment of article text or an article URL.
"""

from typing import Callable, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException

from credcheck.dependencies import get_llm_factory, get_openai_key, get_reader
from credcheck.errors import CheckError
from credcheck.models.schema import ArticleRequest, AssessmentResult, ErrorResponse
from credcheck.services.credibility import assess_article
from credcheck.services.llm_agent import LLMAgent
from credcheck.services.reader import Reader

router = APIRouter()
logger = logging.getLogger("routers.check")


@router.post(
    "/check",
    response_model=AssessmentResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def check(
    req: ArticleRequest,
    api_key: Optional[str] = Depends(get_openai_key),
    reader: Reader = Depends(get_reader),
    llm_factory: Callable[[str], LLMAgent] = Depends(get_llm_factory),
):
    try:
        return assess_article(req.article, api_key=api_key, reader=reader, llm_factory=llm_factory)
    except CheckError as e:
        if e.status_code >= 500:
            logger.error("check failed: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("check failed unexpectedly")
        raise HTTPException(status_code=500, detail="Failed to analyze article")
