# credcheck/routers/metadata.py

"""
POST /api/metadata: resolve an article URL to its page title.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from credcheck.dependencies import get_reader
from credcheck.errors import CheckError
from credcheck.models.schema import ArticleRequest, ErrorResponse, MetadataResult
from credcheck.services.metadata import resolve_metadata
from credcheck.services.reader import Reader

router = APIRouter()
logger = logging.getLogger("routers.metadata")


@router.post(
    "/metadata",
    response_model=MetadataResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def metadata(req: ArticleRequest, reader: Reader = Depends(get_reader)):
    try:
        return resolve_metadata(req.article, reader=reader)
    except CheckError as e:
        if e.status_code >= 500:
            logger.error("metadata failed: %s", e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("metadata failed unexpectedly")
        raise HTTPException(status_code=500, detail="Failed to fetch article metadata")
