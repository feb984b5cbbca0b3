import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.models import ANALYSIS_FAILED, INGREDIENTS_REQUIRED, MessageResponse
from compliance.gluten.analyzer import GlutenAnalyzer
from compliance.gluten.language import resolve_language
from compliance.gluten.models import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

# Lazy-initialized analyzer shared by all requests
_analyzer: Optional[GlutenAnalyzer] = None


def get_analyzer() -> GlutenAnalyzer:
    """Get or create the process-wide gluten analyzer."""
    global _analyzer
    if _analyzer is None:
        _analyzer = GlutenAnalyzer()
    return _analyzer


@router.post(
    "/api/analyze",
    response_model=AnalysisResult,
    responses={
        400: {"model": MessageResponse},
        405: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
async def analyze_ingredients(request: Request, analyzer: GlutenAnalyzer = Depends(get_analyzer)):
    """Classify an ingredients list as containing, maybe containing, or free of gluten."""
    try:
        payload = AnalysisRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse(status_code=400, content={"message": INGREDIENTS_REQUIRED})

    lang = resolve_language(
        payload.language,
        payload.ingredientsText,
        request.headers.get("accept-language"),
    )
    logger.debug(f"Resolved response language: {lang} (hint={payload.language!r})")

    try:
        # The OpenAI client is synchronous; keep it off the event loop
        return await asyncio.to_thread(analyzer.analyze, payload.ingredientsText, lang)
    except Exception:
        logger.exception(ANALYSIS_FAILED)
        return JSONResponse(status_code=500, content={"message": ANALYSIS_FAILED})
