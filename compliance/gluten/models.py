from typing import Any, Literal
from pydantic import BaseModel, Field


Verdict = Literal["contains_gluten", "may_contain_gluten", "appears_gluten_free"]
Language = Literal["ar", "en"]


class AnalysisRequest(BaseModel):
    """Validated body of an analyze request."""
    ingredientsText: str = Field(min_length=1)
    language: Any = None  # "ar" | "en" | "auto"; anything else falls back to the header


class AnalysisResult(BaseModel):
    """Gluten verdict returned to the caller."""
    verdict: Verdict
    criticalIngredient: str
    explanation: str
    lang: Language
