"""
Gluten Analyzer

Runs one ingredients list through the completion service and returns a
validated verdict.

Pipeline:
1. Build the analysis prompt for the resolved language
2. Call the model (temperature 0, strict JSON schema)
3. Extract the JSON object from the completion
4. Normalize verdict / criticalIngredient / explanation
5. Language guard (optional corrective rewrite, template fallback)
"""

import logging
import re
from typing import Any, Optional

import config
from compliance.gluten.guard import LanguageGuard, normalize_result
from compliance.gluten.models import AnalysisResult
from compliance.gluten.parser import extract_json_object
from compliance.gluten.prompt import (
    build_analysis_messages,
    build_response_format,
    build_rewrite_messages,
)
from core.completion import build_client, complete

logger = logging.getLogger(__name__)

EMPTY_OBJECT = re.compile(r"\s*\{\s*\}\s*")


class AnalysisError(Exception):
    """The completion service returned nothing that could be used."""


class GlutenAnalyzer:
    """
    Gluten verdicts for free-text ingredient lists.

    The OpenAI client is injected so tests can pass a fake. Language guard
    policy is "rewrite" (one corrective call, then template) or "template".
    """

    def __init__(
        self,
        client: Any = None,
        model: Optional[str] = None,
        guard_policy: Optional[str] = None,
    ):
        self._client = client
        self.model = model or config.OPENAI_MODEL
        self.guard_policy = guard_policy or config.LANGUAGE_GUARD

        rewriter = self.rewrite_explanation if self.guard_policy == "rewrite" else None
        self.guard = LanguageGuard(rewriter=rewriter)

    @property
    def client(self) -> Any:
        """OpenAI client, created on first use."""
        if self._client is None:
            self._client = build_client()
        return self._client

    def analyze(self, ingredients_text: str, lang: str) -> AnalysisResult:
        """
        Analyze an ingredients list.

        Args:
            ingredients_text: Raw ingredients text
            lang: Resolved response language ("ar" or "en")

        Returns:
            AnalysisResult with verdict, criticalIngredient, explanation, lang

        Raises:
            AnalysisError: no JSON object could be recovered from the completion
            openai.OpenAIError: the completion call itself failed or timed out
        """
        messages = build_analysis_messages(ingredients_text, lang)
        raw = complete(
            self.client,
            messages,
            model=self.model,
            response_format=build_response_format(lang),
        )

        parsed = extract_json_object(raw)
        if not parsed and EMPTY_OBJECT.fullmatch(raw) is None:
            raise AnalysisError(f"No JSON object in completion: {raw[:200]!r}")

        result = normalize_result(parsed)
        result = self.guard.apply(result, lang)

        return AnalysisResult(lang=lang, **result)

    def rewrite_explanation(self, explanation: str, lang: str) -> str:
        """Ask the model to restate an explanation in the target language."""
        text = complete(
            self.client,
            build_rewrite_messages(explanation, lang),
            model=self.model,
        )
        return text.strip().strip('"').strip()
