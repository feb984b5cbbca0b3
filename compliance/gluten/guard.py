"""
Result normalization and language guard.

Normalization coerces whatever the model returned into the three-key shape.
The guard then makes sure the explanation is written in the resolved
language: validate -> correct once -> fixed fallback.
"""

import logging
from typing import Any, Callable, Dict, Optional

from compliance.gluten.constants import (
    ARABIC,
    DEFAULT_VERDICT,
    ENGLISH,
    EXPLANATION_TEMPLATES,
    NOT_APPLICABLE,
    VERDICTS,
)
from compliance.gluten.language import contains_arabic, is_ascii

logger = logging.getLogger(__name__)

# (explanation, lang) -> rewritten explanation
Rewriter = Callable[[str, str], str]


def _clean_string(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    return ""


def normalize_result(parsed: Dict[str, Any]) -> Dict[str, str]:
    """
    Coerce a parsed model response into verdict / criticalIngredient / explanation.

    - Unknown verdict -> appears_gluten_free
    - Blank or missing criticalIngredient -> "N/A"
    - Blank or missing explanation -> "" (left for the language guard)
    """
    verdict = parsed.get("verdict")
    if verdict not in VERDICTS:
        if verdict is not None:
            logger.warning(f"Unrecognized verdict {verdict!r}, using {DEFAULT_VERDICT}")
        verdict = DEFAULT_VERDICT

    critical = _clean_string(parsed.get("criticalIngredient")) or NOT_APPLICABLE
    explanation = _clean_string(parsed.get("explanation"))

    return {
        "verdict": verdict,
        "criticalIngredient": critical,
        "explanation": explanation,
    }


def explanation_matches_language(explanation: str, lang: str) -> bool:
    """English must be ASCII-only, Arabic must contain Arabic script. Empty never matches."""
    if not explanation:
        return False
    if lang == ARABIC:
        return contains_arabic(explanation)
    return is_ascii(explanation)


def template_explanation(verdict: str, critical_ingredient: str, lang: str) -> str:
    """
    Deterministic explanation built from the verdict.

    The ingredient is only named when there is one and, for English, when it
    is plain ASCII.
    """
    templates = EXPLANATION_TEMPLATES[lang].get(verdict) or EXPLANATION_TEMPLATES[lang][DEFAULT_VERDICT]

    usable = critical_ingredient and critical_ingredient != NOT_APPLICABLE
    if usable and lang == ENGLISH and not is_ascii(critical_ingredient):
        usable = False

    if usable:
        return templates["with"].format(ingredient=critical_ingredient)
    return templates["without"]


class LanguageGuard:
    """
    Post-validation stage that fixes explanations in the wrong script.

    With a rewriter, one corrective completion is attempted before falling
    back to the template. Without one, the template is used directly.
    """

    def __init__(self, rewriter: Optional[Rewriter] = None):
        self.rewriter = rewriter

    def apply(self, result: Dict[str, str], lang: str) -> Dict[str, str]:
        explanation = result.get("explanation", "")
        if explanation_matches_language(explanation, lang):
            return result

        logger.warning(f"Explanation does not match language '{lang}', correcting")

        corrected = None
        if self.rewriter is not None and explanation:
            corrected = self._rewrite(explanation, lang)

        if corrected is None:
            corrected = template_explanation(result["verdict"], result["criticalIngredient"], lang)

        return {**result, "explanation": corrected}

    def _rewrite(self, explanation: str, lang: str) -> Optional[str]:
        """One corrective round trip; None if it fails or is still non-conformant."""
        try:
            rewritten = (self.rewriter(explanation, lang) or "").strip()
        except Exception as e:
            logger.warning(f"Explanation rewrite failed: {e}")
            return None

        if not explanation_matches_language(rewritten, lang):
            logger.warning(f"Rewritten explanation still not in '{lang}', using template")
            return None

        return rewritten
