"""
Prompts for the gluten analyzer.

Key names in the expected JSON are always English. Only the values of
criticalIngredient and explanation follow the response language.
"""

import json
from typing import Any, Dict, List

from compliance.gluten.constants import (
    ARABIC,
    CONTAINS_GLUTEN,
    ENGLISH,
    LANGUAGE_NAMES,
    VERDICTS,
)


SYSTEM_PROMPT_SKELETON = """You are an expert in gluten allergies and celiac disease.

Analyze ingredient lists accurately. Look for any explicit gluten source, any ingredient that might be derived from a gluten source, and any cross-contamination warnings.

DECISION RULES:
• contains_gluten: an ingredient is an explicit gluten source
• may_contain_gluten: an ingredient may be derived from a gluten source, or the label warns about cross-contamination
• appears_gluten_free: no gluten source or warning is present

OUTPUT: Respond ONLY with a JSON object with exactly these keys:
- verdict: one of {verdicts}
- criticalIngredient: the ingredient your decision is based on, or "N/A" if the product is safe
- explanation: one short sentence explaining the verdict

LANGUAGE: Keep the key names in English exactly as written. Write the values of criticalIngredient and explanation in {language} only.{language_rule}
"""

ENGLISH_RULE = " Use plain English with ASCII characters only; do not use any other script."
ARABIC_RULE = " Use Arabic script for the explanation; do not answer in English."

# Worked examples shown to the model, one per response language
EXAMPLE_RESULTS: Dict[str, Dict[str, str]] = {
    ENGLISH: {
        "verdict": CONTAINS_GLUTEN,
        "criticalIngredient": "wheat flour",
        "explanation": "Wheat flour is a direct source of gluten.",
    },
    ARABIC: {
        "verdict": CONTAINS_GLUTEN,
        "criticalIngredient": "دقيق القمح",
        "explanation": "دقيق القمح مصدر مباشر للجلوتين.",
    },
}

REWRITE_PROMPT_SKELETON = """You rewrite short sentences about gluten in food products.

Rewrite the sentence given by the user in {language}. Keep the meaning unchanged.{language_rule}
Return ONLY the rewritten sentence, without quotes or any other text.
"""


def _language_rule(lang: str) -> str:
    return ENGLISH_RULE if lang == ENGLISH else ARABIC_RULE


def build_analysis_messages(ingredients_text: str, lang: str) -> List[Dict[str, str]]:
    """
    Build the system + user messages for a gluten analysis.

    Args:
        ingredients_text: Ingredients list exactly as the user sent it
        lang: Resolved response language ("ar" or "en")

    Returns:
        List of message dictionaries for the OpenAI API
    """
    system_prompt = SYSTEM_PROMPT_SKELETON.format(
        verdicts=", ".join(f'"{v}"' for v in VERDICTS),
        language=LANGUAGE_NAMES[lang],
        language_rule=_language_rule(lang),
    )

    example = json.dumps(EXAMPLE_RESULTS[lang], indent=2, ensure_ascii=False)

    user_prompt = f"""INGREDIENTS LIST:
"{ingredients_text}"

EXAMPLE OF THE EXACT EXPECTED JSON SHAPE:
{example}"""

    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]


def build_rewrite_messages(explanation: str, lang: str) -> List[Dict[str, str]]:
    """Messages asking the model to restate an explanation in the target language."""
    system_prompt = REWRITE_PROMPT_SKELETON.format(
        language=LANGUAGE_NAMES[lang],
        language_rule=_language_rule(lang),
    )
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": explanation},
    ]


def build_response_format(lang: str) -> Dict[str, Any]:
    """
    Strict JSON-schema response format for the analysis call.

    The English schema also pins explanation to printable ASCII.
    """
    explanation_schema: Dict[str, Any] = {"type": "string"}
    if lang == ENGLISH:
        explanation_schema["pattern"] = "^[\\x20-\\x7E]+$"

    schema = {
        "type": "object",
        "properties": {
            "verdict": {"type": "string", "enum": list(VERDICTS)},
            "criticalIngredient": {"type": "string"},
            "explanation": explanation_schema,
        },
        "required": ["verdict", "criticalIngredient", "explanation"],
        "additionalProperties": False,
    }

    return {
        "type": "json_schema",
        "json_schema": {
            "name": "gluten_verdict",
            "strict": True,
            "schema": schema,
        },
    }
