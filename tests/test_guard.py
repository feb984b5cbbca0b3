import pytest

from compliance.gluten.guard import (
    LanguageGuard,
    explanation_matches_language,
    normalize_result,
    template_explanation,
)
from compliance.gluten.language import contains_arabic, is_ascii


def test_normalize_passes_valid_result_through():
    parsed = {
        "verdict": "contains_gluten",
        "criticalIngredient": "wheat flour",
        "explanation": "Contains wheat flour.",
    }
    assert normalize_result(parsed) == parsed


@pytest.mark.parametrize("verdict", ["GLUTEN", "", None, 3, "Contains_Gluten", ["contains_gluten"]])
def test_unknown_verdict_is_coerced(verdict):
    assert normalize_result({"verdict": verdict})["verdict"] == "appears_gluten_free"


@pytest.mark.parametrize("critical", [None, "", "   ", 42])
def test_blank_critical_ingredient_becomes_na(critical):
    assert normalize_result({"criticalIngredient": critical})["criticalIngredient"] == "N/A"


def test_strings_are_trimmed():
    result = normalize_result({"criticalIngredient": "  barley malt ", "explanation": " Malt. "})
    assert result["criticalIngredient"] == "barley malt"
    assert result["explanation"] == "Malt."


def test_missing_explanation_is_empty():
    assert normalize_result({})["explanation"] == ""


def test_explanation_matches_language():
    assert explanation_matches_language("Contains wheat.", "en")
    assert not explanation_matches_language("يحتوي على القمح.", "en")
    assert not explanation_matches_language("Contains wheat – maybe.", "en")
    assert explanation_matches_language("يحتوي على wheat.", "ar")
    assert not explanation_matches_language("Contains wheat.", "ar")
    assert not explanation_matches_language("", "en")
    assert not explanation_matches_language("", "ar")


@pytest.mark.parametrize("verdict", ["contains_gluten", "may_contain_gluten", "appears_gluten_free"])
@pytest.mark.parametrize("critical", ["wheat flour", "N/A", "دقيق القمح"])
def test_templates_respect_script(verdict, critical):
    english = template_explanation(verdict, critical, "en")
    arabic = template_explanation(verdict, critical, "ar")
    assert english and is_ascii(english)
    assert contains_arabic(arabic)


def test_template_names_ingredient():
    assert "wheat flour" in template_explanation("contains_gluten", "wheat flour", "en")
    assert "دقيق القمح" in template_explanation("contains_gluten", "دقيق القمح", "ar")
    assert "N/A" not in template_explanation("may_contain_gluten", "N/A", "en")


def test_guard_leaves_conformant_result_alone():
    calls = []
    guard = LanguageGuard(rewriter=lambda text, lang: calls.append(text) or "unused")
    result = {"verdict": "contains_gluten", "criticalIngredient": "rye", "explanation": "Rye contains gluten."}
    assert guard.apply(result, "en") == result
    assert calls == []


def test_guard_uses_rewrite():
    guard = LanguageGuard(rewriter=lambda text, lang: "Rye contains gluten.")
    result = {"verdict": "contains_gluten", "criticalIngredient": "rye", "explanation": "الجاودار يحتوي على الجلوتين."}
    assert guard.apply(result, "en")["explanation"] == "Rye contains gluten."


def test_guard_falls_back_when_rewrite_raises():
    def broken(text, lang):
        raise RuntimeError("upstream down")

    guard = LanguageGuard(rewriter=broken)
    result = {"verdict": "contains_gluten", "criticalIngredient": "rye", "explanation": "Rye contains gluten."}
    fixed = guard.apply(result, "ar")
    assert contains_arabic(fixed["explanation"])
    assert fixed["verdict"] == "contains_gluten"


@pytest.mark.parametrize("rewritten", ["", "   ", "Still English."])
def test_guard_falls_back_when_rewrite_is_unusable(rewritten):
    guard = LanguageGuard(rewriter=lambda text, lang: rewritten)
    result = {"verdict": "may_contain_gluten", "criticalIngredient": "N/A", "explanation": "Might have gluten."}
    fixed = guard.apply(result, "ar")
    assert fixed["explanation"] == template_explanation("may_contain_gluten", "N/A", "ar")


def test_guard_without_rewriter_uses_template():
    guard = LanguageGuard()
    result = {"verdict": "contains_gluten", "criticalIngredient": "wheat", "explanation": "يحتوي على القمح."}
    assert guard.apply(result, "en")["explanation"] == template_explanation("contains_gluten", "wheat", "en")


def test_empty_explanation_skips_rewrite():
    calls = []
    guard = LanguageGuard(rewriter=lambda text, lang: calls.append(text) or "x")
    result = {"verdict": "appears_gluten_free", "criticalIngredient": "N/A", "explanation": ""}
    fixed = guard.apply(result, "en")
    assert calls == []
    assert fixed["explanation"] == template_explanation("appears_gluten_free", "N/A", "en")
