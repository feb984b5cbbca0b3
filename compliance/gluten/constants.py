from typing import Dict, Tuple

# Verdicts the endpoint may return
CONTAINS_GLUTEN = "contains_gluten"
MAY_CONTAIN_GLUTEN = "may_contain_gluten"
APPEARS_GLUTEN_FREE = "appears_gluten_free"

VERDICTS: Tuple[str, ...] = (
    CONTAINS_GLUTEN,
    MAY_CONTAIN_GLUTEN,
    APPEARS_GLUTEN_FREE,
)

DEFAULT_VERDICT = APPEARS_GLUTEN_FREE
NOT_APPLICABLE = "N/A"

# Response languages
ARABIC = "ar"
ENGLISH = "en"
AUTO = "auto"

LANGUAGE_NAMES: Dict[str, str] = {
    ARABIC: "Arabic",
    ENGLISH: "English",
}

# Local explanations used when the model's sentence is in the wrong script.
# "with" variants name the critical ingredient, "without" variants do not.
EXPLANATION_TEMPLATES: Dict[str, Dict[str, Dict[str, str]]] = {
    ENGLISH: {
        CONTAINS_GLUTEN: {
            "with": "This product contains gluten because it lists {ingredient}.",
            "without": "This product contains a gluten source.",
        },
        MAY_CONTAIN_GLUTEN: {
            "with": "This product may contain gluten because of {ingredient}.",
            "without": "This product may contain gluten; check the label for cross-contamination warnings.",
        },
        APPEARS_GLUTEN_FREE: {
            "with": "No gluten source was found in the listed ingredients.",
            "without": "No gluten source was found in the listed ingredients.",
        },
    },
    ARABIC: {
        CONTAINS_GLUTEN: {
            "with": "هذا المنتج يحتوي على الجلوتين لأنه يتضمن {ingredient}.",
            "without": "هذا المنتج يحتوي على مصدر للجلوتين.",
        },
        MAY_CONTAIN_GLUTEN: {
            "with": "قد يحتوي هذا المنتج على الجلوتين بسبب {ingredient}.",
            "without": "قد يحتوي هذا المنتج على الجلوتين، تحقق من تحذيرات التلوث الخلطي على الملصق.",
        },
        APPEARS_GLUTEN_FREE: {
            "with": "لم يتم العثور على أي مصدر للجلوتين في المكونات المذكورة.",
            "without": "لم يتم العثور على أي مصدر للجلوتين في المكونات المذكورة.",
        },
    },
}
