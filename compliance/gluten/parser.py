"""
JSON extraction for model output.

The completion service does not always return strict JSON (markdown fences,
leading prose, trailing notes). Parsing is optimistic first, then salvages the
first balanced object, then gives up with an empty dict.
"""

import json
from typing import Any, Dict, Optional


def find_balanced_object(text: str) -> Optional[str]:
    """
    Return the first balanced {...} substring of text, or None.

    Braces inside JSON string literals (and escaped quotes) are ignored.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False

        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue

            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]

        # Unbalanced from here; try the next opening brace
        start = text.find("{", start + 1)

    return None


def extract_json_object(raw: Optional[str]) -> Dict[str, Any]:
    """
    Parse a JSON object out of raw model output.

    Args:
        raw: Completion text

    Returns:
        The parsed object, or {} when nothing usable was found
    """
    if not raw:
        return {}

    try:
        parsed = json.loads(raw)
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    candidate = find_balanced_object(raw)
    if candidate is None:
        return {}

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        return {}

    return parsed if isinstance(parsed, dict) else {}
