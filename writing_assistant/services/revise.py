# writing_assistant/services/revise.py
from __future__ import annotations

import logging
from typing import List

from writing_assistant.models.writing import Suggestion

log = logging.getLogger("revise")


def apply_suggestion(text: str, suggestion: Suggestion) -> str:
    """
    Replace the first occurrence of the suggestion's original text with its
    replacement. The text comes back untouched when there is nothing to apply
    (no replacement, or the flagged text has since been edited away).
    """
    if suggestion.replacement is None:
        log.debug("Suggestion %s has no replacement", suggestion.id)
        return text
    if suggestion.original_text not in text:
        log.info("Suggestion %s no longer matches the text; skipping", suggestion.id)
        return text
    return text.replace(suggestion.original_text, suggestion.replacement, 1)


def remove_suggestion(suggestions: List[Suggestion], suggestion_id: str) -> List[Suggestion]:
    return [s for s in suggestions if s.id != suggestion_id]
