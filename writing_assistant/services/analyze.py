from __future__ import annotations
from typing import Dict, List
import logging
from writing_assistant.services import rules as R
from writing_assistant.services.stats import compute_statistics
from writing_assistant.models.writing import Suggestion, WritingAnalysis
from writing_assistant.core.config import MAX_SUGGESTIONS

log = logging.getLogger("analyze")


def _to_suggestion(issue: Dict) -> Suggestion:
    return Suggestion(
        id=issue["id"],
        category=issue["category"], severity=issue["severity"],
        original_text=issue["original_text"], replacement=issue.get("replacement"),
        explanation=issue["explanation"], rule=issue.get("rule"),
        start_index=issue["start"], end_index=issue["end"],
    )


def analyze_text(text: str) -> List[Suggestion]:
    """
    Pattern-table suggestions (table order, then match order) followed by
    sentence heuristics (sentence order), truncated to MAX_SUGGESTIONS.
    """
    patterns = R.pattern_issues(text)
    sentences = R.sentence_issues(text)
    all_issues = patterns + sentences

    if len(all_issues) > MAX_SUGGESTIONS:
        log.debug("Dropping %d suggestions over the cap of %d",
                  len(all_issues) - MAX_SUGGESTIONS, MAX_SUGGESTIONS)
    return [_to_suggestion(i) for i in all_issues[:MAX_SUGGESTIONS]]


def category_totals(suggestions: List[Suggestion]) -> Dict[str, int]:
    counts = {"grammar": 0, "style": 0, "clarity": 0}
    for s in suggestions:
        counts[s.category] += 1
    return counts


def analyze_writing(text: str) -> WritingAnalysis:
    suggestions = analyze_text(text)
    stats = compute_statistics(text)
    totals = category_totals(suggestions)
    log.info("Analyzed %d words: %d suggestions %s",
             stats.word_count, len(suggestions), totals)
    return WritingAnalysis(suggestions=suggestions, stats=stats, totals=totals)
