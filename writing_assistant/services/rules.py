from __future__ import annotations
from typing import Callable, Dict, List, NamedTuple, Optional
import re
from writing_assistant.core.config import LONG_SENTENCE_THRESHOLD, SHORT_SENTENCE_THRESHOLD
from writing_assistant.models.writing import SEVERITY_BY_CATEGORY

Rewrite = Callable[["re.Match[str]"], Optional[str]]

STRONG_ADJECTIVES: Dict[str, str] = {
    "good": "excellent",
    "bad": "terrible",
    "big": "enormous",
    "small": "tiny",
    "important": "crucial",
    "interesting": "fascinating",
    "nice": "wonderful",
}

TRANSITION_WORDS = ("However,", "Moreover,", "Furthermore,", "In addition,", "Nevertheless,")

_VERY = re.compile(r"very\s+", re.IGNORECASE)
_SENTENCE_END = re.compile(r"[.!?]+")
_PASSIVE = re.compile(r"\b(was|were|is|are|been|being)\s+\w*ed\b", re.IGNORECASE)


class PatternRule(NamedTuple):
    rule: str
    pattern: "re.Pattern[str]"
    category: str
    message: str
    rewrite: Optional[Rewrite] = None


def _fixed(replacement: str) -> Rewrite:
    return lambda m: replacement


def _stronger_adjective(m: "re.Match[str]") -> str:
    adjective = m.group(1).lower()
    if adjective in STRONG_ADJECTIVES:
        return STRONG_ADJECTIVES[adjective]
    return _VERY.sub("", m.group(0), count=1)


def _rx(source: str) -> "re.Pattern[str]":
    return re.compile(source, re.IGNORECASE)


# Order matters: suggestions are emitted table-first, then match order
PATTERN_RULES = (
    PatternRule(
        "PRESENT_CONTINUOUS", _rx(r"\bi\s+am\s+\w+ing\b"), "grammar",
        "Consider using simple present tense instead of present continuous",
    ),
    PatternRule(
        "THERE_IS", _rx(r"\bthere\s+is\s+\w+\s+that\b"), "style",
        'Consider removing "there is" for more direct writing',
    ),
    PatternRule(
        "VERY_ADJECTIVE", _rx(r"\bvery\s+(\w+)\b"), "style",
        'Consider using a stronger adjective instead of "very"',
        _stronger_adjective,
    ),
    PatternRule(
        "IN_ORDER_TO", _rx(r"\bin\s+order\s+to\b"), "clarity",
        'Consider using "to" instead of "in order to"',
        _fixed("to"),
    ),
    PatternRule(
        "DUE_TO_THE_FACT", _rx(r"\bdue\s+to\s+the\s+fact\s+that\b"), "clarity",
        'Consider using "because" instead',
        _fixed("because"),
    ),
    PatternRule(
        "A_LOT_OF", _rx(r"\ba\s+lot\s+of\b"), "style",
        'Consider using "many", "much", or "numerous"',
        _fixed("many"),
    ),
    PatternRule(
        "DUPLICATE_THAT", _rx(r"\bthat\s+that\b"), "grammar",
        'Remove one "that" to avoid repetition',
        _fixed("that"),
    ),
    PatternRule(
        "MORE_BETTER", _rx(r"\bmore\s+better\b"), "grammar",
        'Use "better" instead of "more better"',
        _fixed("better"),
    ),
)


def pattern_issues(text: str) -> List[Dict]:
    issues = []
    for pi, r in enumerate(PATTERN_RULES):
        for mi, m in enumerate(r.pattern.finditer(text)):
            issues.append({
                "id": f"{pi}-{mi}",
                "category": r.category,
                "severity": SEVERITY_BY_CATEGORY[r.category],
                "rule": r.rule,
                "original_text": m.group(0),
                "replacement": r.rewrite(m) if r.rewrite else None,
                "explanation": r.message,
                "start": m.start(),
                "end": m.end(),
            })
    return issues


def split_sentences(text: str) -> List[str]:
    """Split on runs of . ! ? and return the stripped, non-empty fragments in order."""
    return [s.strip() for s in _SENTENCE_END.split(text) if s.strip()]


def word_count(sentence: str) -> int:
    return len(sentence.split())


def is_passive(sentence: str) -> bool:
    return _PASSIVE.search(sentence) is not None


def _sentence_issue(text: str, sentence: str, **fields) -> Dict:
    # repeated sentences all resolve to the first occurrence
    start = text.find(sentence)
    return dict(fields, original_text=sentence, start=start, end=start + len(sentence))


def sentence_issues(text: str) -> List[Dict]:
    issues = []
    for i, sentence in enumerate(split_sentences(text)):
        words = word_count(sentence)
        if is_passive(sentence):
            issues.append(_sentence_issue(
                text, sentence,
                id=f"passive-{i}",
                category="style",
                severity="warning",
                rule="PASSIVE_VOICE",
                replacement=None,
                explanation="Consider using active voice for more engaging writing",
            ))
        if words > LONG_SENTENCE_THRESHOLD:
            issues.append(_sentence_issue(
                text, sentence,
                id=f"long-sentence-{i}",
                category="clarity",
                severity="info",
                rule="LONG_SENTENCE",
                replacement=None,
                explanation="Consider breaking this long sentence into shorter ones for better readability",
            ))
        if i > 0 and words < SHORT_SENTENCE_THRESHOLD:
            starter = TRANSITION_WORDS[i % len(TRANSITION_WORDS)]
            issues.append(_sentence_issue(
                text, sentence,
                id=f"variety-{i}",
                category="style",
                severity="info",
                rule="SENTENCE_VARIETY",
                replacement=f"{starter} {sentence.lower()}",
                explanation="Consider varying sentence structure for better flow",
            ))
    return issues
