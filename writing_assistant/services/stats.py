from __future__ import annotations
from typing import Dict
import math
import re
import textstat
from writing_assistant.core.config import READABILITY_LABELS, WORDS_PER_MINUTE
from writing_assistant.models.writing import WritingStatistics
from writing_assistant.services.rules import split_sentences

VOWELS = set("aeiouAEIOU")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WHITESPACE = re.compile(r"\s")


def _round_half_up(value: float, digits: int = 0) -> float:
    # round() is banker's rounding; the stats panel rounds .5 up
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def count_syllables(word: str) -> int:
    count = 0
    previous_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    # silent 'e'
    if word.endswith("e") and count > 1:
        count -= 1
    return max(1, count)


def readability_score(words: int, sentences: int, syllables: int) -> int:
    if words == 0 or sentences == 0:
        return 0
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    return int(_round_half_up(max(0.0, min(100.0, score))))


def readability_label(score: int) -> str:
    for floor, label in READABILITY_LABELS:
        if score >= floor:
            return label
    return READABILITY_LABELS[-1][1]


def compute_statistics(text: str) -> WritingStatistics:
    words = text.split()
    sentences = split_sentences(text)
    paragraphs = [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]

    avg = len(words) / len(sentences) if sentences else 0.0
    syllables = sum(count_syllables(w) for w in words)
    score = readability_score(len(words), len(sentences), syllables)

    return WritingStatistics(
        word_count=len(words),
        character_count=len(text),
        character_count_no_spaces=len(_WHITESPACE.sub("", text)),
        sentence_count=len(sentences),
        paragraph_count=len(paragraphs),
        average_words_per_sentence=_round_half_up(avg, 1),
        readability_score=score,
        readability_label=readability_label(score),
        reading_time=math.ceil(len(words) / WORDS_PER_MINUTE),
    )


def readability_metrics(text: str) -> Dict:
    """Standard textstat formulas, reported alongside the built-in score."""
    if not text.split():
        return {
            "flesch_reading_ease": 0.0,
            "flesch_kincaid_grade": 0.0,
            "smog_index": 0.0,
            "automated_readability_index": 0.0,
            "avg_sentence_length": 0.0,
        }
    return {
        "flesch_reading_ease": textstat.flesch_reading_ease(text),
        "flesch_kincaid_grade": textstat.flesch_kincaid_grade(text),
        "smog_index": textstat.smog_index(text),
        "automated_readability_index": textstat.automated_readability_index(text),
        "avg_sentence_length": round(
            textstat.lexicon_count(text) / max(1, textstat.sentence_count(text)), 1
        ),
    }
