from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Literal, Optional

Severity = Literal["error", "warning", "info"]
Category = Literal["grammar", "style", "clarity"]

SEVERITY_BY_CATEGORY: Dict[str, str] = {
    "grammar": "error",
    "style": "warning",
    "clarity": "info",
}

class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: Category
    severity: Severity
    original_text: str
    replacement: Optional[str] = None
    explanation: str
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)
    rule: Optional[str] = None

class WritingStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = 0
    character_count: int = 0
    character_count_no_spaces: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    average_words_per_sentence: float = 0.0
    readability_score: int = 0
    readability_label: str = "Very Difficult"
    reading_time: int = 0

class WritingAnalysis(BaseModel):
    suggestions: List[Suggestion]
    stats: WritingStatistics
    totals: Dict[str, int]

# Request / response bodies
class TextIn(BaseModel):
    text: str

class ApplyIn(BaseModel):
    text: str
    suggestion: Suggestion
    suggestions: List[Suggestion] = []

class ApplyOut(BaseModel):
    text: str
    applied: bool
    suggestions: List[Suggestion]

class DismissIn(BaseModel):
    suggestion_id: str
    suggestions: List[Suggestion] = []
