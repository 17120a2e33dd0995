import os

MAX_BODY_BYTES = int(os.getenv("WA_MAX_BODY_BYTES", 1 * 1024 * 1024))  # 1 MB of text is plenty
LOG_LEVEL = os.getenv("WA_LOG_LEVEL", "INFO")

# The original editor waited before returning results; 0 disables it
ANALYSIS_DELAY_SECONDS = float(os.getenv("WA_ANALYSIS_DELAY", "0"))

# Analyzer configuration
MAX_SUGGESTIONS = 8
LONG_SENTENCE_THRESHOLD = 25  # words
SHORT_SENTENCE_THRESHOLD = 8  # words, below this a sentence is flagged for variety

# Statistics configuration
WORDS_PER_MINUTE = 200

READABILITY_LABELS = [
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
    (0, "Very Difficult"),
]
