# tests/test_revise.py
from writing_assistant.models.writing import Suggestion
from writing_assistant.services.revise import apply_suggestion, remove_suggestion


def _suggestion(id="2-0", original="very good", replacement="excellent", start=0):
    return Suggestion(
        id=id, category="style", severity="warning",
        original_text=original, replacement=replacement,
        explanation="x", start_index=start, end_index=start + len(original),
    )


def test_apply_replaces_first_occurrence_only():
    text = "A very good plan and a very good team."
    assert apply_suggestion(text, _suggestion()) == "A excellent plan and a very good team."


def test_apply_without_replacement_is_noop():
    text = "The ball was kicked."
    s = _suggestion(id="passive-0", original="The ball was kicked", replacement=None)
    assert apply_suggestion(text, s) == text


def test_apply_stale_suggestion_is_noop():
    assert apply_suggestion("Nothing here.", _suggestion()) == "Nothing here."


def test_remove_suggestion_by_id():
    a, b = _suggestion(id="2-0"), _suggestion(id="5-0", original="a lot of", replacement="many")
    assert remove_suggestion([a, b], "2-0") == [b]
    assert remove_suggestion([a, b], "missing") == [a, b]
