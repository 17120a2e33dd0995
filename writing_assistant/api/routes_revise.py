from fastapi import APIRouter
from writing_assistant.models.writing import ApplyIn, ApplyOut, DismissIn
from writing_assistant.services.revise import apply_suggestion, remove_suggestion

router = APIRouter(tags=["revise"])

@router.post("/apply", response_model=ApplyOut)
def apply(body: ApplyIn):
    new_text = apply_suggestion(body.text, body.suggestion)
    applied = new_text != body.text
    # a suggestion without a replacement stays listed until dismissed
    remaining = remove_suggestion(body.suggestions, body.suggestion.id) if applied else body.suggestions
    return ApplyOut(text=new_text, applied=applied, suggestions=remaining)

@router.post("/dismiss")
def dismiss(body: DismissIn):
    remaining = remove_suggestion(body.suggestions, body.suggestion_id)
    return {"suggestions": [s.model_dump() for s in remaining]}
