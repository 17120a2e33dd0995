from fastapi import APIRouter, Query
from writing_assistant.models.writing import TextIn
from writing_assistant.services.stats import compute_statistics, readability_metrics

router = APIRouter(tags=["statistics"])

@router.post("/statistics")
def statistics(
    body: TextIn,
    extended: bool = Query(False, description="Include textstat readability formulas"),
):
    payload = compute_statistics(body.text).model_dump()
    if extended:
        payload["readability_metrics"] = readability_metrics(body.text)
    return payload
