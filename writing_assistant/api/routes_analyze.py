import asyncio
from fastapi import APIRouter
from writing_assistant.core import config
from writing_assistant.models.writing import TextIn
from writing_assistant.services.analyze import analyze_writing

router = APIRouter(tags=["analyze"])

@router.post("/analyze")
async def analyze(body: TextIn):
    if config.ANALYSIS_DELAY_SECONDS > 0:
        await asyncio.sleep(config.ANALYSIS_DELAY_SECONDS)
    report = analyze_writing(body.text)
    return report.model_dump()
