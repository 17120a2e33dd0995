import logging
from fastapi import FastAPI
from writing_assistant.api.routes_analyze import router as analyze_router
from writing_assistant.api.routes_statistics import router as statistics_router
from writing_assistant.api.routes_revise import router as revise_router
from writing_assistant.middleware.limits import BodySizeLimitMiddleware
from writing_assistant.core.config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="WritingAssistant")

app.add_middleware(BodySizeLimitMiddleware)

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(analyze_router)
app.include_router(statistics_router)
app.include_router(revise_router)
