from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from writing_assistant.core import config

class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        try:
            if cl is not None and int(cl) > config.MAX_BODY_BYTES:
                return JSONResponse(status_code=413, content={"detail": "Text too large"})
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Bad Content-Length"})
        return await call_next(request)
