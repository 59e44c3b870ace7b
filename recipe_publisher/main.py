# Recipe Publisher API Main Entry Point
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from .deps import get_settings
from .exceptions import PublishError
from .middleware import CORSGuardMiddleware
from .settings import settings
from .routers.publish import limiter, router as publish_router
from .routers.ready import router as ready_router

# Configure structured logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipe_publisher")

app = FastAPI(title="Recipe Publisher API", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(CORSGuardMiddleware, settings_provider=get_settings)


@app.exception_handler(PublishError)
async def publish_error_handler(request: Request, exc: PublishError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "method-not-allowed"}, headers=exc.headers)
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "not-found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Body was not a JSON object; there is no password to check either
    return JSONResponse(status_code=400, content={"error": "bad-request"})


app.include_router(ready_router, prefix="/api", tags=["ready"])
app.include_router(publish_router, prefix="/api", tags=["publish"])
