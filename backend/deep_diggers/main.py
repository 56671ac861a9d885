import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from deep_diggers import __version__
from deep_diggers.config import get_settings
from deep_diggers.routes.sessions import router as sessions_router

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = logging.getLogger(__name__)

app = FastAPI(title="Deep Diggers API", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("[app] Bad request body on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(sessions_router, prefix="/api")
# Polling UI; mounted last so /api and /health take precedence.
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
