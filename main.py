import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from capabilities import probe_capabilities
from db import engine
from errors import QuestionError

# Routers
from routers.health import router as health_router
from routers.questions import router as questions_router

logger = logging.getLogger("wordgame-questions")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # resolve optional-column support once instead of per request
    app.state.capabilities = probe_capabilities(engine)
    yield


app = FastAPI(title="Word Game – Questions API", lifespan=lifespan)

# Allow calls from the Next.js front-end
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuestionError)
async def question_error_handler(request: Request, exc: QuestionError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "invalid request body"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal server error"})


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions/...
app.include_router(health_router)  # /health/...
