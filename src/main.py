import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from src.config import get_settings
from src.api import chat
from src.custom_logging import configure_logging
from src.utils.response import create_error_response

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Mock job interviews and final project defenses backed by Gemini.
    """,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    # Cause stays in the server log; the client only sees the generic error
    logging.error(f"Rejected request to {request.url.path}: {jsonable_encoder(exc.errors())}")
    return JSONResponse(
        status_code=500,
        content=create_error_response()
    )

app.include_router(chat.router, tags=["Chat"], prefix="/api")

@app.get("/")
async def root():
    return {"message": "AI Interviewer Server running..."}

@app.get("/health", tags=["Health"])
async def health_check():
    """Health Check Endpoint"""
    current = get_settings()
    return {
        "status": "healthy",
        "services": {
            "api": "up",
            "gemini": "configured" if current.gemini_api_key else "missing_api_key"
        },
    }
