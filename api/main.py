#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for the Notice & MOM generator.

Usage:
    # Start server
    uvicorn api.main:app --host 0.0.0.0 --port 8000

    # Or run directly
    python -m api.main

Key Endpoints:
    POST /api/notice - Generate Notice (RTF + text)
    POST /api/mom - Generate Minutes of Meeting (RTF + text, optional AI text)
    POST /api/validate/notice, /api/validate/mom - Validate without generating
    GET /api/providers - Available AI providers
    GET /api/health - Liveness check

Configuration:
    Environment variables:
    - GOOGLE_API_KEY / OPENAI_API_KEY: AI provider keys (optional)
    - AI_PROVIDER: default provider (gemini | openai)
"""

from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_providers import MinutesTextSource, list_providers
from config.logging_config import get_logger
from config.settings import settings
from docgen import (
    DocumentValidationError,
    GeneratedDocuments,
    generate_mom_documents,
    generate_notice_documents,
    validate_mom,
    validate_notice,
)

from .models import (
    DocumentPayload,
    DocumentsResponse,
    MomRequest,
    NoticeRequest,
    ProviderSummary,
    ValidationErrorResponse,
)

logger = get_logger(__name__)


app = FastAPI(
    title="Notice & MOM Generator API",
    description="Departmental meeting notices and Minutes of Meeting as RTF and plain text",
    version="1.0.0"
)

# CORS middleware - Restricted to allowed origins
# Add more origins as needed for production
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",  # Vite dev server for the form UI
    "http://localhost:8000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8000",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(DocumentValidationError)
async def validation_exception_handler(request: Request, exc: DocumentValidationError):
    """Report every missing field, not just the first"""
    return JSONResponse(
        status_code=422,
        content=ValidationErrorResponse(errors=exc.errors).model_dump()
    )


def build_text_source(provider: Optional[str], api_key: Optional[str]) -> MinutesTextSource:
    """
    Alternate text source for a request.

    A source without config is still returned: generation then raises
    AIConfigurationError and the service falls back to the template text.
    """
    try:
        config = settings.get_ai_config(provider, api_key)
    except ValueError as e:
        logger.warning(f"AI text source not configured: {e}")
        config = None
    return MinutesTextSource(config, point_max_tokens=settings.point_max_tokens)


def to_response(documents: GeneratedDocuments) -> DocumentsResponse:
    now = datetime.now()
    return DocumentsResponse(
        rtf=DocumentPayload(
            content=documents.rtf.content,
            filename=documents.rtf.filename(now),
            media_type=documents.rtf.media_type,
        ),
        text=DocumentPayload(
            content=documents.text.content,
            filename=documents.text.filename(now),
            media_type=documents.text.media_type,
        ),
        warnings=documents.warnings,
        text_source=documents.text_source,
    )


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/providers", response_model=List[ProviderSummary])
async def providers():
    return [
        ProviderSummary(
            id=info.type.value,
            name=info.name,
            description=info.description,
            default_model=info.default_model,
            models=list(info.models.keys()),
            env_key=info.env_key,
        )
        for info in list_providers()
    ]


@app.post("/api/notice", response_model=DocumentsResponse)
async def create_notice(payload: NoticeRequest):
    documents = generate_notice_documents(payload.to_record())
    return to_response(documents)


@app.post("/api/mom", response_model=DocumentsResponse)
async def create_mom(payload: MomRequest):
    text_source = build_text_source(payload.provider, payload.api_key) if payload.use_ai else None
    documents = await generate_mom_documents(payload.to_record(), text_source)
    return to_response(documents)


@app.post("/api/validate/notice", response_model=ValidationErrorResponse)
async def check_notice(payload: NoticeRequest):
    return validate_notice(payload.to_record()).to_dict()


@app.post("/api/validate/mom", response_model=ValidationErrorResponse)
async def check_mom(payload: MomRequest):
    return validate_mom(payload.to_record()).to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
