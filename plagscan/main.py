import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from plagscan.config import settings
from plagscan.errors import InsufficientSources, InvalidInput
from plagscan.logging_config import get_logger, setup_logging
from plagscan.models import CheckRequest, ErrorResponse, PlagiarismResponse
from plagscan.plagiarism_checker import PlagiarismChecker, validate_content

setup_logging()
logger = get_logger('api')

app = FastAPI(
    title="Plagiarism Checker API",
    description="Lexical plagiarism scoring against web sources",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

plagiarism_checker = PlagiarismChecker()
started_at = time.monotonic()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = ErrorResponse(message=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    body = ErrorResponse(message=message)
    return JSONResponse(status_code=400, content=body.model_dump())


ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 404, 500)}


@app.get("/test")
async def test():
    return {
        "status": "success",
        "message": "API is working!",
        "timestamp": _now()
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "uptime": time.monotonic() - started_at,
        "timestamp": _now()
    }


@app.get("/plagiarism", response_model=PlagiarismResponse, responses=ERROR_RESPONSES)
async def check_plagiarism(content: Optional[str] = Query(None)):
    """
    Search the web for the submitted content and score it against what comes back
    """
    try:
        report = await plagiarism_checker.check_text(content)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InsufficientSources as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error in plagiarism check")
        raise HTTPException(status_code=500, detail="Internal server error")

    return PlagiarismResponse(data=report)


@app.post("/plagiarism", response_model=PlagiarismResponse, responses=ERROR_RESPONSES)
async def check_against_candidates(request: CheckRequest):
    """
    Score the submitted content against caller-supplied candidate documents
    """
    try:
        validate_content(request.content)
        report = await plagiarism_checker.score_against_candidates(
            request.content, request.candidates
        )
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InsufficientSources as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error in plagiarism check")
        raise HTTPException(status_code=500, detail="Internal server error")

    return PlagiarismResponse(data=report)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
