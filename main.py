"""Main entry point for the Quiz Relay API."""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional, Union

import uvicorn
from fastapi import Body, Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings
from services.extraction_service import ExtractionService
from services.generate_question_service import GenerateQuestionService
from services.service import (
    get_extraction_service,
    get_generate_question_service,
)
from utils.exceptions import (
    LLMRateLimitError,
    LLMServiceError,
    UnsupportedFileTypeError,
)
from utils.response_format import QuestionType
from utils.schema import (
    ErrorResponse,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    UploadFileResponse,
)

from logger import get_logger

# Initialize logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the process-wide services once
    get_extraction_service()
    get_generate_question_service()
    logger.info("Quiz Relay API started")
    yield


# Initialize FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Quiz Relay API",
    description="""
    ## Quiz Relay API

    Turns uploaded study material into practice questions.

    ### Features:
    * Extract text from PDFs and images (OCR)
    * Generate MCQ, short-answer or broad questions with Gemini

    ### Documentation:
    * **Swagger UI**: [/docs](/docs)
    * **ReDoc**: [/redoc](/redoc)
    """,
    version="1.0.0",
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid parameters"})


@app.get("/ping")
async def ping():
    return {"status": "alive"}


# Endpoints
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Quiz Relay API",
        "documentation": {"swagger_ui": "/docs", "redoc": "/redoc"},
        "endpoints": {
            "POST /api/upload-file": "Extract text from a PDF or image",
            "POST /api/generate-questions": "Generate questions from extracted text",
            "GET /health": "Health check",
        },
    }


@app.post(
    "/api/upload-file",
    response_model=UploadFileResponse,
    responses=ERROR_RESPONSES,
)
async def upload_file(
    file: Union[UploadFile, str, None] = File(None),
    service: ExtractionService = Depends(get_extraction_service),
):
    """Extract the text of an uploaded document.

    - **file**: PDF (text layer) or image (OCR)
    """
    # a plain text value in the file field is not an upload
    if not isinstance(file, StarletteUploadFile):
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        data = await file.read()
        extracted_text = await service.extract_text(data, file.content_type)
    except UnsupportedFileTypeError:
        raise HTTPException(status_code=400, detail="Unsupported file type")
    except Exception as e:
        logger.exception(f"File processing failed for {file.filename}: {e}")
        raise HTTPException(status_code=500, detail="Error processing file")
    finally:
        await file.close()

    logger.info(f"Extracted {len(extracted_text)} characters from {file.filename}")
    return UploadFileResponse(extracted_text=extracted_text)


@app.post(
    "/api/generate-questions",
    response_model=GenerateQuestionsResponse,
    responses={**ERROR_RESPONSES, 429: {"model": ErrorResponse}},
)
async def generate_questions(
    request: Optional[GenerateQuestionsRequest] = Body(None),
    service: GenerateQuestionService = Depends(get_generate_question_service),
):
    """Generate questions from previously extracted text.

    - **extractedText**: Source content
    - **prompt**: Optional steering text (reserved)
    - **questionType**: 'MCQ', 'Short' or 'Broad'
    - **questionCount**: Number of questions to generate
    """
    if (
        request is None
        or not request.extracted_text
        or not request.question_type
        or not request.question_count
    ):
        raise HTTPException(status_code=400, detail="Missing parameters")

    try:
        question_type = QuestionType(request.question_type)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid parameters")
    if request.question_count < 1:
        raise HTTPException(status_code=400, detail="Invalid parameters")

    try:
        questions = await service.generate_questions(
            extracted_text=request.extracted_text,
            question_type=question_type,
            question_count=request.question_count,
            prompt=request.prompt,
        )
    except LLMRateLimitError:
        raise HTTPException(
            status_code=429,
            detail="Rate limit exceeded for Gemini API. Please try again later.",
        )
    except Exception as e:
        logger.exception(f"Error generating questions with Gemini: {e}")
        raise HTTPException(status_code=500, detail="Error generating questions")

    return GenerateQuestionsResponse(questions=questions)


@app.get("/health")
async def health_check(
    service: GenerateQuestionService = Depends(get_generate_question_service),
):
    """Health check endpoint. `llm` reports whether Gemini is reachable."""
    try:
        llm_healthy = await asyncio.to_thread(service.llm_service.health)
    except LLMServiceError as e:
        logger.warning(f"LLM service unavailable: {e}")
        llm_healthy = False

    return {
        "status": "healthy",
        "llm": llm_healthy,
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
