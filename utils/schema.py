"""Request and response schemas for the HTTP API."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from utils.response_format import QuestionRecord


class GenerateQuestionsRequest(BaseModel):
    """Request model for question generation.

    Every field is optional here so that absent values surface as a
    400 "Missing parameters" from the route rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    extracted_text: Optional[str] = Field(default=None, alias="extractedText")
    prompt: Optional[str] = None  # accepted, not yet used by the template
    question_type: Optional[str] = Field(default=None, alias="questionType")
    question_count: Optional[int] = Field(default=None, alias="questionCount")


class GenerateQuestionsResponse(BaseModel):
    questions: List[QuestionRecord]


class UploadFileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    extracted_text: str = Field(..., alias="extractedText")


class ErrorResponse(BaseModel):
    error: str
