from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class QuestionType(str, Enum):
    MCQ = "MCQ"
    SHORT = "Short"
    BROAD = "Broad"


class QuestionRecord(BaseModel):
    question: str = Field(..., description="The question text")
    options: List[str] = Field(
        default_factory=list,
        description="Exactly 4 options for MCQ, empty for Short/Broad",
    )
    answer: str = Field(
        default="",
        description="Option letter (A-D) for MCQ, free text otherwise",
    )
    type: QuestionType = Field(..., description="Question type requested by the caller")
