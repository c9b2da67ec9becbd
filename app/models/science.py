from pydantic import BaseModel
from typing import Any, Literal, get_args


GradeBand = Literal["Not Achieved", "Achieved", "Merit", "Excellence"]

GRADE_BANDS = get_args(GradeBand)
MAX_SCORE = 8


class GenerateRequest(BaseModel):
    action: Literal["generate"] = "generate"
    subject: str
    topic: str


class GenerateResult(BaseModel):
    question: Any


class GradeRequest(BaseModel):
    action: Literal["grade"] = "grade"
    subject: str
    topic: str
    question: str
    answer: str


class GradeResult(BaseModel):
    # Fields are relayed as the model returned them, even outside GradeBand.
    grade_band: Any
    score: Any
    feedback: Any = ""
    improved_answer: Any = ""


class ErrorResponse(BaseModel):
    error: str
