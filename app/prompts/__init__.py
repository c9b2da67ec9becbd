from app.prompts.generation import get_generation_prompt
from app.prompts.grading import get_grading_prompt

__all__ = [
    "get_generation_prompt",
    "get_grading_prompt",
]
