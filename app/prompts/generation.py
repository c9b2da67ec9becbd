"""Prompts for the question agent that writes one exam-style Science question."""

from langchain_core.prompts import ChatPromptTemplate
from app.models.topic import TOPIC_CONSTRAINTS


GENERATION_SYSTEM_PROMPT = " ".join([
    "You are a New Zealand Year 10 Science tutor.",
    "Generate ONE Excellence-level (E) question appropriate for Year 10 difficulty.",
    "It must be strictly relevant to the given subject and topic constraints:",
    *TOPIC_CONSTRAINTS,
    'Output JSON of the shape: {{"question":"..."}} and ONLY that JSON.',
])

GENERATION_HUMAN_PROMPT = """Subject: {subject}
Topic: {topic}
Constraints:
- Keep to Year 10 depth.
- Create a single exam-style prompt that requires reasoning/worked steps.
- Do not include the answer.
- Avoid graph images; describe clearly if needed."""


def get_generation_prompt() -> ChatPromptTemplate:
    """Get the prompt template for question generation."""
    return ChatPromptTemplate.from_messages([
        ("system", GENERATION_SYSTEM_PROMPT),
        ("human", GENERATION_HUMAN_PROMPT)
    ])
