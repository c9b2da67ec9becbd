"""Prompts for the grading agent that marks a student's answer."""

from langchain_core.prompts import ChatPromptTemplate
from app.models.science import GRADE_BANDS, MAX_SCORE
from app.models.topic import TOPIC_CONSTRAINTS


GRADING_SYSTEM_PROMPT = " ".join([
    "You are a New Zealand Year 10 Science marker.",
    f"Mark using NCEA-style bands ({', '.join(GRADE_BANDS)}) and a score out of {MAX_SCORE}.",
    "Give specific feedback and an improved model answer appropriate for Year 10.",
    "Stay within the exact subject/topic constraints:",
    *TOPIC_CONSTRAINTS[:-1],
    TOPIC_CONSTRAINTS[-1] + ".",
    "Respond ONLY as JSON with fields: grade_band, score, feedback, improved_answer.",
])

GRADING_HUMAN_PROMPT = "\n".join([
    "Subject: {subject}",
    "Topic: {topic}",
    "Question: {question}",
    "StudentAnswer: {answer}",
    "Requirements:",
    f"- Grade band must be one of {', '.join(GRADE_BANDS)}.",
    f"- Score is an integer 0–{MAX_SCORE}.",
    "- Feedback should be concise and actionable.",
    "- Improved answer should fully answer the question at Year 10 E-level.",
])


def get_grading_prompt() -> ChatPromptTemplate:
    """Get the prompt template for answer grading."""
    return ChatPromptTemplate.from_messages([
        ("system", GRADING_SYSTEM_PROMPT),
        ("human", GRADING_HUMAN_PROMPT)
    ])
