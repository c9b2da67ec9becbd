from pydantic import BaseModel
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple


# Subjects and the topics a question may be set on, in display order.
ALLOWED_TOPICS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Physics": ("Electricity", "Forces & Motion"),
    "Chemistry": ("Acids & Bases", "Atomic Structure"),
    "Biology": ("Genetics", "Human Body (3 Main Systems)"),
})

# Scope notes given to the model alongside the allow-list.
TOPIC_CONSTRAINTS: Tuple[str, ...] = (
    "- Physics: Electricity OR Forces & Motion",
    "- Chemistry: Acids & Bases OR Atomic Structure (exclude isotopes)",
    "- Biology: Genetics OR the Human Body (focus on 3 main systems)",
)


def is_allowed(subject: Any, topic: Any) -> bool:
    """Check that topic is one of the topics permitted for subject."""
    if not isinstance(subject, str) or not isinstance(topic, str):
        return False
    return topic in ALLOWED_TOPICS.get(subject, ())


class SubjectTopics(BaseModel):
    name: str
    topics: List[str]


class SubjectListResponse(BaseModel):
    subjects: List[SubjectTopics]


def list_subjects() -> SubjectListResponse:
    return SubjectListResponse(subjects=[
        SubjectTopics(name=subject, topics=list(topics))
        for subject, topics in ALLOWED_TOPICS.items()
    ])
