"""Shared record types and fixtures for converter and integration tests.

The course/evaluation shapes mirror a small grading domain: a Course holds
EvalItems, each with an optional EvalType.  Field order is deliberately not
alphabetical so ordering bugs surface in the serialized text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pytest


class EvalType(Enum):
    TEST = auto()
    PROJECT = auto()
    EXAM = auto()


@dataclass
class EvalItem:
    name: str
    percentage: float
    mandatory: bool
    type: EvalType | None


@dataclass
class Course:
    name: str
    credits: int
    evaluation: list[EvalItem]


COURSE_JSON = (
    '{"name":"PA","credits":6,"evaluation":['
    '{"name":"quizzes","percentage":0.2,"mandatory":false,"type":null},'
    '{"name":"project","percentage":0.8,"mandatory":true,"type":"PROJECT"}]}'
)


@pytest.fixture
def course() -> Course:
    """The reference course with two evaluation items."""
    return Course(
        "PA",
        6,
        [
            EvalItem("quizzes", 0.2, False, None),
            EvalItem("project", 0.8, True, EvalType.PROJECT),
        ],
    )


@pytest.fixture
def course_json() -> str:
    """Exact compact JSON text expected for the ``course`` fixture."""
    return COURSE_JSON
