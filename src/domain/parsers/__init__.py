"""Parsers turning LeetCode JSON payloads into domain records."""

from .problem_list import acceptance_rate, parse_problems
from .question_detail import parse_question

__all__ = [
    "acceptance_rate",
    "parse_problems",
    "parse_question",
]
