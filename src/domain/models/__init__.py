"""Domain models package."""

from .problem import CodeDefinition, MetaData, MetaParam, Problem, Question, Stats

__all__ = [
    "CodeDefinition",
    "MetaData",
    "MetaParam",
    "Problem",
    "Question",
    "Stats",
]
