"""Domain models for LeetCode problems."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Problem:
    """One row of a category listing."""

    category: str
    fid: int
    id: int
    level: int
    locked: bool
    name: str
    percent: float
    slug: str
    starred: bool
    status: str = "Null"
    # Filled in by a later detail fetch
    desc: str = ""

    @property
    def attempted(self) -> bool:
        return self.status != "Null"


@dataclass(frozen=True)
class Stats:
    """Acceptance statistics of a question."""

    total_accepted: str
    total_submission: str
    total_accepted_raw: int
    total_submission_raw: int
    ac_rate: str


@dataclass(frozen=True)
class CodeDefinition:
    """Starter code for one language."""

    value: str
    text: str
    default_code: str


@dataclass(frozen=True)
class MetaParam:
    name: str
    type: str


@dataclass
class MetaData:
    """Function signature metadata of a question."""

    name: str | None = None
    params: list[MetaParam] = field(default_factory=list)
    return_type: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass
class Question:
    """Full detail of one problem."""

    content: str
    stats: Stats
    defs: list[CodeDefinition]
    case: str
    metadata: MetaData
    test: bool
    t_content: str = ""

    def code_definition(self, lang: str) -> CodeDefinition | None:
        """Return the starter code for a language slug, if offered."""
        return next((d for d in self.defs if d.value == lang), None)
