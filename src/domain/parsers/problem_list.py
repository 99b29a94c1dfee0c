"""Parser for the category listing endpoint (``/api/problems/<category>/``)."""

import math
from typing import Any

from loguru import logger

from domain.extractor import Field, narrow_int32
from domain.models import Problem


def parse_problems(problems: list[Problem], payload: Any) -> int:
    """
    Parse a category listing and append its problems to ``problems``.

    Entries are buffered and only appended once every entry parsed, so a
    failing payload leaves ``problems`` untouched.

    Returns:
        Number of problems appended.
    """
    root = Field(payload)
    category = root.get("category_slug").as_str()

    parsed = [_parse_entry(category, entry) for entry in root.get("stat_status_pairs").items()]

    problems.extend(parsed)
    logger.debug(f"Parsed {len(parsed)} problems in category {category}")
    return len(parsed)


def _parse_entry(category: str, entry: Field) -> Problem:
    stat = entry.get("stat")

    return Problem(
        category=category,
        fid=narrow_int32(stat.get("frontend_question_id")),
        id=narrow_int32(stat.get("question_id")),
        level=narrow_int32(entry.get("difficulty").get("level")),
        locked=entry.get("paid_only").as_bool(),
        name=stat.get("question__title").as_str(),
        percent=acceptance_rate(
            stat.get("total_acs").as_float(),
            stat.get("total_submitted").as_float(),
        ),
        slug=stat.get("question__title_slug").as_str(),
        starred=entry.get("is_favor").as_bool(),
        status=entry.get("status", None).as_str("Null"),
    )


def acceptance_rate(total_acs: float, total_submitted: float) -> float:
    """Percentage of accepted submissions.

    With no submissions the result is not finite (nan for 0/0, inf otherwise).
    """
    if total_submitted == 0:
        rate = math.nan if total_acs == 0 else math.copysign(math.inf, total_acs)
        logger.warning(f"No submissions recorded, acceptance rate is {rate}")
        return rate
    return total_acs / total_submitted * 100.0
