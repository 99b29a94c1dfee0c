"""Service for fetching LeetCode problems and question details."""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import requests
from loguru import logger

from domain.exceptions import FetchError, InvalidPayloadError, LeetCodeError, TransportError
from domain.models import Problem, Question
from domain.parsers import parse_problems, parse_question
from infrastructure.leetcode_client import LeetCodeClient


class ProblemService:
    """Turns LeetCode responses into Problem and Question records."""

    def __init__(self, client: LeetCodeClient):
        """Initialize service with dependencies."""
        self.client = client

    def fetch_problems(
        self, categories: Iterable[str], problems: list[Problem] | None = None
    ) -> list[Problem]:
        """Fetch the listings of several categories into one list."""
        problems = [] if problems is None else problems
        for category in categories:
            self._fetch_category(category, problems)
        logger.info(f"Fetched {len(problems)} problems")
        return problems

    def fetch_problems_concurrently(
        self, categories: Iterable[str], max_workers: int = 4
    ) -> tuple[list[Problem], dict[str, Exception]]:
        """
        Fetch category listings in parallel.

        A failing category does not stop the others; its error is returned
        alongside the problems of the categories that succeeded.

        Returns:
            Problems in category order and a map of category to error
        """
        categories = list(categories)
        logger.debug(f"Fetching {len(categories)} categories with {max_workers} workers")

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [(category, executor.submit(self._fetch_category, category, [])) for category in categories]

        problems: list[Problem] = []
        errors: dict[str, Exception] = {}
        for category, future in futures:
            error = future.exception()
            if error is not None:
                errors[category] = error
                continue
            problems.extend(future.result())

        if errors:
            logger.warning(f"Failed to fetch {len(errors)} of {len(categories)} categories: {', '.join(errors)}")
        return problems, errors

    def fetch_question(self, slug: str) -> Question:
        """Fetch and parse the detail of one question."""
        endpoint = f"question detail for {slug}"
        try:
            response = self.client.get_question_detail(slug)
            return parse_question(_decode_json(response))
        except LeetCodeError as e:
            logger.error(f"Could not fetch/parse {endpoint}: {e}")
            raise FetchError(endpoint, e) from e

    def fill_description(self, problem: Problem) -> Question:
        """Fetch a problem's question detail and store its content as ``desc``."""
        question = self.fetch_question(problem.slug)
        problem.desc = question.content
        return question

    def _fetch_category(self, category: str, problems: list[Problem]) -> list[Problem]:
        endpoint = f"problems of category {category}"
        try:
            response = self.client.get_category_problems(category)
            parse_problems(problems, _decode_json(response))
        except LeetCodeError as e:
            logger.error(f"Could not fetch/parse {endpoint}: {e}")
            raise FetchError(endpoint, e) from e
        return problems


def _decode_json(response: requests.Response) -> Any:
    if not response.ok:
        raise TransportError(
            f"HTTP {response.status_code} from {response.url}",
            response.status_code,
        )
    try:
        return response.json()
    except ValueError as e:
        raise InvalidPayloadError(f"Response from {response.url} is not JSON: {e}") from e
