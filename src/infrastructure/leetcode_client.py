"""Client for the LeetCode endpoints used by the problem service."""

import requests
from loguru import logger

from infrastructure.config import Config, Credentials
from infrastructure.graphql import GraphQLPayload
from infrastructure.http_client import HTTPClient, Method, Request


def build_default_headers(config: Config, credentials: Credentials) -> dict[str, str]:
    """Authentication and origin headers sent with every request."""
    return {
        "Cookie": str(credentials),
        "x-csrftoken": credentials.csrf,
        "x-requested-with": "XMLHttpRequest",
        "Origin": config.urls["base"],
    }


class LeetCodeClient:
    """Builds and sends the category listing and question detail requests."""

    def __init__(self, config: Config, http_client: HTTPClient):
        self.config = config
        self.http_client = http_client

    @classmethod
    def create(cls, config: Config, credentials: Credentials) -> "LeetCodeClient":
        """Build a client with its own HTTP session."""
        logger.debug("Building LeetCode client...")
        http_client = HTTPClient(
            build_default_headers(config, credentials),
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
        return cls(config, http_client)

    def build_category_problems_request(self, category: str) -> Request:
        return Request(
            name="get_category_problems",
            url=self.config.url("problems", category=category),
            method=Method.GET,
        )

    def build_question_detail_request(self, slug: str) -> Request:
        return Request(
            name="get_question_detail",
            url=self.config.urls["graphql"],
            method=Method.POST,
            json=GraphQLPayload.question_detail(slug),
            referer=self.config.url("problem", slug=slug),
        )

    def get_category_problems(self, category: str) -> requests.Response:
        """Fetch the raw problem listing of a category."""
        return self.http_client.send(self.build_category_problems_request(category))

    def get_question_detail(self, slug: str) -> requests.Response:
        """Fetch the raw detail of one question."""
        return self.http_client.send(self.build_question_detail_request(slug))

    def close(self) -> None:
        self.http_client.close()
