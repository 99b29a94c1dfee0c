"""Blocking HTTP client shared by all LeetCode endpoints."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import requests
from loguru import logger
from pydantic import BaseModel
from requests.adapters import HTTPAdapter

from domain.exceptions import SerializationError, TransportError


class Method(str, Enum):
    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class Request:
    """Declarative description of one endpoint call."""

    name: str
    url: str
    method: Method = Method.GET
    json: BaseModel | None = None
    # Defaults to the request URL itself
    referer: str | None = None
    info: bool = False


class HTTPClient:
    """Dispatches Requests with the session's default headers."""

    def __init__(
        self,
        default_headers: Mapping[str, str],
        connect_timeout: float = 30.0,
        read_timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize client.

        Args:
            default_headers: Headers sent with every request (auth, origin)
            connect_timeout: Seconds allowed to establish a connection
            read_timeout: Seconds allowed between response bytes, None to wait forever
            session: Pre-built session, mainly for tests
        """
        self._default_headers = MappingProxyType(dict(default_headers))
        self.timeout = (connect_timeout, read_timeout)
        self.session = session if session is not None else self._build_session()

    @staticmethod
    def _build_session() -> requests.Session:
        logger.debug("Building requests session...")
        session = requests.Session()
        session.headers["Accept-Encoding"] = "gzip, deflate"
        adapter = HTTPAdapter(pool_connections=4, pool_maxsize=8)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    @property
    def default_headers(self) -> Mapping[str, str]:
        return self._default_headers

    def headers(self, referer: str) -> dict[str, str]:
        """Default headers plus the given Referer."""
        headers = dict(self._default_headers)
        headers["Referer"] = referer
        return headers

    def send(self, request: Request) -> requests.Response:
        """
        Send a request and return the raw response.

        The response is not inspected; status handling and decoding are up to
        the caller.
        """
        logger.debug(f"Running leetcode::{request.name}...")
        if request.info:
            logger.info(f"Downloading {request.name} deps...")

        headers = self.headers(request.referer if request.referer is not None else request.url)

        body = None
        if request.method is Method.POST and request.json is not None:
            body = self._encode(request)
            headers["Content-Type"] = "application/json"

        try:
            return self.session.request(
                request.method.value,
                request.url,
                headers=headers,
                data=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            response = getattr(e, "response", None)
            status = response.status_code if response is not None else None
            raise TransportError(f"{request.name} request to {request.url} failed: {e}", status) from e

    @staticmethod
    def _encode(request: Request) -> bytes:
        try:
            return request.json.model_dump_json(by_alias=True).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode {request.name} body: {e}") from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
