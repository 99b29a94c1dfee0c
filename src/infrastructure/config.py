"""Runtime configuration and credentials for the LeetCode client."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://leetcode.com"


def default_urls(base: str = DEFAULT_BASE_URL) -> dict[str, str]:
    """URL templates keyed by name; ``$category`` and ``$slug`` are placeholders."""
    base = base.rstrip("/")
    return {
        "base": base,
        "graphql": f"{base}/graphql",
        "problems": f"{base}/api/problems/$category/",
        "problem": f"{base}/problems/$slug/description/",
    }


@dataclass(frozen=True)
class Config:
    """URL table and transport timeouts."""

    urls: dict[str, str] = field(default_factory=default_urls)
    connect_timeout: float = 30.0
    # None waits for the response indefinitely
    read_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()
        read_timeout = os.getenv("LEETCODE_READ_TIMEOUT")
        return cls(
            urls=default_urls(os.getenv("LEETCODE_BASE_URL", DEFAULT_BASE_URL)),
            connect_timeout=float(os.getenv("LEETCODE_CONNECT_TIMEOUT", "30")),
            read_timeout=float(read_timeout) if read_timeout else None,
        )

    def url(self, name: str, **substitutions: str) -> str:
        """Fill a URL template, e.g. ``url("problems", category="algorithms")``."""
        template = self.urls[name]
        for key, value in substitutions.items():
            template = template.replace(f"${key}", value)
        return template


@dataclass(frozen=True)
class Credentials:
    """Session cookie and CSRF token of a signed-in browser session."""

    session: str
    csrf: str

    @classmethod
    def from_env(cls) -> "Credentials":
        load_dotenv()
        return cls(
            session=os.getenv("LEETCODE_SESSION", ""),
            csrf=os.getenv("LEETCODE_CSRFTOKEN", ""),
        )

    def __str__(self) -> str:
        return f"LEETCODE_SESSION={self.session};csrftoken={self.csrf};"

    def __repr__(self) -> str:
        return "Credentials(session=***, csrf=***)"
