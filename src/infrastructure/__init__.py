from .config import Config, Credentials
from .http_client import HTTPClient, Method, Request
from .leetcode_client import LeetCodeClient

__all__ = [
    "Config",
    "Credentials",
    "HTTPClient",
    "LeetCodeClient",
    "Method",
    "Request",
]
