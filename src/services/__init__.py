from infrastructure.config import Config, Credentials
from infrastructure.leetcode_client import LeetCodeClient
from services.problem import ProblemService


def create_problem_service(
    config: Config | None = None, credentials: Credentials | None = None
) -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    config = config or Config.from_env()
    credentials = credentials or Credentials.from_env()

    return ProblemService(LeetCodeClient.create(config, credentials))


__all__ = ["ProblemService", "create_problem_service"]
