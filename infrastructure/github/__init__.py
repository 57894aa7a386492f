"""GitHub REST API layer"""

from infrastructure.github.github_client import GitHubClient

__all__ = ["GitHubClient"]
