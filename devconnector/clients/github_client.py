from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from devconnector.core.config import settings
from devconnector.core.errors import NotFoundError, ServiceUnavailableError


class GitHubClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.GITHUB_API_URL
        headers = {
            "User-Agent": "devconnector",
            "Accept": "application/vnd.github+json",
        }
        if token:
            headers["Authorization"] = f"token {token}"
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=settings.GITHUB_TIMEOUT,
            transport=transport,
        )

    async def get_repos(self, username: str, limit: int = 5) -> List[Dict[str, Any]]:
        """Get up to ``limit`` public repositories of a GitHub user, sorted by creation date."""
        try:
            response = await self.client.get(
                f"/users/{username}/repos",
                params={"per_page": limit, "sort": "created:asc"},
            )
        except httpx.RequestError as e:
            logger.error(f"GitHub request for {username} failed: {str(e)}")
            raise ServiceUnavailableError("Could not reach GitHub")

        if response.status_code != 200:
            logger.warning(f"GitHub returned {response.status_code} for {username}")
            raise NotFoundError("No Github profile found")
        return response.json()

    async def close(self):
        """
        Close the underlying HTTP client.
        """
        await self.client.aclose()


# Global instance
github_client = GitHubClient(token=settings.GITHUB_TOKEN)


def get_github_client() -> GitHubClient:
    return github_client
