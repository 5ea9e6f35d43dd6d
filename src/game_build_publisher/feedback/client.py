"""Minimal itch.io API client.

Only the read-only endpoints the feedback report needs. The API key is
passed in explicitly; reading it from the environment is the CLI's job.
"""

from typing import Any

import requests

from ..core.errors import PublishError

API_BASE_URL = "https://api.itch.io"
DEFAULT_TIMEOUT = 10


class FeedbackApiError(PublishError):
    """The itch.io API returned an error or an unexpected payload."""


class ItchClient:
    """Read-only client for game stats and comments.

    Example:
        >>> client = ItchClient(api_key="...")
        >>> game = client.get_game("12345")
        >>> game["title"]
        'My Game'
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if not api_key:
            raise ValueError("An itch.io API key is required")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, endpoint: str) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = self.session.get(
                url,
                headers={"Authorization": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FeedbackApiError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise FeedbackApiError(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise FeedbackApiError(f"Invalid JSON from {url}") from e

        if not isinstance(payload, dict):
            raise FeedbackApiError(f"Unexpected payload from {url}")
        return payload

    def get_game(self, game_id: str) -> dict[str, Any]:
        """Fetch a single game's stats (views, downloads, rating, ...)."""
        return self._get(f"/games/{game_id}").get("game", {})

    def list_games(self) -> list[dict[str, Any]]:
        """List every game owned by the API key's account."""
        return self._get("/games").get("games", [])

    def get_comments(self, game_id: str, limit: int = 20) -> list[dict[str, Any]]:
        """Fetch up to `limit` of a game's most recent comments."""
        comments = self._get(f"/games/{game_id}/comments").get("comments", [])
        return comments[:limit]

    def get_ratings(self, game_id: str) -> dict[str, Any]:
        """Rating stats for a game.

        The API reports rating on a 0-100 scale; average is converted to
        stars out of 5.
        """
        game = self.get_game(game_id)
        rating = game.get("rating")
        return {
            "title": game.get("title", ""),
            "average": round(rating / 20, 1) if rating else None,
            "rating_count": game.get("rating_count") or 0,
            "views_count": game.get("views_count") or 0,
            "downloads_count": game.get("downloads_count") or 0,
            "purchases_count": game.get("purchases_count") or 0,
        }
