"""View and download stats for the games behind an API key."""

from collections.abc import Sequence
from typing import Any


def format_price(cents: int) -> str:
    """Render an itch.io price in cents as dollars.

    Example:
        >>> format_price(499)
        '$4.99'
    """
    return f"${cents / 100:.2f}"


def format_game_stats(game: dict[str, Any]) -> list[str]:
    """Stats block for a single game; the price line only appears for paid games."""
    lines = [
        game.get("title", ""),
        f"   Views: {game.get('views_count') or 0}",
        f"   Downloads: {game.get('downloads_count') or 0}",
        f"   Purchases: {game.get('purchases_count') or 0}",
    ]
    if game.get("price"):
        lines.append(f"   Price: {format_price(game['price'])}")
    return lines


def format_game_list(games: Sequence[dict[str, Any]]) -> list[str]:
    lines = [f"Found {len(games)} game(s):", ""]
    for game in games:
        lines.append(f"{game.get('title', '')} (ID: {game.get('id')})")
        lines.append(
            f"   Views: {game.get('views_count') or 0} | Downloads: {game.get('downloads_count') or 0}"
        )
    return lines
