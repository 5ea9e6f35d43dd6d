"""itch.io feedback helpers.

Read-only access to game stats and comments, view and download
analytics, and a coarse keyword sentiment signal over comment text.
"""

from .analytics import format_game_list, format_game_stats, format_price
from .client import FeedbackApiError, ItchClient
from .sentiment import (
    Sentiment,
    SentimentBreakdown,
    analyze_sentiment,
    feedback_report,
    format_breakdown,
    format_comment,
    format_comments,
    format_ratings,
    sentiment_breakdown,
)

__all__ = [
    "FeedbackApiError",
    "ItchClient",
    "Sentiment",
    "SentimentBreakdown",
    "analyze_sentiment",
    "feedback_report",
    "format_breakdown",
    "format_comment",
    "format_comments",
    "format_game_list",
    "format_game_stats",
    "format_price",
    "format_ratings",
    "sentiment_breakdown",
]
