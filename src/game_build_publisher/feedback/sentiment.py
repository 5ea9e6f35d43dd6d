"""Keyword-based comment sentiment and feedback reports.

Each positive keyword present adds one and each negative keyword
present subtracts one, regardless of how often it appears.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

POSITIVE_WORDS = (
    "love", "great", "awesome", "amazing", "good", "fun",
    "thanks", "cool", "nice", "perfect", "excellent",
)
NEGATIVE_WORDS = (
    "bug", "broken", "bad", "hate", "terrible", "awful", "crash",
    "error", "fix", "problem", "issue", "slow", "lag",
)
REPORT_KEYWORDS = ("bug", "crash", "good", "love", "hard", "easy", "help", "level", "graphics")

COMMENT_PREVIEW_LENGTH = 120
REPORT_LISTED_COMMENTS = 10


@dataclass(frozen=True)
class Sentiment:
    label: str  # 'positive', 'negative' or 'neutral'
    score: int


@dataclass(frozen=True)
class SentimentBreakdown:
    positive: int
    neutral: int
    negative: int
    keywords: list[str]

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative


def analyze_sentiment(text: str) -> Sentiment:
    """Score a piece of free text.

    Example:
        >>> analyze_sentiment("Great game but it has a bug")
        Sentiment(label='neutral', score=0)
    """
    lower = text.lower()
    score = sum(1 for word in POSITIVE_WORDS if word in lower)
    score -= sum(1 for word in NEGATIVE_WORDS if word in lower)

    if score > 0:
        return Sentiment("positive", score)
    if score < 0:
        return Sentiment("negative", score)
    return Sentiment("neutral", 0)


def sentiment_breakdown(comments: Sequence[dict[str, Any]]) -> SentimentBreakdown:
    """Count positive/neutral/negative comments and spot common keywords."""
    positive = neutral = negative = 0
    for comment in comments:
        score = analyze_sentiment(comment.get("body") or "").score
        if score > 0:
            positive += 1
        elif score < 0:
            negative += 1
        else:
            neutral += 1

    all_text = " ".join(comment.get("body") or "" for comment in comments).lower()
    keywords = [word for word in REPORT_KEYWORDS if word in all_text]
    return SentimentBreakdown(positive, neutral, negative, keywords)


def _format_date(value: str | None) -> str:
    if not value:
        return "unknown date"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


def format_comment(comment: dict[str, Any]) -> list[str]:
    """Render one comment as a header line and a quoted preview."""
    user = (comment.get("user") or {}).get("username") or "Anonymous"
    body = comment.get("body") or ""
    sentiment = analyze_sentiment(body)

    preview = body[:COMMENT_PREVIEW_LENGTH]
    if len(body) > COMMENT_PREVIEW_LENGTH:
        preview += "..."

    return [
        f"@{user} · {_format_date(comment.get('created_at'))} [{sentiment.label}]",
        f'   "{preview}"',
    ]


def format_breakdown(breakdown: SentimentBreakdown) -> list[str]:
    if breakdown.total == 0:
        return ["No comments to analyze"]

    def pct(count: int) -> str:
        return f"{count / breakdown.total * 100:.0f}%"

    lines = [
        f"Sentiment Analysis ({breakdown.total} comments):",
        f"   Positive: {breakdown.positive} ({pct(breakdown.positive)})",
        f"   Neutral:  {breakdown.neutral} ({pct(breakdown.neutral)})",
        f"   Negative: {breakdown.negative} ({pct(breakdown.negative)})",
    ]
    if breakdown.keywords:
        lines.append(f"Common keywords: {', '.join(breakdown.keywords)}")
    return lines


def format_ratings(ratings: dict[str, Any]) -> list[str]:
    average = ratings.get("average")
    return [
        f'Ratings for "{ratings.get("title", "")}":',
        f"   Average: {average if average is not None else 'N/A'}/5",
        f"   Total ratings: {ratings.get('rating_count', 0)}",
        f"   Views: {ratings.get('views_count', 0)}",
        f"   Downloads: {ratings.get('downloads_count', 0)}",
        f"   Purchases: {ratings.get('purchases_count', 0)}",
    ]


def format_comments(comments: Sequence[dict[str, Any]]) -> list[str]:
    lines = [f"Recent Comments ({len(comments)}):"]
    for comment in comments:
        lines += format_comment(comment)
    return lines


def feedback_report(
    comments: Sequence[dict[str, Any]],
    listed: int = REPORT_LISTED_COMMENTS,
) -> list[str]:
    """The first `listed` comments, then sentiment totals over all of them."""
    return format_comments(comments[:listed]) + [""] + format_breakdown(sentiment_breakdown(comments))
