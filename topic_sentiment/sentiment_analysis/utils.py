# topic_sentiment/sentiment_analysis/utils.py
import json
import logging
from urllib.parse import urlsplit

from pydantic import ValidationError

from config import SentimentConfig
from topic_sentiment.sentiment_analysis.models import (
    ParsedAnalysis,
    ParseFailure,
    ParseResult,
    SentimentAnalysis,
)

logger = logging.getLogger(__name__)


def is_url(text: str) -> bool:
    """True only for absolute http(s) URLs with a host. Never raises."""
    if not isinstance(text, str):
        return False
    candidate = text.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return False
    try:
        parts = urlsplit(candidate)
        # urlsplit rejects unbalanced IPv6 brackets, .port rejects non-numeric ports
        hostname, _port = parts.hostname, parts.port
    except ValueError:
        return False
    return parts.scheme.lower() in SentimentConfig.ALLOWED_URL_SCHEMES and bool(hostname)


def looks_like_refusal(text: str) -> bool:
    # Brittle by nature: depends on the model phrasing its refusal in one of these ways
    lowered = text.lower()
    return any(phrase in lowered for phrase in SentimentConfig.REFUSAL_PHRASES)


def build_analysis_prompt(content: str, topic: str) -> str:
    return f'''
Analyze the sentiment of the following social media post specifically about the topic: "{topic}".
If the topic is not mentioned or clearly implied, state that in the explanation.

Post:
"""
{content}
"""

Provide a detailed analysis based on the schema.
'''


def parse_analysis_response(text: str) -> ParseResult:
    """Decode a structured reply into ParsedAnalysis, or ParseFailure with a reason."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Analysis reply is not valid JSON: {e}")
        return ParseFailure(reason=f"The model returned invalid JSON: {e}")

    if not isinstance(data, dict):
        return ParseFailure(reason=f"Expected a JSON object, got {type(data).__name__}.")

    try:
        analysis = SentimentAnalysis.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Analysis reply does not match the schema: {e}")
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors())
        return ParseFailure(reason=f"The model response did not match the expected schema ({fields}).")

    return ParsedAnalysis(analysis=analysis)
