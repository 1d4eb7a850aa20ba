# topic_sentiment/sentiment_analysis/agent.py
import logging
from typing import Optional

from config import Settings, SentimentConfig, settings as default_settings
from topic_sentiment.llm import GOOGLE_SEARCH, GeminiClient
from topic_sentiment.sentiment_analysis.errors import (
    AnalysisFailed,
    ConfigurationError,
    ContentUnavailable,
    EmptyResponse,
    InvalidInput,
    MalformedResponse,
)
from topic_sentiment.sentiment_analysis.models import ParseFailure, SentimentAnalysis
from topic_sentiment.sentiment_analysis.schema import SENTIMENT_RESPONSE_SCHEMA
from topic_sentiment.sentiment_analysis.utils import (
    build_analysis_prompt,
    is_url,
    looks_like_refusal,
    parse_analysis_response,
)

logger = logging.getLogger(__name__)

CONTENT_UNAVAILABLE_MESSAGE = (
    "Failed to retrieve content from the URL. The AI couldn't access the link, which might be "
    "private, broken, or require a login. Please try a different public URL, or copy and paste "
    "the post's text directly."
)


class SentimentAgent:
    """Runs one topic sentiment analysis: optional URL retrieval, then structured analysis.

    The agent keeps no per-request state; the same instance can serve any
    number of independent calls.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[GeminiClient] = None):
        self.settings = settings or default_settings
        self._client = client

    @property
    def client(self) -> GeminiClient:
        if self._client is None:
            try:
                self._client = GeminiClient(api_key=self.settings.GOOGLE_API_KEY)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        return self._client

    async def resolve_content(self, url: str) -> str:
        """Ask the model to fetch the post at ``url`` and return its raw text."""
        fetched = await self.client.generate_text_response(
            f"URL: {url}",
            model_name=self.settings.GEMINI_RETRIEVAL_MODEL,
            system_instruction=SentimentConfig.RETRIEVAL_SYSTEM_INSTRUCTION,
            tools=[GOOGLE_SEARCH],
        )
        fetched = (fetched or "").strip()
        if not fetched or looks_like_refusal(fetched):
            raise ContentUnavailable(CONTENT_UNAVAILABLE_MESSAGE)
        return fetched

    async def request_analysis(self, content: str, topic: str) -> SentimentAnalysis:
        json_text = await self.client.generate_structured_json(
            build_analysis_prompt(content, topic),
            SENTIMENT_RESPONSE_SCHEMA,
            model_name=self.settings.GEMINI_MODEL,
            temperature=self.settings.ANALYSIS_TEMPERATURE,
        )
        json_text = (json_text or "").strip()
        if not json_text:
            raise EmptyResponse("The model returned an empty response for sentiment analysis.")

        result = parse_analysis_response(json_text)
        if isinstance(result, ParseFailure):
            raise MalformedResponse(result.reason)
        return result.analysis

    async def analyze(self, post_text: str, topic: str) -> SentimentAnalysis:
        if not self.settings.GOOGLE_API_KEY:
            raise ConfigurationError("GOOGLE_API_KEY environment variable not set")

        post_text = (post_text or "").strip()
        topic = (topic or "").strip()
        if not post_text or not topic:
            raise InvalidInput("Please provide both a social media post and a topic to analyze.")

        content = post_text
        try:
            if is_url(post_text):
                logger.info("URL detected. Fetching content...")
                content = await self.resolve_content(post_text)
                logger.info("Content fetched successfully.")

            return await self.request_analysis(content, topic)

        except Exception as e:
            logger.exception(f"Error in sentiment analysis process: {e}")
            raise AnalysisFailed.wrap(e) from e
