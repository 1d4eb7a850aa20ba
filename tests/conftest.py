import json

import pytest

from config import Settings
from topic_sentiment.sentiment_analysis.agent import SentimentAgent


class FakeGeminiClient:
    """Records every request and replies from scripted queues."""

    def __init__(self, text_replies=None, json_replies=None):
        self.text_replies = list(text_replies or [])
        self.json_replies = list(json_replies or [])
        self.text_calls = []
        self.json_calls = []

    async def generate_text_response(self, prompt, model_name, system_instruction=None, tools=None):
        self.text_calls.append(
            {"prompt": prompt, "model_name": model_name, "system_instruction": system_instruction, "tools": tools}
        )
        reply = self.text_replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def generate_structured_json(self, prompt, response_schema, model_name, temperature=0.2):
        self.json_calls.append(
            {"prompt": prompt, "response_schema": response_schema, "model_name": model_name, "temperature": temperature}
        )
        reply = self.json_replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


VALID_ANALYSIS = {
    "overallSentiment": "Positive",
    "sentimentScore": 0.8,
    "explanation": "The post praises the battery life of the new phone.",
    "keyPhrases": [
        {"phrase": "battery lasts forever", "sentiment": "Positive"},
        {"phrase": "a bit pricey", "sentiment": "Negative"},
    ],
}


@pytest.fixture
def valid_json():
    return json.dumps(VALID_ANALYSIS)


@pytest.fixture
def settings():
    return Settings(
        GOOGLE_API_KEY="test-key",
        GEMINI_MODEL="gemini-2.5-flash",
        GEMINI_RETRIEVAL_MODEL="gemini-2.5-pro",
        ANALYSIS_TEMPERATURE=0.2,
    )


@pytest.fixture
def make_agent(settings):
    def _make(**replies):
        client = FakeGeminiClient(**replies)
        return SentimentAgent(settings, client=client), client
    return _make


@pytest.fixture
def fake_client_cls():
    return FakeGeminiClient
