# topic_sentiment/sentiment_analysis/schema.py
from typing import Any, Dict

from topic_sentiment.sentiment_analysis.models import Sentiment

SENTIMENT_VALUES = [s.value for s in Sentiment]

# Gemini's OpenAPI subset; mirrors SentimentAnalysis field for field
SENTIMENT_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "overallSentiment": {
            "type": "string",
            "enum": SENTIMENT_VALUES,
            "description": "The overall sentiment of the post regarding the topic.",
        },
        "sentimentScore": {
            "type": "number",
            "description": "A score from -1.0 (very negative) to 1.0 (very positive) representing the sentiment.",
        },
        "explanation": {
            "type": "string",
            "description": "A detailed explanation for the sentiment analysis, referencing parts of the post.",
        },
        "keyPhrases": {
            "type": "array",
            "description": "A list of key phrases from the post that contribute to the sentiment.",
            "items": {
                "type": "object",
                "properties": {
                    "phrase": {
                        "type": "string",
                        "description": "The specific phrase from the post.",
                    },
                    "sentiment": {
                        "type": "string",
                        "enum": SENTIMENT_VALUES,
                        "description": "The sentiment of this specific phrase.",
                    },
                },
                "required": ["phrase", "sentiment"],
            },
        },
    },
    "required": ["overallSentiment", "sentimentScore", "explanation", "keyPhrases"],
}
