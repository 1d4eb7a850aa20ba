# topic_sentiment/sentiment_analysis/models.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Union


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    MIXED = "Mixed"


class SentimentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_text: str = Field(..., alias="postText", description="Social media post text or a public URL to it")
    topic: str = Field(..., description="Topic the sentiment is measured against")


class KeyPhrase(BaseModel):
    phrase: str = Field(..., min_length=1, description="The specific phrase from the post.")
    sentiment: Sentiment = Field(..., description="The sentiment of this specific phrase.")


class SentimentAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_sentiment: Sentiment = Field(
        ..., alias="overallSentiment", description="The overall sentiment of the post regarding the topic."
    )
    sentiment_score: float = Field(
        ..., alias="sentimentScore", strict=True, ge=-1.0, le=1.0,
        description="A score from -1.0 (very negative) to 1.0 (very positive) representing the sentiment."
    )
    explanation: str = Field(
        ..., description="A detailed explanation for the sentiment analysis, referencing parts of the post."
    )
    key_phrases: List[KeyPhrase] = Field(
        ..., alias="keyPhrases",
        description="A list of key phrases from the post that contribute to the sentiment."
    )


class ErrorDetail(BaseModel):
    code: str
    message: str


# ────────────────────── PARSE RESULT (tagged variant) ──────────────────────
class ParsedAnalysis(BaseModel):
    status: Literal["ok"] = "ok"
    analysis: SentimentAnalysis


class ParseFailure(BaseModel):
    status: Literal["error"] = "error"
    reason: str


ParseResult = Annotated[Union[ParsedAnalysis, ParseFailure], Field(discriminator="status")]
