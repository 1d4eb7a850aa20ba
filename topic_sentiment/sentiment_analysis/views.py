# topic_sentiment/sentiment_analysis/views.py
from fastapi import APIRouter, Depends, HTTPException
from .errors import AnalysisError, ErrorKind
from .models import ErrorDetail, SentimentRequest, SentimentAnalysis
from topic_sentiment.sentiment_analysis.agent import SentimentAgent

router = APIRouter(prefix="/sentiment", tags=["Sentiment Analysis"])

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.CONTENT_UNAVAILABLE: 422,
    ErrorKind.EMPTY_RESPONSE: 502,
    ErrorKind.MALFORMED_RESPONSE: 502,
    ErrorKind.CONFIGURATION_ERROR: 500,
    ErrorKind.UNKNOWN_ERROR: 500,
}

_agent = None


def get_agent() -> SentimentAgent:
    global _agent
    if _agent is None:
        _agent = SentimentAgent()
    return _agent


def _error_response(error: AnalysisError) -> HTTPException:
    detail = ErrorDetail(code=error.kind.value, message=error.message)
    return HTTPException(STATUS_BY_KIND.get(error.kind, 500), detail.model_dump())


@router.post("/", response_model=SentimentAnalysis)
async def sentiment_llm(req: SentimentRequest, agent: SentimentAgent = Depends(get_agent)):
    if not req.post_text.strip() or not req.topic.strip():
        raise HTTPException(400, ErrorDetail(
            code=ErrorKind.INVALID_INPUT.value,
            message="Please provide both a social media post and a topic to analyze.",
        ).model_dump())

    try:
        return await agent.analyze(req.post_text, req.topic)
    except AnalysisError as e:
        raise _error_response(e)
