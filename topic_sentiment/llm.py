# topic_sentiment/llm.py
from google import generativeai as genai
from google.generativeai import protos
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)

# Search grounding tool accepted by Gemini 2.x models
GOOGLE_SEARCH = protos.Tool(google_search=protos.Tool.GoogleSearch())

_configured_key: Optional[str] = None


def configure_gemini(api_key: str):
    """Bind the process-wide google-generativeai client to ``api_key``.

    The SDK keeps a single global client, so once a key is bound a different
    one is refused instead of silently rerouting existing clients.
    """
    global _configured_key
    if _configured_key is None:
        genai.configure(api_key=api_key)
        _configured_key = api_key
        logger.info("Gemini client configured")
    elif _configured_key != api_key:
        raise ValueError("Gemini is already configured with a different API key in this process.")


def _response_text(response: Any) -> str:
    """Return the trimmed text of a Gemini response, or "" when it carries none."""
    try:
        text = response.text
    except ValueError:
        # Blocked or empty candidates have no parts to read
        logger.warning("Gemini response carried no text parts")
        return ""
    return (text or "").strip()


class GeminiClient:
    """Thin async wrapper over google-generativeai.

    Each call builds its own GenerativeModel; the only shared state is the
    process-wide credential bound by ``configure_gemini``.
    """

    def __init__(self, api_key: str):
        configure_gemini(api_key)

    async def generate_text_response(
        self,
        prompt: str,
        model_name: str,
        system_instruction: Optional[str] = None,
        tools: Optional[list] = None,
    ) -> str:
        model = genai.GenerativeModel(
            model_name=model_name,
            system_instruction=system_instruction,
            tools=tools,
        )
        response = await model.generate_content_async(prompt)
        return _response_text(response)

    async def generate_structured_json(
        self,
        prompt: str,
        response_schema: Any,
        model_name: str,
        temperature: float = 0.2,
    ) -> str:
        """Request JSON output constrained to ``response_schema`` and return the raw text."""
        model = genai.GenerativeModel(model_name=model_name)
        response = await model.generate_content_async(
            prompt,
            generation_config=genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=response_schema,
                temperature=temperature,
            ),
        )
        return _response_text(response)
