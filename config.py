# config.py
from pathlib import Path
from dotenv import load_dotenv
import os
from typing import Optional


BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Settings:
    GOOGLE_API_KEY: Optional[str]
    GEMINI_MODEL: str
    GEMINI_RETRIEVAL_MODEL: str
    ANALYSIS_TEMPERATURE: float
    LOG_LEVEL: str

    def __init__(self, **overrides):
        self.GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or None
        # Structured analysis runs on the fast model, URL retrieval on the one with search grounding
        self.GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.GEMINI_RETRIEVAL_MODEL = os.getenv("GEMINI_RETRIEVAL_MODEL", "gemini-2.5-pro")
        self.ANALYSIS_TEMPERATURE = float(os.getenv("ANALYSIS_TEMPERATURE", "0.2"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)

    def __repr__(self):
        masked = "***" if self.GOOGLE_API_KEY else None
        return (
            f"Settings(GOOGLE_API_KEY={masked!r}, GEMINI_MODEL={self.GEMINI_MODEL!r}, "
            f"GEMINI_RETRIEVAL_MODEL={self.GEMINI_RETRIEVAL_MODEL!r}, "
            f"ANALYSIS_TEMPERATURE={self.ANALYSIS_TEMPERATURE!r}, LOG_LEVEL={self.LOG_LEVEL!r})"
        )


class SentimentConfig:

    # ────────────────────── URL RETRIEVAL ──────────────────────
    ALLOWED_URL_SCHEMES = {"http", "https"}

    # Lowercased phrases the model uses when it could not open a page
    REFUSAL_PHRASES = ("unable to access", "cannot access")

    RETRIEVAL_SYSTEM_INSTRUCTION = (
        "You are an AI assistant that extracts the main text content from a social media post "
        "at a given URL. You must use your search tool to access the URL. Return ONLY the raw "
        "text content of the post. Do not include any explanations, apologies, or conversational "
        "filler like 'Here is the content:' or 'I am unable to access...'. If you cannot access "
        "the URL, return an empty string."
    )


settings = Settings()
