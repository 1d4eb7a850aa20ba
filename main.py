# main.py
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from topic_sentiment.logger import setup_logging
from topic_sentiment.sentiment_analysis.views import router as sentiment_router
import uvicorn


STATIC_DIR = Path(__file__).resolve().parent / "topic_sentiment" / "static"

setup_logging()

app = FastAPI(title="Topic Sentiment Analyzer", docs_url="/docs")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sentiment_router)


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
