import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from core.generate.llm_client import GeminiClient
from core.generate.summarizer import Summarizer

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup: build the client and the handler that owns the page state ---
    logger.info("Initializing Gemini summarization handler...")

    llm_client = GeminiClient()
    summarizer = Summarizer(llm_client)

    # Store in app.state for dependency injection
    app.state.llm_client = llm_client
    app.state.summarizer = summarizer

    logger.info(f"Initialization complete. Using model {llm_client.config.model}.")

    yield

    # --- Shutdown: state is in-memory only ---
    logger.info("Shutting down summarizer...")

# Create FastAPI instance
app = FastAPI(
    title="Gemini Text Summarizer",
    description="Single-page text summarization backed by the Gemini generateContent API",
    version="1.0.0",
    lifespan=lifespan
)

# Health Check Endpoint
@app.get("/health", tags=["System"])
def health_check():
    return {"status": "ok"}

from api.routes import page, summarize

app.include_router(summarize.router, prefix="/api", tags=["Summarization"])
app.include_router(page.router, tags=["Page"])
