import logging
from fastapi import APIRouter, Depends, Request, HTTPException

from core.errors import SummarizationInProgressError
from core.generate.summarizer import Summarizer
from models.summary import SummarizeRequest, SummaryState, InputUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

# Dependency to get Summarizer from app state
def get_summarizer(request: Request) -> Summarizer:
    return request.app.state.summarizer

@router.get("/state", response_model=SummaryState, summary="Current input, summary, error and loading state")
def get_state(summarizer: Summarizer = Depends(get_summarizer)):
    return summarizer.state

@router.put("/input", response_model=SummaryState, summary="Record an edit to the input text")
def update_input(
    request_data: InputUpdate,
    summarizer: Summarizer = Depends(get_summarizer)
):
    return summarizer.update_input(request_data.text)

@router.post("/summarize", response_model=SummaryState, summary="Summarize the given text")
def summarize_text(
    request_data: SummarizeRequest,
    summarizer: Summarizer = Depends(get_summarizer)
):
    """
    Runs one summarization attempt. Rejected and failed attempts still return 200:
    the outcome and error message are part of the returned state.
    """
    try:
        return summarizer.run(request_data.text)

    except SummarizationInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except Exception:
        logger.exception("Summarization service failed.")
        raise HTTPException(status_code=500, detail="Internal processing error during summarization.")
