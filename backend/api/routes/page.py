import logging
from html import escape
from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse

from api.routes.summarize import get_summarizer
from core.errors import SummarizationInProgressError
from core.generate.summarizer import Summarizer
from models.summary import SummaryState

router = APIRouter()
logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>AI Text Summarizer</title></head>
<body>
<h1>AI Text Summarizer</h1>
<p>Concise summaries powered by Google's Gemini AI.</p>
<form method="post" action="/">
  <label for="inputText">Enter Text to Summarize:</label>
  <textarea id="inputText" name="text" rows="8"
    placeholder="Paste your article, document, or paragraph here..."
    oninput="this.form.submit_button.disabled = !this.value.trim()">{input_text}</textarea>
  <button type="submit" name="submit_button"{disabled}>{button_label}</button>
</form>
{error_block}
{summary_block}
</body>
</html>
"""

def render_page(state: SummaryState) -> str:
    error_block = ""
    if state.error_message:
        error_block = f'<div role="alert"><strong>Error!</strong> {escape(state.error_message)}</div>'

    summary_block = ""
    if state.summary:
        summary_block = f'<section><h2>Summary:</h2><p style="white-space: pre-wrap">{escape(state.summary)}</p></section>'

    return PAGE_TEMPLATE.format(
        input_text=escape(state.input_text),
        disabled="" if state.can_submit else " disabled",
        button_label="Summarizing..." if state.is_loading else "Summarize Text",
        error_block=error_block,
        summary_block=summary_block,
    )

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def show_page(summarizer: Summarizer = Depends(get_summarizer)):
    return render_page(summarizer.state)

@router.post("/", response_class=HTMLResponse, include_in_schema=False)
def submit_page(
    text: str = Form(""),
    summarizer: Summarizer = Depends(get_summarizer)
):
    try:
        state = summarizer.run(text)
    except SummarizationInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except Exception:
        logger.exception("Summarization from the form failed.")
        raise HTTPException(status_code=500, detail="Internal processing error during summarization.")
    return render_page(state)
