from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes.summarize import get_summarizer
from core.errors import TransportError
from core.generate.summarizer import Summarizer
from models.summary import RequestPhase

SUCCESS_BODY = {"candidates": [{"content": {"parts": [{"text": "A <short> summary."}]}}]}

@pytest.fixture
def llm():
    mock_llm = MagicMock()
    mock_llm.config.model = "gemini-2.0-flash"
    mock_llm.generate.return_value = SUCCESS_BODY
    return mock_llm

@pytest.fixture
def summarizer(llm):
    return Summarizer(llm)

@pytest.fixture
def client(summarizer):
    app.dependency_overrides[get_summarizer] = lambda: summarizer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_lifespan_builds_handler(client):
    assert isinstance(app.state.summarizer, Summarizer)
    assert app.state.summarizer.llm is app.state.llm_client

def test_summarize_success(client):
    response = client.post("/api/summarize", json={"text": "Long article."})

    assert response.status_code == 200
    data = response.json()
    assert data["summary"] == "A <short> summary."
    assert data["error_message"] is None
    assert data["phase"] == "settled"
    assert data["outcome"] == "succeeded"
    assert data["is_loading"] is False
    assert data["can_submit"] is True

def test_summarize_empty_input(client, llm):
    response = client.post("/api/summarize", json={"text": "   "})

    assert response.status_code == 200
    data = response.json()
    assert data["error_message"] == "Please enter some text to summarize."
    assert data["outcome"] == "rejected"
    assert not llm.generate.called

def test_summarize_provider_error(client, llm):
    llm.generate.side_effect = TransportError("bad request", status_code=400)

    response = client.post("/api/summarize", json={"text": "text"})

    assert response.status_code == 200
    assert response.json()["error_message"] == "Error: bad request"

def test_summarize_missing_text_field(client):
    response = client.post("/api/summarize", json={})
    assert response.status_code == 422

def test_summarize_conflict_while_pending(client, summarizer):
    summarizer.state.phase = RequestPhase.pending

    response = client.post("/api/summarize", json={"text": "text"})

    assert response.status_code == 409

def test_summarize_unexpected_failure(client, llm, summarizer):
    llm.generate.side_effect = RuntimeError("boom")

    response = client.post("/api/summarize", json={"text": "text"})

    assert response.status_code == 500
    assert summarizer.state.is_loading is False

def test_state_and_input_update(client):
    client.post("/api/summarize", json={"text": ""})
    assert client.get("/api/state").json()["error_message"] is not None

    response = client.put("/api/input", json={"text": "edited"})

    assert response.status_code == 200
    data = response.json()
    assert data["input_text"] == "edited"
    assert data["error_message"] is None
    assert client.get("/api/state").json()["input_text"] == "edited"

def test_page_initial_render(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "AI Text Summarizer" in response.text
    assert "Summarize Text" in response.text
    # Empty input keeps the trigger disabled
    assert 'name="submit_button" disabled' in response.text
    assert "Summary:" not in response.text

def test_page_form_submit(client):
    response = client.post("/", data={"text": "Some <b>article</b>"})

    assert response.status_code == 200
    assert "Summary:" in response.text
    assert "A &lt;short&gt; summary." in response.text
    assert "Some &lt;b&gt;article&lt;/b&gt;</textarea>" in response.text
    assert 'name="submit_button">' in response.text

def test_page_form_submit_empty(client, llm):
    response = client.post("/", data={"text": ""})

    assert response.status_code == 200
    assert "Please enter some text to summarize." in response.text
    assert "Summary:" not in response.text
    assert not llm.generate.called
