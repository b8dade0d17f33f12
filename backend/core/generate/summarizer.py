import logging
from core.errors import (
    EmptyInputError,
    MalformedResponseError,
    SummarizationInProgressError,
    TransportError,
)
from core.generate.llm_client import GeminiClient
from core.generate.prompt_builder import PromptBuilder
from core.generate.response_parser import extract_summary
from models.summary import AttemptOutcome, RequestPhase, SummaryState
from config.settings import settings

logger = logging.getLogger(__name__)

class Summarizer:
    """
    Owns the summary state and runs one summarization attempt per call.
    Core logic only (No FastAPI).
    """

    def __init__(self, llm: GeminiClient):
        self.llm = llm
        self.state = SummaryState()

    def update_input(self, text: str) -> SummaryState:
        """Stores edited input; an edit dismisses the previous error."""
        self.state.input_text = text
        self.state.error_message = None
        return self.state

    @staticmethod
    def validate_input(text: str) -> str:
        if not text.strip():
            raise EmptyInputError(settings.ui.empty_input_message)
        return text

    def run(self, input_text: str) -> SummaryState:
        """
        1. Clears the previous summary and error.
        2. Validates input; rejects before any network activity.
        3. Calls the provider and projects the outcome onto the state.
        4. Always leaves the phase settled.
        """
        state = self.state
        if state.phase == RequestPhase.pending:
            raise SummarizationInProgressError("A summarization request is already in progress.")

        state.input_text = input_text
        state.summary = None
        state.error_message = None
        state.outcome = None

        try:
            self.validate_input(input_text)
        except EmptyInputError as e:
            state.error_message = e.message
            state.outcome = AttemptOutcome.rejected
            state.phase = RequestPhase.settled
            return state

        state.phase = RequestPhase.pending
        try:
            payload = PromptBuilder.build_summarization_payload(input_text)
            logger.info(f"Summarizing {len(input_text)} characters with {self.llm.config.model}")

            try:
                body = self.llm.generate(payload)
            except TransportError as e:
                logger.error(f"Summarization error: {e.message}")
                state.error_message = f"Error: {e.message}"
                state.outcome = AttemptOutcome.failed
                return state

            try:
                state.summary = extract_summary(body)
            except MalformedResponseError:
                state.error_message = settings.ui.malformed_response_message
                state.outcome = AttemptOutcome.failed
                return state

            state.outcome = AttemptOutcome.succeeded
            logger.info(f"Summary received ({len(state.summary)} characters)")
            return state
        finally:
            state.phase = RequestPhase.settled
