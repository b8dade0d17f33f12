from typing import Any, Optional


class SummarizationError(Exception):
    """Base class for failures of a single summarization attempt."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(SummarizationError):
    pass


class TransportError(SummarizationError):
    """Raised when the provider call fails (non-2xx status or no response at all)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(SummarizationError):
    """The provider answered 2xx but the body does not carry generated text."""

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class SummarizationInProgressError(SummarizationError):
    pass
