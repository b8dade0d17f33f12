from enum import Enum
from pydantic import BaseModel, computed_field

class RequestPhase(str, Enum):
    idle = "idle"
    pending = "pending"
    settled = "settled"

class AttemptOutcome(str, Enum):
    succeeded = "succeeded"
    rejected = "rejected"            # failed local validation, no network call
    failed = "failed"                # transport error or malformed response

class SummaryState(BaseModel):
    input_text: str = ""
    summary: str | None = None
    error_message: str | None = None
    phase: RequestPhase = RequestPhase.idle
    outcome: AttemptOutcome | None = None

    @computed_field
    @property
    def is_loading(self) -> bool:
        return self.phase == RequestPhase.pending

    @computed_field
    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.input_text.strip())

class SummarizeRequest(BaseModel):
    text: str

class InputUpdate(BaseModel):
    text: str
