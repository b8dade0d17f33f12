from typing import Literal
from pydantic import BaseModel, Field

# Outbound payload for models/<model>:generateContent

class Part(BaseModel):
    text: str

class Turn(BaseModel):
    role: Literal["user"] = "user"
    parts: list[Part]

class GenerateContentRequest(BaseModel):
    contents: list[Turn]

# Success body. Only the fields we read are modelled; list fields must be non-empty.

class CandidateContent(BaseModel):
    parts: list[Part] = Field(min_length=1)

class Candidate(BaseModel):
    content: CandidateContent

class GenerateContentResponse(BaseModel):
    candidates: list[Candidate] = Field(min_length=1)

# Error body. The message is optional.

class ProviderErrorDetail(BaseModel):
    message: str | None = None

class ProviderErrorBody(BaseModel):
    error: ProviderErrorDetail | None = None
