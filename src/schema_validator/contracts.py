"""Public result models for schema_validator package."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field


class Verdict(BaseModel):
    """Outcome of one (reader, writer) compatibility check."""
    model_config = ConfigDict(frozen=True)

    compatible: bool
    reader: str  # "proposed" | "version 3" | ...
    writer: str
    message: str


class SubjectError(BaseModel):
    """Why a subject could not be checked at all."""
    model_config = ConfigDict(frozen=True)

    code: str  # ValidationCode value, e.g. "PARSE_ERROR"
    message: str


class SubjectOutcome(BaseModel):
    """Folded result for one proposed schema file."""
    subject: str
    path: str
    mode: Optional[str] = None  # declared mode, None when not declared or unreadable
    verdicts: List[Verdict] = Field(default_factory=list)  # selection order
    ok: bool
    error: Optional[SubjectError] = None
    notes: List[str] = Field(default_factory=list)


class RunOutcome(BaseModel):
    """Folded result for a whole batch of proposed schemas."""
    subjects: List[SubjectOutcome]  # input file order
    ok: bool

    @computed_field
    @property
    def checked(self) -> int:
        return len(self.subjects)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.subjects if not outcome.ok)
