"""Upload lifecycle state: an explicit status plus the data that goes with it."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from jd_match_ai.schemas.candidate_file import CandidateFile, DocumentSlot


class UploadStatus(str, Enum):
    IDLE = "idle"
    FILES_SELECTED = "files_selected"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class UploadSession(BaseModel):
    """
    Immutable snapshot of one comparison. Transitions build a new session, so
    the validator below runs on every state change and rejects combinations
    such as SUCCEEDED with an error or FAILED without one.
    """

    model_config = ConfigDict(frozen=True)

    status: UploadStatus = UploadStatus.IDLE
    jd_file: Optional[CandidateFile] = None
    resume_file: Optional[CandidateFile] = None
    error: Optional[str] = None
    status_message: Optional[str] = None
    result: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def _check_status_data(self) -> "UploadSession":
        status = self.status
        if status is UploadStatus.SUCCEEDED:
            if self.result is None or self.error is not None:
                raise ValueError("succeeded session must carry a result and no error")
        elif status is UploadStatus.FAILED:
            if self.error is None or self.result is not None:
                raise ValueError("failed session must carry an error and no result")
        elif self.result is not None:
            raise ValueError(f"{status.value} session cannot carry a result")
        if status is UploadStatus.SUBMITTING and self.error is not None:
            raise ValueError("submitting session cannot carry an error")
        if status in (UploadStatus.SUBMITTING, UploadStatus.SUCCEEDED) and not self.is_complete:
            raise ValueError(f"{status.value} session requires both files")
        if status is UploadStatus.IDLE and (self.jd_file or self.resume_file):
            raise ValueError("idle session cannot hold files")
        return self

    def file_for(self, slot: DocumentSlot) -> Optional[CandidateFile]:
        return self.jd_file if slot is DocumentSlot.JD else self.resume_file

    @property
    def is_complete(self) -> bool:
        return self.jd_file is not None and self.resume_file is not None
