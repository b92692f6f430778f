"""Upload lifecycle: slot selection, one in-flight submission, reset."""

from typing import Optional

from jd_match_ai.exceptions import AnalysisError, FileValidationError
from jd_match_ai.schemas.candidate_file import CandidateFile, DocumentSlot
from jd_match_ai.schemas.upload_session import UploadSession, UploadStatus
from jd_match_ai.schemas.view_model import NormalizedViewModel
from jd_match_ai.services.analysis_client import AnalysisClient
from jd_match_ai.services.file_validation import validate_candidate_file
from jd_match_ai.services.result_normalizer import normalize_payload
from jd_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

SUBMITTING_MESSAGE = "Analyzing files..."
MISSING_FILES_MESSAGE = "Please upload both JD and Resume files"

_SELECTABLE = (UploadStatus.IDLE, UploadStatus.FILES_SELECTED, UploadStatus.FAILED)
_SUBMITTABLE = (UploadStatus.IDLE, UploadStatus.FILES_SELECTED, UploadStatus.FAILED)


class UploadController:
    """
    Owns one UploadSession. Every transition replaces the session with a newly
    validated snapshot, so illegal status/data combinations fail loudly.
    """

    def __init__(self, client: Optional[AnalysisClient] = None) -> None:
        self.client = client or AnalysisClient()
        self.session = UploadSession()

    @property
    def status(self) -> UploadStatus:
        return self.session.status

    @property
    def view_model(self) -> Optional[NormalizedViewModel]:
        """Normalized report for a succeeded session, else None."""
        if self.session.result is None:
            return None
        return normalize_payload(self.session.result)

    def _transition(self, **changes) -> UploadSession:
        data = {name: getattr(self.session, name) for name in UploadSession.model_fields}
        data.update(changes)
        previous = self.session.status
        self.session = UploadSession(**data)
        if self.session.status is not previous:
            logger.info("Upload session %s -> %s", previous.value, self.session.status.value)
        return self.session

    def select_file(self, slot: DocumentSlot, candidate: CandidateFile) -> bool:
        """
        Put a file into a slot. Invalid files set an error and leave the slot as it was.
        After a failed submission a valid pick replaces the slot and clears the failure,
        so the next submit sends the new file. Returns True when the file was accepted.
        """
        if self.status not in _SELECTABLE:
            logger.warning("Ignoring %s selection while %s; reset first", slot.value, self.status.value)
            return False
        try:
            validate_candidate_file(slot, candidate)
        except FileValidationError as e:
            logger.warning("Rejected %s file '%s': %s", slot.value, candidate.name, e)
            self._transition(error=str(e))
            return False

        field = "jd_file" if slot is DocumentSlot.JD else "resume_file"
        self._transition(**{field: candidate, "status": UploadStatus.FILES_SELECTED, "error": None})
        logger.info("Selected %s file '%s' (%s bytes)", slot.value, candidate.name, candidate.size)
        return True

    async def submit(self) -> UploadSession:
        """
        Send both files to the analysis service. A no-op while a submission is in
        flight or after success; fails fast without a request when a slot is empty.
        """
        if self.status not in _SUBMITTABLE:
            logger.warning("Ignoring submit while %s", self.status.value)
            return self.session
        if not self.session.is_complete:
            self._transition(error=MISSING_FILES_MESSAGE)
            return self.session

        jd_file, resume_file = self.session.jd_file, self.session.resume_file
        in_flight = self._transition(
            status=UploadStatus.SUBMITTING, error=None, status_message=SUBMITTING_MESSAGE
        )
        try:
            payload = await self.client.analyze(jd_file, resume_file)
        except AnalysisError as e:
            if self.session is not in_flight:
                return self.session
            return self._fail(f"Failed to analyze files: {e}")
        except Exception as e:
            if self.session is in_flight:
                self._fail(f"Failed to analyze files: {e}")
            raise

        if self.session is not in_flight:
            # reset() ran while the request was in flight
            logger.info("Discarding analysis result for a session that was reset")
            return self.session
        return self._transition(
            status=UploadStatus.SUCCEEDED, result=payload, status_message=None
        )

    def _fail(self, message: str) -> UploadSession:
        logger.error("Submission failed: %s", message)
        return self._transition(status=UploadStatus.FAILED, error=message, status_message=None)

    def reset(self) -> UploadSession:
        """Drop both files, any error and any result. Safe from every state."""
        logger.info("Resetting upload session (was %s)", self.status.value)
        self.session = UploadSession()
        return self.session
