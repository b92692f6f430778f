"""Client-side checks run on a file before it is accepted into a slot."""

from jd_match_ai.config import ALLOWED_MEDIA_TYPES, MAX_FILE_SIZE_BYTES
from jd_match_ai.exceptions import FileValidationError
from jd_match_ai.schemas.candidate_file import CandidateFile, DocumentSlot
from jd_match_ai.utils.helpers import format_file_size


def validate_candidate_file(slot: DocumentSlot, candidate: CandidateFile) -> CandidateFile:
    """
    Raise FileValidationError if the media type is not PDF/plain text or the file
    is larger than MAX_FILE_SIZE_BYTES. Returns the candidate unchanged when valid.
    """
    if candidate.media_type not in ALLOWED_MEDIA_TYPES:
        raise FileValidationError(
            f"{slot.label} '{candidate.name}': please upload only PDF or TXT files "
            f"(got '{candidate.media_type or 'unknown type'}')",
            slot=slot.value,
            filename=candidate.name,
        )
    if candidate.size > MAX_FILE_SIZE_BYTES:
        raise FileValidationError(
            f"{slot.label} '{candidate.name}': file size should be less than "
            f"{format_file_size(MAX_FILE_SIZE_BYTES)} (got {format_file_size(candidate.size)})",
            slot=slot.value,
            filename=candidate.name,
        )
    return candidate
