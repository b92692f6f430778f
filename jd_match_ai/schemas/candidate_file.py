"""Candidate document held in one of the two upload slots."""

import mimetypes
from enum import Enum
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class DocumentSlot(str, Enum):
    """Which of the two documents a file fills."""

    JD = "jd"
    RESUME = "resume"

    @property
    def label(self) -> str:
        return "Job Description" if self is DocumentSlot.JD else "Resume"


class CandidateFile(BaseModel):
    """A selected file: raw bytes plus the metadata used for validation and upload."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Original file name")
    media_type: str = Field(default="", description="Declared media type (e.g. application/pdf)")
    size: int = Field(..., ge=0, description="Size in bytes")
    content: bytes = Field(default=b"", repr=False, description="Raw file content")

    @classmethod
    def from_bytes(cls, name: str, content: bytes, media_type: str = "") -> "CandidateFile":
        return cls(name=name, media_type=media_type, size=len(content), content=content)

    @classmethod
    def from_upload(cls, uploaded: Any) -> "CandidateFile":
        """Build from a Streamlit UploadedFile (or anything with name/type/size/getvalue)."""
        content = uploaded.getvalue()
        return cls(
            name=uploaded.name,
            media_type=uploaded.type or "",
            size=getattr(uploaded, "size", len(content)),
            content=content,
        )

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "CandidateFile":
        """Read a local file; the media type is guessed from its extension."""
        p = Path(path)
        media_type, _ = mimetypes.guess_type(p.name)
        return cls.from_bytes(p.name, p.read_bytes(), media_type or "")
