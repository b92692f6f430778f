"""Async HTTP client for the remote JD / resume comparison service."""

import json
from typing import Any, Dict, Optional

import httpx

from jd_match_ai.config import ANALYSIS_ENDPOINT, JD_FIELD_NAME, RESUME_FIELD_NAME
from jd_match_ai.exceptions import MalformedResponseError, ServiceError, TransportError
from jd_match_ai.schemas.analysis_payload import AnalysisPayload
from jd_match_ai.schemas.candidate_file import CandidateFile
from jd_match_ai.utils.logger import get_logger

logger = get_logger(__name__)


class AnalysisClient:
    """
    Posts both documents as one multipart request and returns the parsed JSON payload.
    Redirects are followed. No retries and no explicit timeout; httpx defaults apply. A transport can be
    injected (e.g. httpx.MockTransport) for tests.
    """

    def __init__(
        self,
        endpoint: str = ANALYSIS_ENDPOINT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint = endpoint
        self._transport = transport

    @staticmethod
    def build_files(jd_file: CandidateFile, resume_file: CandidateFile) -> Dict[str, Any]:
        return {
            JD_FIELD_NAME: (jd_file.name, jd_file.content, jd_file.media_type),
            RESUME_FIELD_NAME: (resume_file.name, resume_file.content, resume_file.media_type),
        }

    async def analyze(self, jd_file: CandidateFile, resume_file: CandidateFile) -> AnalysisPayload:
        """
        Submit the pair. Raises ServiceError on a non-2xx status, TransportError on
        connectivity failures and MalformedResponseError when the body is not a JSON object.
        """
        files = self.build_files(jd_file, resume_file)
        try:
            async with httpx.AsyncClient(follow_redirects=True, transport=self._transport) as client:
                response = await client.post(self.endpoint, files=files)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Analysis service HTTP error: %s %s", e.response.status_code, e.response.text[:200])
            raise ServiceError(e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error("Analysis request to %s failed: %s", self.endpoint, e)
            raise TransportError(str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Analysis response is not valid JSON: %s", e)
            raise MalformedResponseError(f"Invalid JSON in analysis response: {e}") from e
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object from the analysis service, got {type(data).__name__}"
            )
        logger.info(
            "Analysis received: jd=%s resume=%s overall=%s",
            jd_file.name,
            resume_file.name,
            data.get("overall_percentage"),
        )
        return data
