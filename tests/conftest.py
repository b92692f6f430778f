"""Shared fixtures: sample files, payloads and a fake analysis service."""

from typing import Any, Callable, Dict, List

import httpx
import pytest

from jd_match_ai.schemas.candidate_file import CandidateFile
from jd_match_ai.services.analysis_client import AnalysisClient
from jd_match_ai.services.upload_controller import UploadController

TEST_ENDPOINT = "http://analysis.test/analyze-comprehensive"


@pytest.fixture
def jd_pdf() -> CandidateFile:
    return CandidateFile.from_bytes("job.pdf", b"%PDF-1.4 senior python engineer", "application/pdf")


@pytest.fixture
def resume_txt() -> CandidateFile:
    return CandidateFile.from_bytes("resume.txt", b"Python, SQL, 6 years", "text/plain")


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    return {
        "overall_percentage": 72.5,
        "job_title": "Senior Backend Engineer",
        "key_skills": {"Python": 6, "SQL": 0, "Docker": "3"},
        "sections": [
            {
                "section_name": "technical_skills",
                "match_percentage": 80,
                "section_score": 8,
                "total_possible": 10,
                "criticality": "High",
                "project_count": 3,
                "match_results": [
                    {
                        "field": "programming_languages",
                        "jd_value": ["Python", "Go"],
                        "resume_value": ["Python"],
                        "match_status": "Partial match on skills",
                        "comments": "Go not found",
                    },
                    {
                        "field": "databases",
                        "jd_value": "PostgreSQL",
                        "resume_value": "PostgreSQL",
                        "match_status": "Exact match",
                    },
                ],
            },
            {
                "section_name": "experience",
                "match_percentage": 55,
                "match_results": [
                    {"field": "years", "jd_value": [], "resume_value": None, "match_status": "No match"},
                ],
            },
        ],
    }


class FakeAnalysisService:
    """Records requests and answers with a canned response via httpx.MockTransport."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._responder(request)

    def client(self) -> AnalysisClient:
        return AnalysisClient(TEST_ENDPOINT, transport=self.transport)


@pytest.fixture
def make_service() -> Callable[..., FakeAnalysisService]:
    def _make(status_code: int = 200, body: Any = None, content: bytes = None, raises: type = None):
        def responder(request: httpx.Request) -> httpx.Response:
            if raises is not None:
                raise raises("Connection refused", request=request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body if body is not None else {})

        return FakeAnalysisService(responder)

    return _make


@pytest.fixture
def ok_service(make_service, sample_payload) -> FakeAnalysisService:
    return make_service(200, sample_payload)


@pytest.fixture
def controller(ok_service) -> UploadController:
    return UploadController(ok_service.client())
