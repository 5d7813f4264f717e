"""
Ingest router - turn a listing URL into a draft for an admin to review.

Endpoints:
- POST /api/ingest/hackathon   - URL of a hackathon page  -> HackathonDraft
- POST /api/ingest/internship  - URL of an internship page -> InternshipDraft

Nothing is saved here; the admin edits the draft and posts it through
/api/hackathons or /api/jobs.
"""

from fastapi import APIRouter, Depends

from internhub.schemas import ExtractRequest, HackathonDraft, InternshipDraft
from internhub.services.extraction import ExtractionClient, get_extractor

router = APIRouter()


@router.post("/ingest/hackathon", response_model=HackathonDraft)
def ingest_hackathon(data: ExtractRequest, extractor: ExtractionClient = Depends(get_extractor)):
    return extractor.extract_hackathon(data.url)


@router.post("/ingest/internship", response_model=InternshipDraft)
def ingest_internship(data: ExtractRequest, extractor: ExtractionClient = Depends(get_extractor)):
    return extractor.extract_internship(data.url)
