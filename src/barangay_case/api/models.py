from typing import Optional
from pydantic import BaseModel, Field


class ClassifyRequest(BaseModel):
    summary: Optional[str] = None


class LegalSearchRequest(BaseModel):
    query: str = Field(min_length=1, max_length=500)


class CitationRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    link: str = Field(min_length=1, max_length=2000)
    displayLink: str = Field(default="", max_length=500)
    snippet: str = Field(default="", max_length=5000)
