"""
Schemas - Search Models

Pydantic models for x_search arguments and results.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Any, Dict, List, Optional


MAX_QUERY_LENGTH = 2000
MAX_HANDLES = 10

Handle = Annotated[str, Field(min_length=1)]
HandleList = Annotated[List[Handle], Field(max_length=MAX_HANDLES)]


class SearchRequest(BaseModel):
    """Validated x_search arguments. Absent optional fields stay None."""
    query: str = Field(
        ...,
        min_length=1,
        max_length=MAX_QUERY_LENGTH,
        description="Search query for X",
    )
    allowed_x_handles: Optional[HandleList] = Field(
        None, description="Only include posts from these handles"
    )
    excluded_x_handles: Optional[HandleList] = Field(
        None, description="Exclude posts from these handles"
    )
    from_date: Optional[str] = Field(None, description="Start date (YYYY-MM-DD)")
    to_date: Optional[str] = Field(None, description="End date (YYYY-MM-DD)")
    enable_image_understanding: Optional[bool] = Field(
        None, description="Enable image understanding"
    )
    enable_video_understanding: Optional[bool] = Field(
        None, description="Enable video understanding"
    )
    include_raw_response: bool = Field(
        False, description="Include raw xAI response for debugging"
    )

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class Citation(BaseModel):
    """URL citation anchored to a character range of the answer."""
    url: str
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    title: Optional[str] = None


class SearchResult(BaseModel):
    """Normalized x_search answer."""
    answer: str
    citations: List[str] = []
    inline_citations: List[Citation] = []
    raw_response: Optional[Any] = None

    def to_payload(self) -> Dict[str, Any]:
        """Dump to a JSON-ready dict; raw_response only when it was attached."""
        payload = self.model_dump(exclude={"raw_response"})
        if "raw_response" in self.model_fields_set:
            payload["raw_response"] = self.raw_response
        return payload
