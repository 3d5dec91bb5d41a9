"""
LazyPost Core - Models

Pydantic models for requests composed in the UI and the outcomes
returned by the network issuer.
"""

from datetime import datetime
from typing import Dict, Optional
from pydantic import BaseModel, Field


class HttpRequest(BaseModel):
    """A fully composed request, ready to be issued"""
    method: str = "GET"
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)


class RequestOutcome(BaseModel):
    """Result of one issued request: either a response or an error"""
    status_code: Optional[int] = None
    reason: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
    duration_ms: Optional[float] = None

    # Set when the request never produced a response
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
