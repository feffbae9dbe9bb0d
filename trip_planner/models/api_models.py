"""
API response models shared by every endpoint.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime


class StandardErrorResponse(BaseModel):
    """Error envelope returned for every failed request"""
    error_code: str = Field(description="Machine readable error code")
    message: str = Field(description="Human readable error message")
    details: Optional[Dict[str, Any]] = None
    request_id: str = Field(default="unknown")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class HealthResponse(BaseModel):
    """Liveness payload with catalog and trip counts"""
    status: str
    version: str
    environment: str
    catalog: Dict[str, int] = Field(default_factory=dict)
    trips: int = 0
    error_statistics: Dict[str, Any] = Field(default_factory=dict)
