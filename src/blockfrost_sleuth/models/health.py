"""Response models for the root and ``/health`` endpoints."""

from pydantic import BaseModel


class Root(BaseModel):
    url: str
    version: str


class Health(BaseModel):
    is_healthy: bool


class HealthClock(BaseModel):
    server_time: int  # milliseconds since the Unix epoch
