from typing import Literal

from pydantic import BaseModel
from pydantic import Field


class ErrorResponse(BaseModel):
    error: str = Field(description="Human readable error message")


class HealthResponse(BaseModel):
    status: Literal["ok"] = Field(description="Service liveness")
