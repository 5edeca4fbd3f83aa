from typing import Any
from typing import Optional

from pydantic import BaseModel
from pydantic import Field


class JoinWaitlistRequest(BaseModel):
    # Any: coerced to a string by the service, bad values get a 400 not a 422
    email: Optional[Any] = Field(
        default=None, description="Email address to add to the waitlist"
    )

    class Config:
        json_schema_extra = {"example": {"email": "you@domain.com"}}


class JoinWaitlistResponse(BaseModel):
    ok: bool = Field(description="True when the signup was accepted")
