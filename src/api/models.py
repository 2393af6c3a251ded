"""Requests and Response models"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

# Pin counts are not checked against 0-10, only against what fits in a 64-bit integer
PinCount = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]


# --- REQUEST MODELS ---
class RollRequest(BaseModel):
    # Has to be an actual JSON integer (no "7" or 7.0)
    pins: PinCount


# --- RESPONSE MODELS ---
class ScoreResponse(BaseModel):
    score: int
