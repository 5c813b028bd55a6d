"""Token credit schemas"""

from pydantic import BaseModel, Field


class AddTokensRequest(BaseModel):
    """Body of POST /addTokens"""
    user_id: str | None = Field(default=None, alias="userId")
    tokens: int | None = None

    class Config:
        populate_by_name = True
