"""Account deletion and restore schemas"""

from pydantic import BaseModel, Field


class DeleteAccountRequest(BaseModel):
    """Body of POST /deleteAccount"""
    email: str | None = None
    tokens: int | None = Field(default=0, ge=0)
    uid: str | None = None
    client_encrypted_email: str | None = Field(default=None, alias="clientEncryptedEmail")

    class Config:
        populate_by_name = True


class DeleteAccountResponse(BaseModel):
    success: bool = True
    message: str
    server_hashed_email: str = Field(alias="serverHashedEmail")

    class Config:
        populate_by_name = True


class RestoreTokensRequest(BaseModel):
    """Body of POST /restoreTokens"""
    email: str | None = None


class RestoreTokensResponse(BaseModel):
    success: bool = True
    restored: bool
    tokens: int
