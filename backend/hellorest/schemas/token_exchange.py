"""
HelloRest — Token Exchange Form Payload
========================================

What:  The seven fields of an OAuth 2.0 token-exchange style form post.
Why:   POST /camel/forms binds its form-encoded body into this model and echoes it.

No validation invariants: any subset of fields may be missing (bound to None),
unknown form fields are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TokenExchangeRequest(BaseModel):
    client_id: Optional[str] = Field(default=None, description="OAuth client identifier")
    client_secret: Optional[str] = Field(default=None, description="OAuth client secret")
    grant_type: Optional[str] = Field(default=None, description="e.g. client_credentials")
    subject_token: Optional[str] = Field(default=None, description="Token being exchanged")
    subject_issuer: Optional[str] = Field(default=None, description="Issuer of the subject token")
    subject_token_type: Optional[str] = Field(default=None, description="Type URN of the subject token")
    audience: Optional[str] = Field(default=None, description="Target audience of the new token")

    model_config = {"extra": "ignore"}
