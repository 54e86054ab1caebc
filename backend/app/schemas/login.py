"""Login request and token response schemas."""

from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
