"""Application DTOs for member registration and login."""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterMemberRequest(BaseModel):
    """Request DTO for registration.

    email, password and name are checked by the service so a missing
    value is reported as a bad request.
    """

    email: Optional[str] = Field(None, description="Login email")
    password: Optional[str] = Field(None, description="Plain-text password")
    name: Optional[str] = Field(None, description="Display name")
    phone: Optional[str] = Field(None, description="Phone number")
    address: Optional[str] = Field(None, description="Default address")

    model_config = {"frozen": True}


class LoginRequest(BaseModel):
    """Request DTO for login."""

    email: Optional[str] = None
    password: Optional[str] = None

    model_config = {"frozen": True}


class MemberDTO(BaseModel):
    """Member information returned after login (never the password hash)."""

    member_id: int
    email: str
    name: str
    role: str

    model_config = {"frozen": True}
