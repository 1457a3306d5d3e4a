"""Admin login request/response schemas."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=100)


class AdminProfile(BaseModel):
    id: int
    username: str


class LoginResponse(BaseModel):
    token: str
    expires_in: int  # seconds
    user: AdminProfile


class PasswordChangeRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6, max_length=100)
