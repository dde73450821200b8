from typing import Literal, Optional
from pydantic import BaseModel, Field

LanguageCode = Literal["en", "tw", "ga", "dag", "ee"]


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    full_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=6)
    preferred_language: LanguageCode = "en"


class RegisterResponse(BaseModel):
    user_id: str
    token: str
    message: str


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    user_id: str
    token: str
    full_name: str
    preferred_language: str


class UserResponse(BaseModel):
    id: str
    email: str
    full_name: str
    preferred_language: str
    created_at: Optional[str]
