# app/schemas/user.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterSchema(BaseModel):
    name: str
    email: str
    password: str


class LoginSchema(BaseModel):
    # Presence is checked in the credential store so a missing field
    # and an empty one fail the same way
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: Optional[str] = None
    email: str
    isAdmin: bool = False


class AuthResponse(BaseModel):
    user: UserOut
    auth: str
