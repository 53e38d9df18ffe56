from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(max_length=64)
    email: str = Field(max_length=128)
    password: str = Field(max_length=256)


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(max_length=64)
    password: str = Field(max_length=256)


class MessageDTO(BaseModel):
    message: str


class LoginSuccessDTO(MessageDTO):
    token: str | None = None
