from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notes_api.domain.notes.entities import Note


class NoteCreateDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(max_length=255)
    content: str


class NoteUpdateDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, max_length=255)
    content: str | None = None


class NoteDTO(BaseModel):
    id: int
    title: str
    content: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, note: Note) -> "NoteDTO":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            user_id=note.user_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
