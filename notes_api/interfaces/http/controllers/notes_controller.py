# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request

from notes_api.application.use_cases.notes.create_note import CreateNoteUseCase
from notes_api.application.use_cases.notes.delete_note import DeleteNoteUseCase
from notes_api.application.use_cases.notes.get_note import GetNoteUseCase
from notes_api.application.use_cases.notes.list_notes import ListNotesUseCase
from notes_api.application.use_cases.notes.update_note import UpdateNoteUseCase
from notes_api.domain.auth.entities import Principal
from notes_api.domain.notes.exceptions import NoteNotFoundError
from notes_api.interfaces.http.auth.middleware import AuthMiddleware
from notes_api.interfaces.http.dto.auth import MessageDTO
from notes_api.interfaces.http.dto.notes import NoteCreateDTO, NoteDTO, NoteUpdateDTO
from notes_api.shared.errors.validation import parse_body
from notes_api.shared.logging import logger


_MAX_NOTE_ID = 2**63 - 1


def _parse_note_id(raw: str) -> int:
    # ids that cannot exist are reported like any other missing note
    if not raw.isascii() or not raw.isdigit() or len(raw) > 19:
        raise NoteNotFoundError()
    note_id = int(raw)
    if note_id > _MAX_NOTE_ID:
        raise NoteNotFoundError()
    return note_id


class NotesController:
    def __init__(
        self,
        *,
        auth: AuthMiddleware,
        list_notes: ListNotesUseCase,
        create_note: CreateNoteUseCase,
        get_note: GetNoteUseCase,
        update_note: UpdateNoteUseCase,
        delete_note: DeleteNoteUseCase,
    ) -> None:
        self._auth = auth
        self._list_notes = list_notes
        self._create_note = create_note
        self._get_note = get_note
        self._update_note = update_note
        self._delete_note = delete_note

    def as_blueprint(self) -> Blueprint:
        protect = self._auth.protect
        bp = Blueprint("notes", __name__)
        bp.add_url_rule("/notes", view_func=protect(self.list_notes), methods=["GET"])
        bp.add_url_rule("/notes/new", view_func=protect(self.create), methods=["POST"])
        bp.add_url_rule("/note/<note_id>", view_func=protect(self.get), methods=["GET"])
        bp.add_url_rule(
            "/note/<note_id>/update", view_func=protect(self.update), methods=["POST"]
        )
        bp.add_url_rule(
            "/note/<note_id>/delete", view_func=protect(self.delete), methods=["POST"]
        )
        return bp

    def list_notes(self, principal: Principal) -> Response:
        t0 = perf_counter()
        notes = self._list_notes.execute(principal)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"notes.list: ok (user_id={principal.user_id}, n={len(notes)}, dt_ms={dt:.0f})")
        return jsonify([NoteDTO.from_entity(note).model_dump(mode="json") for note in notes])

    def create(self, principal: Principal) -> tuple[Response, int]:
        dto = parse_body(NoteCreateDTO, request.get_json(silent=True) or {})
        note = self._create_note.execute(principal, dto.title, dto.content)
        logger.info(f"notes.create: ok (user_id={principal.user_id}, note_id={note.id})")
        payload = MessageDTO(message="Note created successfully").model_dump()
        payload["id"] = note.id
        return jsonify(payload), 201

    def get(self, note_id: str, principal: Principal) -> Response:
        note = self._get_note.execute(principal, _parse_note_id(note_id))
        return jsonify(NoteDTO.from_entity(note).model_dump(mode="json"))

    def update(self, note_id: str, principal: Principal) -> Response:
        dto = parse_body(NoteUpdateDTO, request.get_json(silent=True) or {})
        note = self._update_note.execute(
            principal, _parse_note_id(note_id), title=dto.title, content=dto.content
        )
        logger.info(f"notes.update: ok (user_id={principal.user_id}, note_id={note.id})")
        return jsonify(MessageDTO(message="Note updated successfully").model_dump())

    def delete(self, note_id: str, principal: Principal) -> Response:
        parsed_id = _parse_note_id(note_id)
        self._delete_note.execute(principal, parsed_id)
        logger.info(f"notes.delete: ok (user_id={principal.user_id}, note_id={parsed_id})")
        return jsonify(MessageDTO(message="Note deleted successfully").model_dump())
