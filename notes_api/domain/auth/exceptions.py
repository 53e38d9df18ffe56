# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.shared.errors.base import AuthenticationError


class MissingCredentialsError(AuthenticationError):
    reason = "missing_credentials"


class TokenInvalidSignatureError(AuthenticationError):
    reason = "invalid_signature"


class TokenExpiredError(AuthenticationError):
    reason = "expired"


class TokenMalformedError(AuthenticationError):
    reason = "malformed"


class SessionNotFoundError(AuthenticationError):
    reason = "session_not_found"
