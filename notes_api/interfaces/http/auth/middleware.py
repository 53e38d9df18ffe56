# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import jsonify, request

from notes_api.shared.errors import AuthenticationError
from notes_api.shared.logging import logger

from .strategies import AuthStrategy


class AuthMiddleware:
    """Gate in front of protected views.

    The credential is resolved before the view runs. On success the view is
    called with a ``principal`` keyword argument; on any authentication
    failure the request ends with 401 and the view is never invoked.
    """

    def __init__(self, strategy: AuthStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> AuthStrategy:
        return self._strategy

    def protect(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                principal = self._strategy.resolve(request)
            except AuthenticationError as exc:
                logger.warning(
                    f"auth.rejected: strategy={self._strategy.name} reason={exc.reason} "
                    f"{request.method} {request.path} "
                    f"from {request.remote_addr}"
                )
                response = jsonify({"error": "unauthorized"})
                response.status_code = 401
                self._strategy.challenge(response)
                return response

            logger.debug(
                f"auth.ok: user={principal.user_id} strategy={principal.strategy} "
                f"{request.method} {request.path}"
            )
            return view(*args, principal=principal, **kwargs)

        return inner


__all__ = ["AuthMiddleware"]
