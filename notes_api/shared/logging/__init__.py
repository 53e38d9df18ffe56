# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Logging for notes_api: loguru sinks, correlation ids and redaction."""

from .logger import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
    setup_logging,
)
from .sensitive_filter import sanitize_message, sanitize_record

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "sanitize_message",
    "sanitize_record",
    "set_correlation_id",
    "setup_logging",
]
