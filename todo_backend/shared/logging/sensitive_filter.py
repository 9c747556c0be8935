# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

_RULES: list[tuple[re.Pattern[str], str]] = [
    # bare JWTs, wherever they show up
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]*"), _REDACTED),
    (re.compile(r"(bearer\s+)\S{8,}", re.IGNORECASE), rf"\1{_REDACTED}"),
    (re.compile(r"(authorization\s*[:=]\s*['\"]?)[^'\"\s]{8,}", re.IGNORECASE), rf"\1{_REDACTED}"),
    (
        re.compile(r"((?:jwt_)?(?:secret|token)\s*[:=]\s*['\"]?)[^'\"\s,]{6,}", re.IGNORECASE),
        rf"\1{_REDACTED}",
    ),
    (re.compile(r"((?:password|pwd)\s*[:=]\s*['\"]?)[^'\"\s,]+", re.IGNORECASE), rf"\1{_REDACTED}"),
    # credentials inside a database URL
    (re.compile(r"(\w+(?:\+\w+)?://[^:/@\s]+:)[^@\s]+@"), rf"\1{_REDACTED}@"),
    # keep the domain so signup/login problems stay traceable per provider
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: scrub the message in place and always let it through."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
