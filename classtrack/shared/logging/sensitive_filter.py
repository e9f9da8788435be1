# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction of credentials before a record reaches any sink."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

# (compiled pattern, replacement). Order matters: header and bearer rules run
# before the generic ``token=`` rule.
_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", re.I), rf"\1{_MASK}\3"),
    (re.compile(r"(bearer\s+)([\w\-.]{20,})", re.I), rf"\1{_MASK}"),
    (re.compile(r"((?:session[_-]?)?token\s*[:=]\s*['\"]?)([\w\-.]{20,})(['\"]?)"), rf"\1{_MASK}\3"),
    (re.compile(r"(session[_-]?id\s*[:=]\s*['\"]?)([\w\-.]{20,})(['\"]?)"), rf"\1{_MASK}\3"),
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)([\w\-]{8,})(['\"]?)", re.I), rf"\1{_MASK}\3"),
    (
        re.compile(r"((?:password(?:[_-]?hash)?|pwd)\s*[:=]\s*['\"]?)([^'\"\s,}]{6,})(['\"]?)", re.I),
        rf"\1{_MASK}\3",
    ),
    # Credentials embedded in a DATABASE_URL.
    (re.compile(r"(postgres(?:ql)?|mysql(?:\+\w+)?|mariadb)://([^:/@]+):([^@]+)@"), rf"\1://\2:{_MASK}@"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: rewrite the message in place and always let it through."""
    record["message"] = sanitize_message(record["message"])
    return True
