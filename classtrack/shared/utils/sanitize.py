# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from markupsafe import Markup, escape


def sanitize_input(value: Any) -> str:
    """Trim, strip markup tags and HTML-escape user supplied text.

    Numbers are accepted and converted to their string form; ``None`` becomes
    an empty string so that "required" checks see it as missing.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        raise TypeError("boolean is not a text value")
    text = str(value).strip()
    if not text:
        return ""
    stripped = Markup(text).striptags()
    return str(escape(stripped))


__all__ = ["sanitize_input"]
