# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sanitize import sanitize_input

__all__ = ["sanitize_input"]
