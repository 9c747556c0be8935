# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    TOO_LONG = "too_long"
    INVALID_CHOICE = "invalid_choice"
    INVALID_DATETIME = "invalid_datetime"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_SHORT = "password_too_short"
    INVALID_SORT = "invalid_sort"
