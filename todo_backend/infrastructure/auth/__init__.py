# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .guard import auth_required, bearer_token

__all__ = ["auth_required", "bearer_token"]
