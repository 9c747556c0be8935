# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Personal todo tracker API: accounts, owner-scoped todos and completion stats."""

__version__ = "1.0.0"
