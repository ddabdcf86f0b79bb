"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Literal

# Decoded claims of a verified API token
ApiTokenPayload = dict[str, Any]

TokenSource = Literal["header", "session"]

VerifyCallback = Callable[[str], Awaitable[ApiTokenPayload]]
