"""Invite code generation for groups.

Codes are 6-character alphanumeric (A-Z, 0-9), generated server-side
with a cryptographic random source. Lookup is case-insensitive.
"""

from __future__ import annotations

import secrets
import string
from typing import TYPE_CHECKING

from fitchallenge.errors import PersistenceError

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

INVITE_CHARSET = string.ascii_uppercase + string.digits  # A-Z, 0-9
INVITE_LENGTH = 6
MAX_ATTEMPTS = 10


def generate_invite_code() -> str:
    """Generate a cryptographically random 6-character invite code."""
    return "".join(secrets.choice(INVITE_CHARSET) for _ in range(INVITE_LENGTH))


def normalize_invite_code(code: str) -> str:
    """Normalize an invite code for lookup: trimmed, uppercase."""
    return code.strip().upper()


def is_valid_invite_code(code: str) -> bool:
    return len(code) == INVITE_LENGTH and all(c in INVITE_CHARSET for c in code)


async def generate_unique_invite_code(store: EntityStore) -> str:
    """Generate an invite code no existing group uses."""
    for _ in range(MAX_ATTEMPTS):
        code = generate_invite_code()
        if await store.get_group_by_invite_code(code) is None:
            return code
    msg = f"Failed to generate unique invite code after {MAX_ATTEMPTS} attempts"
    raise PersistenceError(msg)
