"""Typed identifiers for forum entities.

Users are keyed by the identity provider's subject id, so ``UserId`` wraps a
string; everything the forum creates itself is keyed by UUID.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
PostId = NewType("PostId", UUID)
ReplyId = NewType("ReplyId", UUID)
VoteId = NewType("VoteId", UUID)
