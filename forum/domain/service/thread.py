"""Reply thread assembly.

Replies are stored flat. For display they are folded into two levels: the
top-level replies of a post, and for each top-level reply every descendant
beneath it in chronological order.
"""

from dataclasses import dataclass, field

from forum.domain.model import Reply
from forum.domain.value import ReplyId


@dataclass
class ReplyThread:
    """Two-level view of a post's replies.

    ``children`` is keyed by the id of a top-level reply. Every reply appears
    exactly once, either in ``top_level`` or in one bucket of ``children``.
    """

    top_level: list[Reply] = field(default_factory=list)
    children: dict[ReplyId, list[Reply]] = field(default_factory=dict)

    def children_of(self, reply_id: ReplyId) -> list[Reply]:
        """Descendants of a top-level reply, oldest first."""
        return self.children.get(reply_id, [])


def _is_root(reply: Reply, by_id: dict[ReplyId, Reply]) -> bool:
    return reply.parent_reply_id is None or reply.parent_reply_id not in by_id


def _find_root(reply: Reply, by_id: dict[ReplyId, Reply]) -> Reply | None:
    """Walk the parent chain up to the first top-level ancestor.

    Returns None when the chain loops back on itself.
    """
    seen: set[ReplyId] = {reply.id}
    current = by_id[reply.parent_reply_id]  # type: ignore[index]
    while not _is_root(current, by_id):
        if current.id in seen:
            return None
        seen.add(current.id)
        current = by_id[current.parent_reply_id]  # type: ignore[index]
    return current


def assemble_thread(replies: list[Reply]) -> ReplyThread:
    """Fold a flat reply list into top-level replies and descendant buckets.

    Algorithm:
    1. Sort replies by creation time
    2. Index them by id
    3. A reply without a parent, or whose parent is not in the list, is top-level
    4. Any other reply is appended to the bucket of its top-level ancestor,
       however deep it is nested
    5. A reply caught in a parent cycle has no ancestor and is made top-level

    Args:
        replies: Replies of a single post, in any order

    Returns:
        ReplyThread with every bucket in chronological order
    """
    ordered = sorted(replies, key=lambda r: r.created_at)
    by_id = {reply.id: reply for reply in ordered}

    thread = ReplyThread()
    for reply in ordered:
        if _is_root(reply, by_id):
            thread.top_level.append(reply)
            continue

        root = _find_root(reply, by_id)
        if root is None:
            thread.top_level.append(reply)
            continue
        thread.children.setdefault(root.id, []).append(reply)

    return thread
