"""
Approval-state rules for posts.

A post is created ``pending`` and the word-filter result decides whether it
stays pending (clean or flagged for review) or is auto-rejected. Afterwards
only admin actions move it.
"""

from typing import Optional, Tuple

from app.utils.word_filter import FilterResult

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"
APPROVAL_STATUSES = (PENDING, APPROVED, REJECTED)

ACTION_APPROVE = "approve"
ACTION_REJECT = "reject"
ACTION_DELETE = "delete"

ACTION_TARGETS = {
    ACTION_APPROVE: APPROVED,
    ACTION_REJECT: REJECTED,
}

AUTO_REJECT_SEVERITY = "high"
FLAGGED_WORDS_SEPARATOR = ", "


class InvalidTransition(Exception):
    def __init__(self, current_status: str, action: str):
        self.current_status = current_status
        self.action = action
        super().__init__(f"Post is already {current_status}")


def join_flagged_words(words) -> Optional[str]:
    return FLAGGED_WORDS_SEPARATOR.join(words) if words else None


def split_flagged_words(value: Optional[str]):
    if not value:
        return None
    return [word.strip() for word in value.split(",") if word.strip()]


def decide_initial_status(result: FilterResult) -> Tuple[str, Optional[str]]:
    """
    Decide the approval status and flagged-word metadata of a new post.

    Returns:
        ``(approval_status, flagged_words)``: ``rejected`` with the matches on
        a high-severity hit, ``pending`` with the matches on any other hit,
        ``pending`` with ``None`` when the content is clean.
    """
    status = PENDING
    flagged_words = None

    if result.highest_severity == AUTO_REJECT_SEVERITY:
        status = REJECTED
        flagged_words = join_flagged_words(result.flagged_words)
    elif not result.is_clean:
        flagged_words = join_flagged_words(result.flagged_words)

    return status, flagged_words


def resolve_transition(
    current_status: str, action: str, allow_remoderation: bool = False
) -> str:
    """
    Return the status an admin action moves a post to.

    Only pending posts can be approved or rejected unless
    ``allow_remoderation`` is set, in which case approved and rejected posts
    can be flipped to the other decision. Moving a post to the status it
    already has is never a valid transition.

    Raises:
        ValueError: unknown action.
        InvalidTransition: the action is not allowed from ``current_status``.
    """
    if action not in ACTION_TARGETS:
        raise ValueError(f"Invalid action: {action}")

    target = ACTION_TARGETS[action]
    if current_status == target:
        raise InvalidTransition(current_status, action)
    if current_status != PENDING and not allow_remoderation:
        raise InvalidTransition(current_status, action)

    return target
