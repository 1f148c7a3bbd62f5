"""
Session Lifecycle

State table for mentorship sessions:

    proposed ──confirm──▶ confirmed ──complete──▶ completed
       │                     │  └────mark_no_show──▶ no_show
       └──────cancel─────────┴──cancel──▶ cancelled

completed, no_show and cancelled are terminal. Deletion is allowed only
from proposed or cancelled. Notes may be rewritten while confirmed or
completed without changing status.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional

from src.domain.entities import SessionStatus


class SessionTransition(str, Enum):
    confirm = "confirm"
    cancel = "cancel"
    complete = "complete"
    mark_no_show = "mark_no_show"
    delete = "delete"
    update_notes = "update_notes"


TRANSITION_SOURCES: Dict[SessionTransition, FrozenSet[SessionStatus]] = {
    SessionTransition.confirm: frozenset({SessionStatus.proposed}),
    SessionTransition.cancel: frozenset(
        {SessionStatus.proposed, SessionStatus.confirmed}
    ),
    SessionTransition.complete: frozenset({SessionStatus.confirmed}),
    SessionTransition.mark_no_show: frozenset({SessionStatus.confirmed}),
    SessionTransition.delete: frozenset(
        {SessionStatus.proposed, SessionStatus.cancelled}
    ),
    SessionTransition.update_notes: frozenset(
        {SessionStatus.confirmed, SessionStatus.completed}
    ),
}

# Target status per transition; None means status is left alone (or the row goes away)
TRANSITION_TARGETS: Dict[SessionTransition, Optional[SessionStatus]] = {
    SessionTransition.confirm: SessionStatus.confirmed,
    SessionTransition.cancel: SessionStatus.cancelled,
    SessionTransition.complete: SessionStatus.completed,
    SessionTransition.mark_no_show: SessionStatus.no_show,
    SessionTransition.delete: None,
    SessionTransition.update_notes: None,
}

TERMINAL_STATUSES: FrozenSet[SessionStatus] = frozenset(
    {SessionStatus.cancelled, SessionStatus.completed, SessionStatus.no_show}
)

ACTIVE_STATUSES: FrozenSet[SessionStatus] = frozenset(
    {SessionStatus.proposed, SessionStatus.confirmed}
)


def allowed_sources(transition: SessionTransition) -> FrozenSet[SessionStatus]:
    return TRANSITION_SOURCES[transition]


def target_status(transition: SessionTransition) -> Optional[SessionStatus]:
    """Status a transition moves the session to, or None when status is kept"""
    return TRANSITION_TARGETS[transition]


def can_apply(transition: SessionTransition, status: SessionStatus) -> bool:
    """True if `transition` is legal from `status`"""
    return status in TRANSITION_SOURCES[transition]


def describe_illegal(transition: SessionTransition, status: SessionStatus) -> str:
    allowed = ", ".join(sorted(s.value for s in TRANSITION_SOURCES[transition]))
    return (
        f"Cannot {transition.value.replace('_', ' ')} a session that is "
        f"{status.value} (allowed from: {allowed})"
    )


class ConfirmPolicy(str, Enum):
    """Who may confirm a proposed session"""

    attendee = "attendee"
    either = "either"


def may_confirm(policy: ConfirmPolicy, is_host: bool, is_attendee: bool) -> bool:
    if policy == ConfirmPolicy.either:
        return is_host or is_attendee
    return is_attendee
