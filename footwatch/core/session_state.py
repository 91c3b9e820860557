"""
Monitoring session state machine.

    [create] -> active
    active  -> paused | ended
    paused  -> active | ended
    ended   -> (terminal)

Dependencies: None (pure domain layer)
System role: Transition rules enforced by the session manager
"""

import enum


class SessionStatus(str, enum.Enum):
    """
    Monitoring session states.

    ACTIVE: Device is recording, samples accepted
    PAUSED: Recording suspended, may resume
    ENDED: Terminal; ended_at stamped, no further writes
    """

    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


ALLOWED_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.ACTIVE: frozenset({SessionStatus.ACTIVE, SessionStatus.PAUSED, SessionStatus.ENDED}),
    SessionStatus.PAUSED: frozenset({SessionStatus.PAUSED, SessionStatus.ACTIVE, SessionStatus.ENDED}),
    SessionStatus.ENDED: frozenset(),
}


def is_terminal(status: SessionStatus) -> bool:
    """Whether no transition may leave ``status``."""
    return not ALLOWED_TRANSITIONS[SessionStatus(status)]


def can_transition(current: SessionStatus, target: SessionStatus) -> bool:
    """
    Check a status change against the state machine.

    Same-state requests on a non-terminal session are allowed (no-op).

    Args:
        current: Status stored on the session
        target: Requested status

    Returns:
        bool: True if the change is permitted
    """
    return SessionStatus(target) in ALLOWED_TRANSITIONS[SessionStatus(current)]
