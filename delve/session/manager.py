"""
Session Manager - Creates and manages game sessions for the API.

A session is one single-player game hosted in memory:
- Created when a client starts a game
- Holds the current world state
- Resolves one input per request
- Ends on quit or when the client deletes it

Sessions never share a world. Saving to disk is the console
platform's job; API sessions live only as long as the process.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field

from ..engine_core.action import Input
from ..engine_core.generator import DEFAULT_SEED
from ..engine_core.reducer import TurnResolver
from ..engine_core.state import WorldState

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    An in-memory game session.

    `state` is the latest world state; after quit it stays readable but
    the session no longer accepts input.
    """
    session_id: str
    state: WorldState
    created_at: float
    turn_number: int = 0
    active: bool = True
    resolver: TurnResolver = field(default_factory=TurnResolver, repr=False)

    def submit(self, inp: Input) -> bool:
        """
        Resolve one turn.

        Returns False if the input ended the game.
        """
        if not self.active:
            raise RuntimeError(f"Session {self.session_id} has ended")
        next_state = self.resolver.resolve(self.state, inp)
        if next_state is None:
            self.active = False
            return False
        self.state = next_state
        self.turn_number += 1
        return True


class SessionManager:
    """
    Registry of live sessions.

    Usage:
        manager = SessionManager()
        session = manager.create_session(seed=7)
        session.submit(Input.dir(Direction.UP))
        manager.end_session(session.session_id)
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, seed: int | None = None) -> Session:
        session = Session(
            session_id=str(uuid.uuid4()),
            state=WorldState.new(DEFAULT_SEED if seed is None else seed),
            created_at=time.time(),
        )
        self._sessions[session.session_id] = session
        logger.info("Created session %s (seed=%d)", session.session_id, session.state.seed)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.active = False
        logger.info("Ended session %s after %d turns", session_id, session.turn_number)
        return True

    def list_sessions(self) -> list[str]:
        return list(self._sessions)
