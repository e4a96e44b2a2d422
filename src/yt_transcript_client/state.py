"""Request lifecycle states and the allowed transitions between them.

Each state carries only its own payload, so a result and an error message
can never be held at the same time.
"""

import logging
from typing import Literal, Union

from pydantic import BaseModel

from yt_transcript_client.errors import InvalidTransitionError
from yt_transcript_client.models import RequestState, TranscriptResult

logger = logging.getLogger(__name__)


class Idle(BaseModel):
    model_config = {"frozen": True}

    status: Literal[RequestState.IDLE] = RequestState.IDLE


class Pending(BaseModel):
    model_config = {"frozen": True}

    status: Literal[RequestState.PENDING] = RequestState.PENDING
    reference: str


class Succeeded(BaseModel):
    model_config = {"frozen": True}

    status: Literal[RequestState.SUCCEEDED] = RequestState.SUCCEEDED
    result: TranscriptResult


class Failed(BaseModel):
    model_config = {"frozen": True}

    status: Literal[RequestState.FAILED] = RequestState.FAILED
    message: str
    kind: Literal["transport", "service"]


State = Union[Idle, Pending, Succeeded, Failed]

TRANSITIONS: dict[RequestState, frozenset[RequestState]] = {
    RequestState.IDLE: frozenset({RequestState.PENDING}),
    RequestState.PENDING: frozenset(
        {
            RequestState.IDLE,
            RequestState.PENDING,
            RequestState.SUCCEEDED,
            RequestState.FAILED,
        }
    ),
    RequestState.SUCCEEDED: frozenset({RequestState.PENDING}),
    RequestState.FAILED: frozenset({RequestState.PENDING}),
}


class RequestStateMachine:
    """Holds the current state and rejects undocumented transitions."""

    def __init__(self):
        self._state: State = Idle()

    @property
    def state(self) -> State:
        return self._state

    @property
    def status(self) -> RequestState:
        return self._state.status

    def transition(self, new_state: State) -> State:
        current = self._state.status
        if new_state.status not in TRANSITIONS[current]:
            raise InvalidTransitionError(
                f"Cannot move from {current.value} to {new_state.status.value}"
            )
        logger.info(f"Request state: {current.value} -> {new_state.status.value}")
        self._state = new_state
        return new_state
