"""Result variants returned at the assist boundary.

Callers branch on the type instead of probing a loosely shaped response::

    result = await analyze_game_state(state, client)
    if isinstance(result, AssistSuccess):
        show(result.payload)
    else:
        warn(result.reason)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from pydantic import BaseModel

PayloadT = TypeVar("PayloadT", bound=BaseModel)


@dataclass(frozen=True)
class AssistSuccess(Generic[PayloadT]):
    payload: PayloadT


@dataclass(frozen=True)
class AssistFailure:
    reason: str


AssistResult = Union[AssistSuccess[PayloadT], AssistFailure]
