from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class InvalidConfiguration(ValueError):
    pass


class CopyKind(Enum):
    NAME = "name"
    CODEPOINT = "codepoint"
    HEX_CODEPOINT = "hex_codepoint"


@dataclass(frozen=True)
class AnimationState:
    copy_kind: CopyKind
    total_steps: int
    steps_done: int = 0
    progress: float = 0.0


def start(copy_kind: CopyKind, total_steps: int) -> AnimationState:
    if total_steps <= 0:
        raise InvalidConfiguration(f"total_steps must be > 0, got {total_steps}")
    return AnimationState(copy_kind=copy_kind, total_steps=int(total_steps))


def tick(state: AnimationState) -> AnimationState:
    # Progress comes from the step count, so the last step lands on exactly 1.0.
    if is_done(state):
        return state
    done = state.steps_done + 1
    return replace(state, steps_done=done, progress=min(1.0, done / state.total_steps))


def is_done(state: AnimationState) -> bool:
    return state.progress == 1.0
