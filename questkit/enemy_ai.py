"""Enemy characters and the controller that drives their alert states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable

from .character import CustomCharacter
from .enemy import EnemyInfo
from .helpers import Vector

CAUTION_TO_DETECTED_DELAY = 2.0
RELEASE_TARGET_DELAY = 5.0

KEY_CURRENT_STATE = "Current State"
KEY_CACHED_STATE = "Cached State"
KEY_TARGET_PLAYER = "Target Player"
KEY_ORIGIN_LOCATION = "Origin Location"

TIMER_CAUTION_TO_DETECTED = "caution_to_detected"
TIMER_RELEASE_TARGET = "release_target"


class EnemyState(IntEnum):
    """Alert state of an enemy."""

    PATROL = 0
    CAUTION = 1
    DETECTED = 2
    HURT = 3


@dataclass
class EnemyCharacter(CustomCharacter):
    """An enemy that shows its alert state and reports its death."""

    sight_radius: float = 1500.0
    lose_sight_radius: float = 2000.0
    sight_angle: float = 60.0
    location: Vector = field(default_factory=Vector)
    enemy_info_index: int = 0
    res_idx: int = 0
    enemy_info: EnemyInfo | None = None
    question_mark_visible: bool = False
    exclamation_mark_visible: bool = False
    hp_percent: float = 1.0
    destroyed: bool = False
    controller: EnemyController | None = field(default=None, repr=False, compare=False)
    removal_listener: Callable[[int], None] | None = field(
        default=None, repr=False, compare=False
    )
    kill_listener: Callable[[list[int]], None] | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def team_id(self) -> int:
        return 2

    def take_damage(self, damage: float) -> float:
        """Apply damage and refresh the health bar fraction."""
        dealt = super().take_damage(damage)
        self.hp_percent = self.hp / self.max_hp
        return dealt

    def on_hurt(self) -> None:
        if self.controller is not None:
            self.controller.on_hurt()
        super().on_hurt()

    def on_dead(self) -> None:
        """Report the removal and the kill, then destroy the enemy."""
        if self.removal_listener is not None:
            self.removal_listener(self.res_idx)
        labels = list(self.enemy_info.labels) if self.enemy_info is not None else []
        if self.kill_listener is not None:
            self.kill_listener(labels)
        super().on_dead()
        self.destroyed = True

    def update_state(self, state: EnemyState) -> None:
        """Show the question or exclamation mark that matches the state."""
        if state is EnemyState.PATROL:
            self.question_mark_visible = False
            self.exclamation_mark_visible = False
        elif state is EnemyState.CAUTION:
            self.question_mark_visible = True
            self.exclamation_mark_visible = False
        elif state is EnemyState.DETECTED:
            self.question_mark_visible = False
            self.exclamation_mark_visible = True


class EnemyController:
    """Switches an enemy between patrol, caution, detected and hurt states."""

    def __init__(self, pawn: EnemyCharacter) -> None:
        if pawn is None:
            raise RuntimeError("an enemy controller needs an enemy to possess")
        self.pawn = pawn
        self.state = EnemyState.PATROL
        self.blackboard: dict[str, Any] = {
            KEY_ORIGIN_LOCATION: pawn.location,
            KEY_TARGET_PLAYER: None,
        }
        self._timers: dict[str, float] = {}
        pawn.controller = self
        self.set_state(EnemyState.PATROL)

    @property
    def team_id(self) -> int:
        return 2

    @property
    def target(self) -> Any:
        return self.blackboard.get(KEY_TARGET_PLAYER)

    @property
    def pending_timers(self) -> dict[str, float]:
        """Remaining seconds of each running timer."""
        return dict(self._timers)

    def on_target_perception_update(self, is_player: bool, sensed: bool, target: Any) -> None:
        """React to a perceived actor entering or leaving sight."""
        if not is_player:
            return
        if sensed:
            if self.state is EnemyState.PATROL:
                self.set_state(EnemyState.CAUTION)
                self._timers[TIMER_CAUTION_TO_DETECTED] = CAUTION_TO_DETECTED_DELAY
                self.blackboard[KEY_TARGET_PLAYER] = target
            elif self.state is EnemyState.DETECTED:
                self._timers.pop(TIMER_RELEASE_TARGET, None)
        else:
            if self.state is EnemyState.CAUTION:
                self.set_state(EnemyState.PATROL)
                self._timers.pop(TIMER_CAUTION_TO_DETECTED, None)
            elif self.state is EnemyState.DETECTED:
                self._timers[TIMER_RELEASE_TARGET] = RELEASE_TARGET_DELAY

    def tick(self, delta: float) -> None:
        """Advance running timers and fire those that have run out."""
        handlers = {
            TIMER_CAUTION_TO_DETECTED: self.caution_to_detected,
            TIMER_RELEASE_TARGET: self.release_target,
        }
        for name in list(self._timers):
            if name not in self._timers:
                continue
            self._timers[name] -= delta
            if self._timers[name] <= 0:
                handlers[name]()

    def on_hurt(self) -> None:
        """Remember the current state and enter the hurt state."""
        self.blackboard[KEY_CACHED_STATE] = self.state
        self.set_state(EnemyState.HURT)

    def caution_to_detected(self) -> None:
        self._timers.pop(TIMER_CAUTION_TO_DETECTED, None)
        self.set_state(EnemyState.DETECTED)

    def release_target(self) -> None:
        self._timers.pop(TIMER_RELEASE_TARGET, None)
        self.blackboard[KEY_TARGET_PLAYER] = None
        self.set_state(EnemyState.PATROL)

    def set_state(self, state: EnemyState) -> None:
        """Enter a state and show it on the possessed enemy."""
        self.state = EnemyState(state)
        self.blackboard[KEY_CURRENT_STATE] = self.state
        if self.pawn is None:
            raise RuntimeError("the controller has no enemy")
        self.pawn.update_state(self.state)