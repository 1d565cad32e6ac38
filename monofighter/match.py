"""Round clock, round results and the best-of-three flow of a fight."""

from __future__ import annotations

import random
from dataclasses import dataclass

from monofighter.character import MAX_MIGRATION_TIME, TimerData
from monofighter.timing import FRAME_TIME
from monofighter.transition import Transition

MAX_ROUND_TIME = 99
MAX_ROUND_START_TIME = 100
HALF_ROUND_START_TIME = MAX_ROUND_START_TIME // 2
OUTCOME_TIME = 150
KO_ACTIVE_TIME = 0
FINISHER_TIME = TimerData.MAX_FINISHER
KO_CONDITION_TIME = 20
MAX_ROUND = 3
MAX_WIN_COUNT = 2
TIME_STEP = 1.0

WIN_SCENE = "GameWinScene"
LOSE_SCENE = "GameLoseScene"


def random_between(min_value: float, max_value: float) -> float:
    """A uniformly distributed number between the two bounds."""
    return random.uniform(min_value, max_value)


@dataclass(frozen=True)
class FighterStatus:
    """What the match needs to know about a fighter this frame.

    ``hp`` is as the fighter reports it: the player's runs up from negative
    to zero, the enemy's down from positive to zero.
    """

    hp: int
    position_y: float = 0.0
    is_finisher_second_attack: bool = False
    is_tackle: bool = False


class Match:
    """Keeps the round clock and decides who takes each round and the match."""

    def __init__(self, transition: Transition | None = None) -> None:
        self.transition = transition if transition is not None else Transition()
        self.current_seconds = MAX_ROUND_TIME
        self.frame_time = FRAME_TIME
        self.elapsed_time = 0.0
        self.migration_timer = MAX_MIGRATION_TIME
        self.round_start_timer = MAX_ROUND_START_TIME
        self.round_number = 1
        self.player_wins = 0
        self.enemy_wins = 0
        self.is_round_transition = False
        self.is_player_win = False
        self.is_drow = False
        self.is_time_over = False
        self.is_debug = False
        self.gray_scale = False
        self.is_transition_start = False
        self.is_transition_end = False
        self.fighters_need_reset = False

    def tick_clock(self, delta_time: float, player_finisher_timer: int) -> int:
        """Count down the round intro, then the round clock; returns the seconds left.

        The clock stands still during a finisher, after the round is decided
        and in debug mode.
        """
        self.round_start_timer -= 1
        if self.round_start_timer <= 0:
            self.elapsed_time += delta_time
            if (self.current_seconds > 0 and self.elapsed_time >= TIME_STEP
                    and self.migration_timer == MAX_MIGRATION_TIME
                    and player_finisher_timer == FINISHER_TIME and not self.is_debug):
                self.current_seconds -= 1
                self.elapsed_time = 0.0
        return self.current_seconds

    def handle_round_result(self, player: FighterStatus, enemy: FighterStatus) -> None:
        """Judge the round by time over or knock-out."""
        if self.current_seconds <= 0:
            if abs(enemy.hp) < abs(player.hp):
                self._player_win(player, enemy, is_time_over=True)
            elif abs(enemy.hp) > abs(player.hp):
                self._enemy_win(player, is_time_over=True)
            else:
                self._draw(enemy, is_time_over=True)
            return

        if self.is_round_transition:
            return
        if enemy.hp <= 0 and player.hp < 0:
            self._player_win(player, enemy, is_time_over=False)
        if player.hp >= 0 and enemy.hp > 0:
            self._enemy_win(player, is_time_over=False)
        if player.hp >= 0 and enemy.hp <= 0:
            self._draw(enemy, is_time_over=False)

    def handle_game_outcome(self, player: FighterStatus,
                            enemy: FighterStatus) -> str | None:
        """Run one frame of match flow; returns the result scene once it is due."""
        if not self.is_round_transition:
            self.handle_round_result(player, enemy)

        self.is_transition_end = self.transition.end_scene_transition(self.is_transition_end)

        if self.player_wins == MAX_WIN_COUNT:
            return self._finish(WIN_SCENE)
        if self.enemy_wins == MAX_WIN_COUNT:
            return self._finish(LOSE_SCENE)

        if self.is_round_transition:
            next_round = MAX_ROUND if self.is_drow else self.round_number + 1
            self.change_round(min(next_round, MAX_ROUND))
        return None

    def change_round(self, round_number: int) -> bool:
        """Run the fade between rounds and reset the match state while dark.

        Returns True on the frame of the reset; ``fighters_need_reset`` is
        then raised for the owner of the fighters to clear.
        """
        self.is_round_transition = self.transition.round_transition(self.is_round_transition)
        if not self.transition.is_round_transitioning:
            return False

        self.is_player_win = False
        self.is_drow = False
        self.is_time_over = False
        self.round_number = round_number
        self.fighters_need_reset = True

        self.current_seconds = MAX_ROUND_TIME
        self.migration_timer = MAX_MIGRATION_TIME
        self.frame_time = FRAME_TIME
        self.elapsed_time = 0.0
        self.round_start_timer = MAX_ROUND_START_TIME

        self.gray_scale = False
        self.transition.is_round_transitioning = False
        return True

    def _finish(self, scene: str) -> str | None:
        self.is_transition_start = True
        if self.transition.start_scene_transition(self.is_transition_start):
            return scene
        return None

    def _player_win(self, player: FighterStatus, enemy: FighterStatus,
                    is_time_over: bool) -> None:
        self.migration_timer -= 1
        self.is_player_win = True
        if not is_time_over:
            self.gray_scale = True
            if (self.migration_timer < KO_ACTIVE_TIME and enemy.position_y <= 0.0
                    and not player.is_finisher_second_attack and not player.is_tackle):
                self.player_wins += 1
                self.is_round_transition = True
        else:
            self.is_time_over = True
            if self.migration_timer < KO_ACTIVE_TIME:
                self.player_wins += 1
                self.is_round_transition = True

    def _enemy_win(self, player: FighterStatus, is_time_over: bool) -> None:
        self.migration_timer -= 1
        self.is_player_win = False
        if not is_time_over:
            self.gray_scale = True
            if self.migration_timer < KO_ACTIVE_TIME and player.position_y <= 0.0:
                self.enemy_wins += 1
                self.is_round_transition = True
        else:
            self.is_time_over = True
            if self.migration_timer < KO_ACTIVE_TIME:
                self.enemy_wins += 1
                self.is_round_transition = True

    def _draw(self, enemy: FighterStatus, is_time_over: bool) -> None:
        self.migration_timer -= 1
        self.is_drow = True
        if not is_time_over:
            self.is_player_win = True
            ready = self.migration_timer < KO_ACTIVE_TIME and enemy.position_y <= 0.0
        else:
            self.is_time_over = True
            ready = self.migration_timer < KO_ACTIVE_TIME
        if ready:
            if self.round_number != MAX_ROUND:
                self.player_wins += 1
                self.enemy_wins += 1
            self.is_round_transition = True