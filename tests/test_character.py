import pytest

from monofighter.attack import AABB, AttackEditor, AttackParameter, Direction, Vector3
from monofighter.character import (
    ATTACK_RIGHT_EDGE,
    DEFAULT_COLLISION,
    LEFT_EDGE,
    RIGHT_EDGE,
    AttackKind,
    Behavior,
    Character,
    TimerData,
    advance_animation_time,
)


def test_advance_animation_time_clamps_without_loop():
    assert advance_animation_time(0.9, 60.0, 1.0, 2.0, False) == 2.0


def test_advance_animation_time_loop_stays_below_duration():
    result = advance_animation_time(0.9, 60.0, 1.0, 2.0, True)
    assert 0.0 <= result < 2.0


def test_advance_animation_time_zero_delta_keeps_time():
    assert advance_animation_time(0.5, 60.0, 0.0, 2.0, False) == 0.5


def test_apply_behavior_request_switches_and_clears():
    c = Character()
    assert c.apply_behavior_request() is None
    c.request_behavior(Behavior.JUMP)
    assert c.apply_behavior_request() is Behavior.JUMP
    assert c.state.behavior is Behavior.JUMP
    assert c.state.behavior_request is None


def test_start_and_end_attack():
    c = Character()
    c.start_attack(AttackKind.TACKLE)
    assert c.state.behavior_request is Behavior.ATTACK
    assert AttackKind.TACKLE in c.attack.active
    c.attack.is_attack = True
    c.attack.attack_animation_frame = 12
    c.end_attack(AttackKind.TACKLE)
    assert c.state.behavior_request is Behavior.ROOT
    assert AttackKind.TACKLE not in c.attack.active
    assert c.attack.is_attack is False
    assert c.attack.attack_animation_frame == 0


def test_end_down_clears_hit():
    c = Character()
    c.state.is_down = True
    c.state.hits.add(AttackKind.UPPERCUT)
    c.timers.down_animation = 3
    c.end_down(AttackKind.UPPERCUT)
    assert AttackKind.UPPERCUT not in c.state.hits
    assert c.state.is_down is False
    assert c.timers.down_animation == TimerData.MAX_DOWN_ANIMATION
    assert c.state.behavior_request is Behavior.ROOT


def test_reset_restores_round_state():
    c = Character()
    c.base.hp = 40
    c.base.guard_gauge = 20.0
    c.combo_count = 5
    c.timers.finisher = 3
    c.timers.stan = 1
    c.attack.active.update({AttackKind.SHOT, AttackKind.FINISHER})
    c.state.hits.update({AttackKind.BULLET, AttackKind.LIGHT_PUNCH})
    c.collision = AABB(Vector3(1, 1, 1), Vector3(2, 2, 2))
    c.is_reset = True
    c.reset()
    assert c.base.hp == 40
    assert c.base.guard_gauge == 0.0
    assert c.combo_count == 0
    assert c.timers.finisher == TimerData.MAX_FINISHER
    assert c.timers.stan == TimerData.MAX_STAN
    assert c.attack.active == set()
    assert c.state.hits == set()
    assert c.collision == DEFAULT_COLLISION
    assert c.is_reset is False


@pytest.mark.parametrize(
    "frame, attack, recovery",
    [(3, False, False), (5, True, False), (10, True, True), (15, False, True), (25, False, False)],
)
def test_evaluate_attack_timing(frame, attack, recovery):
    c = Character()
    c.attack.attack_start_time = 5
    c.attack.attack_end_time = 10
    c.attack.recovery_time = 20
    c.attack.attack_animation_frame = frame
    c.evaluate_attack_timing()
    assert c.attack.is_attack is attack
    assert c.attack.is_recovery is recovery


def test_clamp_to_stage_right_edge_while_attacking():
    c = Character()
    c.attack.is_attack = True
    c.position = Vector3(10.0, 0.5, 0.0)
    c.clamp_to_stage()
    assert c.position.x == RIGHT_EDGE
    assert c.position.y == 0.5


def test_clamp_to_stage_eases_off_wall_when_idle():
    c = Character()
    c.position = Vector3(10.0, 0.0, 0.0)
    c.clamp_to_stage()
    assert ATTACK_RIGHT_EDGE < c.position.x < RIGHT_EDGE


def test_clamp_to_stage_left_edge_facing_right():
    c = Character()
    c.position = Vector3(-10.0, 0.0, 0.0)
    c.clamp_to_stage()
    assert c.position.x == LEFT_EDGE


def test_clamp_to_stage_grounds_jump_on_contact():
    c = Character()
    c.position = Vector3(0.0, 2.0, 0.0)
    c.request_behavior(Behavior.JUMP)
    c.state.is_hit_character = True
    c.clamp_to_stage()
    assert c.position.y == 0.0


def test_apply_attack_parameters_uses_facing_box(tmp_path):
    editor = AttackEditor(tmp_path / "p.json", tmp_path / "e.json")
    right = (Vector3(0.1, 0.2, 0.3), Vector3(1.0, 1.0, 1.0))
    left = (Vector3(-1.0, 0.0, 0.0), Vector3(-0.1, 1.0, 0.5))
    editor.parameters(True)["Punch"] = AttackParameter(
        attack_start_time=4, attack_end_time=8, damage=7, hit_stop=0.25,
        right_collision_min=right[0], right_collision_max=right[1],
        left_collision_min=left[0], left_collision_max=left[1],
    )
    c = Character()
    assert c.apply_attack_parameters(editor, "Punch", True) is True
    assert c.attack.damage == 7
    assert c.attack.attack_start_time == 4
    assert c.attack.hit_stop == 0.25
    assert c.collision == AABB(*right)

    c.state.direction = Direction.LEFT
    c.apply_attack_parameters(editor, "Punch", True)
    assert c.collision == AABB(*left)


def test_apply_attack_parameters_unknown_name(tmp_path):
    editor = AttackEditor(tmp_path / "p.json", tmp_path / "e.json")
    c = Character()
    assert c.apply_attack_parameters(editor, "Missing", False) is False
    assert c.collision == DEFAULT_COLLISION