import dataclasses
import random

import pytest

from barco.constants import (
    INITIAL_LIVES, LEVEL_DURATION_S, MOVE_UP, PLAYER_SIZE, PLAYER_SPEED,
    PLAYER_Y, POINTS_PER_ENEMY
)
from barco.enemy import Enemy
from barco.friend import Friend
from barco.logger import GameLogger
from barco.session import ACTIVE, GAME_OVER, GameSession


def enemy_on_player(session):
    p = session.player
    return Enemy(p.x + 10, p.y + 10, 100)


def test_new_session_defaults(session):
    assert session.score == 0
    assert session.lives == INITIAL_LIVES
    assert session.level == 1
    assert session.enemies == []
    assert session.friends == []
    assert session.state == ACTIVE


@pytest.mark.parametrize("width, height", [(0, 600), (800, 0), (-5, 600), (800, PLAYER_SIZE - 1)])
def test_invalid_playfield_rejected(width, height):
    with pytest.raises(ValueError):
        GameSession(width, height)


def test_held_key_moves_player(session):
    session.input.press(MOVE_UP)
    session.update(0.1)
    assert session.player.y == pytest.approx(PLAYER_Y - PLAYER_SPEED * 0.1)


def test_enemy_hit_costs_a_life_and_no_points(session):
    session.enemies.append(enemy_on_player(session))
    session.update(0.01)
    assert session.lives == INITIAL_LIVES - 1
    assert session.score == 0
    assert session.enemies == []


def test_dodged_enemy_scores_times_level(session):
    session.level = 3
    session.enemies.append(Enemy(-29, 500, 100))
    session.update(0.02)
    assert session.score == POINTS_PER_ENEMY * 3
    assert session.enemies == []


def test_every_exiting_enemy_is_scored(session):
    session.enemies += [Enemy(-29, 500, 100), Enemy(-29.5, 550, 100), Enemy(400, 500, 100)]
    session.update(0.02)
    assert session.score == 2 * POINTS_PER_ENEMY
    assert len(session.enemies) == 1
    assert session.enemies[0].x == pytest.approx(398)


def test_friend_grants_life_without_points(session):
    p = session.player
    session.friends.append(Friend(p.x + 10, p.y + 10, 10))
    session.update(0.01)
    assert session.lives == INITIAL_LIVES + 1
    assert session.score == 0
    assert session.friends == []


def test_lives_are_not_capped(rng):
    session = GameSession(800, 600, rng=rng, lives=50)
    p = session.player
    session.friends += [Friend(p.x + 10, p.y + 10, 10) for _ in range(5)]
    session.update(0.01)
    assert session.lives == 55


def test_single_hit_with_one_life_ends_the_game(rng):
    session = GameSession(800, 600, rng=rng, lives=1)
    session.enemies.append(enemy_on_player(session))
    session.update(0.01)
    assert session.game_over
    assert session.state == GAME_OVER
    assert session.lives == 0

    before = (session.score, session.lives, session.level, session.player.y, len(session.enemies))
    session.input.press(MOVE_UP)
    for _ in range(300):
        session.update(0.1)
    after = (session.score, session.lives, session.level, session.player.y, len(session.enemies))
    assert before == after


def test_game_over_skips_rest_of_frame(rng):
    session = GameSession(800, 600, rng=rng, lives=1)
    p = session.player
    session.enemies.append(enemy_on_player(session))
    session.friends.append(Friend(p.x + 10, p.y + 10, 10))
    session.update(0.01)
    assert session.game_over
    assert session.lives == 0


def test_level_up_is_independent_of_step_size(rng):
    small = GameSession(800, 600, rng=random.Random(1), lives=10**6)
    for _ in range(60):
        small.update(LEVEL_DURATION_S / 60)

    big = GameSession(800, 600, rng=random.Random(1), lives=10**6)
    big.update(LEVEL_DURATION_S)

    assert small.level == big.level == 2
    assert small.game_time == big.game_time == 0


def test_no_level_up_before_duration(rng):
    session = GameSession(800, 600, rng=rng, lives=10**6)
    for _ in range(59):
        session.update(LEVEL_DURATION_S / 60)
    assert session.level == 1
    assert session.game_time == pytest.approx(LEVEL_DURATION_S * 59 / 60)


def test_level_keeps_rising(rng):
    session = GameSession(800, 600, rng=rng, lives=10**6)
    for _ in range(12):
        session.update(LEVEL_DURATION_S)
    assert session.level == 13
    assert session.spawner.get_enemy_interval(session.level) == 500


@pytest.mark.parametrize("dt", [-0.1, float("nan"), float("inf"), float("-inf")])
def test_bad_dt_is_skipped(session, dt):
    session.input.press(MOVE_UP)
    session.update(dt)
    assert session.player.y == PLAYER_Y
    assert session.game_time == 0
    assert session.spawner.enemy_timer == 0


def test_spawner_feeds_the_session(session):
    session.update(2.0)
    assert len(session.enemies) == 1
    assert session.enemies[0].x < 800


def test_restart_gives_a_fresh_session(rng):
    session = GameSession(800, 600, rng=rng, lives=1)
    session.score = 120
    session.level = 4
    session.friends.append(Friend(500, 300, 10))
    session.enemies.append(enemy_on_player(session))
    session.update(0.01)
    assert session.game_over

    fresh = session.restart()
    assert fresh is not session
    assert fresh.score == 0
    assert fresh.lives == 1
    assert fresh.level == 1
    assert fresh.enemies == []
    assert fresh.friends == []
    assert fresh.state == ACTIVE


def test_restart_uses_default_lives(session):
    assert session.restart().lives == INITIAL_LIVES


def test_snapshot_is_read_only(session):
    session.enemies.append(Enemy(400, 100, 100))
    snap = session.snapshot()
    assert snap.player == session.player.rect
    assert snap.enemies == ((400, 100, 30, 30),)
    assert snap.friends == ()
    assert snap.next_level_in == LEVEL_DURATION_S
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 99


def test_long_run_invariants():
    session = GameSession(800, 600, rng=random.Random(99), lives=10**6)
    rng = random.Random(5)
    for _ in range(60 * 120):
        if rng.random() < 0.05:
            session.input.clear()
            session.input.press(rng.choice(["up", "down"]))
        session.update(1 / 60)
        assert 0 <= session.player.y <= 600 - PLAYER_SIZE
        assert session.score % POINTS_PER_ENEMY == 0
        assert not any(e.marked_for_deletion for e in session.enemies)
        assert not any(f.marked_for_deletion for f in session.friends)
    assert session.level >= 5


def test_session_events_are_logged(tmp_path, rng):
    log_file = tmp_path / "log.md"
    session = GameSession(800, 600, rng=rng, lives=1, logger=GameLogger(str(log_file)))
    session.update(LEVEL_DURATION_S)
    session.enemies.append(enemy_on_player(session))
    session.update(0.01)

    text = log_file.read_text(encoding="utf-8")
    assert "| START |" in text
    assert "Reached level 2" in text
    assert "| HIT |" in text
    assert "| GAME OVER |" in text
