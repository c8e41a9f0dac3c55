import math
import random

import pytest

from core.settings import FREDDIE_WIDTH, HEIGHT, PARTICLE_LIFE, SATISFIED_TICKS, WIDTH
from entities.donut import Donut
from entities.enemy import Freddie
from entities.particle import Particle, Shockwave, burst
from entities.powerup import PowerUp
from world.powerup_defs import DONUT_BOX, LIFE, TEXAS_BOX


def make_freddie(x=100.0, y=0.0, health=1, speed=2.0, wobble_amp=0.5):
    return Freddie(x, y, health=health, speed=speed, wobble=0.0, wobble_speed=0.1, wobble_amp=wobble_amp)


def test_freddie_falls_and_wobbles():
    f = make_freddie()
    f.update()
    assert f.pos.y == pytest.approx(2.0)
    assert f.pos.x == pytest.approx(100.0 + math.sin(0.1) * 0.5)
    assert f.alive


def test_freddie_stays_inside_side_walls():
    f = make_freddie(x=0.0, wobble_amp=5.0)
    for _ in range(50):
        f.update()
        assert FREDDIE_WIDTH / 2 <= f.pos.x <= WIDTH - FREDDIE_WIDTH / 2


def test_spawn_is_deterministic_for_a_seed(rng):
    a = Freddie.spawn(4, random.Random(9))
    b = Freddie.spawn(4, random.Random(9))
    assert a.pos == b.pos
    assert a.wobble_speed == b.wobble_speed
    assert a.health == a.max_health == 2
    assert 30 <= Freddie.spawn(1, rng).pos.x <= WIDTH - 30


def test_satisfied_is_permanent():
    f = make_freddie(health=2)
    assert not f.hit()
    assert f.health == 1
    assert f.hit()
    assert f.satisfied
    assert not f.hittable
    # no more hits land
    assert not f.hit()
    assert f.health == 0


def test_satisfied_freddie_shrinks_and_expires():
    f = make_freddie()
    f.hit()
    for _ in range(SATISFIED_TICKS):
        f.update()
    assert f.alive
    assert f.width < FREDDIE_WIDTH
    f.update()
    assert not f.alive
    assert not f.escaped


def test_unsatisfied_freddie_escapes_past_bottom():
    f = make_freddie(y=HEIGHT + 49, speed=2.0)
    f.update()
    assert f.escaped
    assert not f.alive


def test_satisfied_freddie_never_escapes():
    f = make_freddie(y=HEIGHT + 100)
    f.satisfy()
    f.update()
    assert f.alive
    assert not f.escaped


def test_donut_flies_straight_at_target():
    d = Donut(400, 550, 400, 0)
    assert d.vel.x == pytest.approx(0.0, abs=1e-9)
    assert d.vel.y == pytest.approx(-12.0)
    d.update()
    assert d.pos.y == pytest.approx(538.0)


def test_donut_aimed_at_launcher_goes_up():
    d = Donut(400, 550, 400, 550)
    assert d.vel.y == pytest.approx(-12.0)


def test_donut_removed_off_screen():
    d = Donut(0, 0, -100, 0)
    for _ in range(4):
        d.update()
    assert d.alive
    d.update()
    assert not d.alive


def test_donut_box_one_hit_collects():
    box = PowerUp(DONUT_BOX, 100, 100, wave=10)
    assert box.reward == 13
    assert box.hit()
    assert box.health == 0
    assert not box.alive
    assert not box.hit()


def test_other_powerups_give_one():
    assert PowerUp(TEXAS_BOX, 100, 100).reward == 1
    assert PowerUp(LIFE, 100, 100, wave=20).reward == 1


def test_powerup_falls_off_screen():
    p = PowerUp(LIFE, 100, HEIGHT + 59)
    p.update()
    assert p.pos.y > HEIGHT + 60
    assert not p.alive


def test_particles_expire(rng):
    p = Particle(0, 0, (255, 0, 0))
    for _ in range(PARTICLE_LIFE - 1):
        p.update()
    assert p.alive
    p.update()
    assert not p.alive
    assert len(burst(0, 0, (0, 0, 0), 12, rng)) == 12


def test_shockwave_grows():
    s = Shockwave(0, 0, (255, 215, 0), max_radius=100, life=10)
    assert s.radius == 0
    for _ in range(5):
        s.update()
    assert s.radius == pytest.approx(50)
