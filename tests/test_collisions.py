import pytest

from core.settings import (
    SCORE_BOX_DESTROYED,
    SCORE_BOX_HIT,
    SCORE_FREDDIE_HIT,
    SCORE_LIFE_PICKUP,
    SCORE_TEXAS_BOX,
    TEXAS_DONUT_REQUIRED,
)
from entities.donut import Donut
from entities.enemy import Freddie
from entities.powerup import PowerUp
from world.collisions import FREDDIE, overlaps, resolve_collisions
from world.powerup_defs import DONUT_BOX, LIFE, PRIORITY, TEXAS_BOX


def donut_at(x, y):
    return Donut(x, y, x, 0)


def freddie_at(x, y, health=1):
    return Freddie(x, y, health=health, speed=0.0, wobble_amp=0.0)


def test_overlap_uses_half_width_as_radius():
    f = freddie_at(400, 300)
    # donut radius 15 + half width 25
    assert not overlaps(donut_at(440, 300), f)
    assert overlaps(donut_at(439.9, 300), f)


def test_powerups_take_priority_over_freddies(session):
    f = freddie_at(400, 300, health=2)
    box = PowerUp(DONUT_BOX, 400, 300, wave=1)
    session.freddies.append(f)
    session.donut_boxes.append(box)
    session.donuts_in_flight.append(donut_at(400, 300))

    report = resolve_collisions(session)

    assert report.hits == {DONUT_BOX: 1}
    assert f.health == 2
    assert session.donut_boxes == []
    assert session.donuts_in_flight == []


def test_priority_order_between_powerups(session):
    session.life_pickups.append(PowerUp(LIFE, 400, 300))
    session.texas_boxes.append(PowerUp(TEXAS_BOX, 400, 300))
    session.donuts_in_flight.append(donut_at(400, 300))

    report = resolve_collisions(session)

    assert report.hits == {TEXAS_BOX: 1}
    assert len(session.life_pickups) == 1
    assert session.lives == 3


def test_one_donut_hits_one_freddie(session):
    a = freddie_at(400, 300, health=2)
    b = freddie_at(405, 300, health=2)
    session.freddies.extend([a, b])
    session.donuts_in_flight.append(donut_at(402, 300))

    report = resolve_collisions(session)

    assert report.consumed == 1
    assert sorted([a.health, b.health]) == [1, 2]


def test_second_donut_passes_a_satisfied_freddie(session):
    f = freddie_at(400, 300, health=1)
    session.freddies.append(f)
    session.donuts_in_flight.extend([donut_at(400, 300), donut_at(400, 300)])

    report = resolve_collisions(session)

    assert report.hits == {FREDDIE: 1}
    assert report.satisfied == 1
    assert f.satisfied
    assert len(session.donuts_in_flight) == 1
    # satisfied Freddies stay on screen until they fade out
    assert session.freddies == [f]


def test_ammo_box_scenario(session):
    session.donuts = 3
    box = PowerUp(DONUT_BOX, 400, 300, wave=1)
    assert box.health == 1
    session.donut_boxes.append(box)
    session.donuts_in_flight.append(donut_at(400, 300))

    resolve_collisions(session)

    assert session.donut_boxes == []
    assert session.donuts == 3 + box.reward
    assert session.score == SCORE_BOX_HIT + SCORE_BOX_DESTROYED


def test_multi_hit_box_scores_per_hit(session):
    box = PowerUp(DONUT_BOX, 400, 300)
    box.health = box.max_health = 2
    session.donut_boxes.append(box)
    session.donuts_in_flight.append(donut_at(400, 300))

    resolve_collisions(session)

    assert session.donut_boxes == [box]
    assert session.score == SCORE_BOX_HIT


def test_texas_box_adds_charge(session):
    session.texas_boxes.append(PowerUp(TEXAS_BOX, 400, 300))
    session.donuts_in_flight.append(donut_at(400, 300))

    resolve_collisions(session)

    assert session.special.stockpile == 1
    assert session.score == SCORE_TEXAS_BOX
    assert session.texas_boxes == []


def test_life_pickup_adds_life(session):
    session.life_pickups.append(PowerUp(LIFE, 400, 300))
    session.donuts_in_flight.append(donut_at(400, 300))

    resolve_collisions(session)

    assert session.lives == 4
    assert session.score == SCORE_LIFE_PICKUP


def test_satisfying_freddie_charges_texas_donut(session):
    session.special.progress = TEXAS_DONUT_REQUIRED - 1
    session.freddies.append(freddie_at(400, 300))
    session.donuts_in_flight.append(donut_at(400, 300))

    report = resolve_collisions(session)

    assert report.charges_earned == 1
    assert session.special.progress == 0
    assert session.special.stockpile == 1
    assert session.score == SCORE_FREDDIE_HIT


def test_partial_hit_adds_no_progress(session):
    session.freddies.append(freddie_at(400, 300, health=3))
    session.donuts_in_flight.append(donut_at(400, 300))

    report = resolve_collisions(session)

    assert report.satisfied == 0
    assert session.special.progress == 0


def test_miss_leaves_donut_flying(session):
    session.freddies.append(freddie_at(100, 100))
    session.donuts_in_flight.append(donut_at(600, 500))

    report = resolve_collisions(session)

    assert report.consumed == 0
    assert len(session.donuts_in_flight) == 1


@pytest.mark.parametrize("kind", [DONUT_BOX, TEXAS_BOX, LIFE])
def test_dead_targets_are_skipped(session, kind):
    box = PowerUp(kind, 400, 300)
    box.alive = False
    {DONUT_BOX: session.donut_boxes, TEXAS_BOX: session.texas_boxes, LIFE: session.life_pickups}[kind].append(box)
    session.donuts_in_flight.append(donut_at(400, 300))

    report = resolve_collisions(session)

    assert report.consumed == 0


def test_stacked_targets_are_hit_in_priority_order(session):
    for kind in PRIORITY:
        session.powerup_lists()[kind].append(PowerUp(kind, 400, 300))
    session.freddies.append(freddie_at(400, 300, health=2))

    order = []
    for _ in range(len(PRIORITY) + 1):
        session.donuts_in_flight.append(donut_at(400, 300))
        order.extend(resolve_collisions(session).hits)

    assert order == [*PRIORITY, FREDDIE]
