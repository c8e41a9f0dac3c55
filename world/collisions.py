# world/collisions.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from core.logger import get_logger
from core.settings import GOLD, BROWN, PINK, SCORE_FREDDIE_HIT
from core.utils import distance
from entities.base import compact
from entities.particle import burst
from world.powerup_defs import DONUT_BOX, LIFE, PRIORITY, TEXAS_BOX

logger = get_logger(__name__)

FREDDIE = "freddie"


@dataclass
class CollisionReport:
    hits: Dict[str, int] = field(default_factory=dict)
    satisfied: int = 0
    charges_earned: int = 0

    @property
    def consumed(self) -> int:
        return sum(self.hits.values())

    def count(self, kind: str):
        self.hits[kind] = self.hits.get(kind, 0) + 1


def overlaps(donut, target) -> bool:
    # circle vs circle, using the target's half width as its radius
    return distance(donut.pos.x, donut.pos.y, target.pos.x, target.pos.y) < donut.radius + target.half_width


def first_hit(donut, targets: Sequence, freddies: bool = False) -> Optional[object]:
    for t in targets:
        if not t.alive:
            continue
        if freddies and t.satisfied:
            continue
        if overlaps(donut, t):
            return t
    return None


def resolve_collisions(session) -> CollisionReport:
    """
    One pass over every live donut in flight.
    Targets are checked in PRIORITY order (donut boxes, Texas boxes, life pickups), then Freddies.
    The first overlapping target takes the hit and the donut is used up, so a donut
    never touches more than one target per tick.
    """
    report = CollisionReport()
    powerups = session.powerup_lists()
    groups = [(kind, powerups[kind]) for kind in PRIORITY]
    groups.append((FREDDIE, session.freddies))

    for donut in session.donuts_in_flight:
        if not donut.alive:
            continue

        for kind, targets in groups:
            target = first_hit(donut, targets, freddies=(kind == FREDDIE))
            if target is None:
                continue

            donut.alive = False
            report.count(kind)
            if kind == FREDDIE:
                _hit_freddie(session, target, report)
            else:
                _hit_powerup(session, target)
            break

    session.donuts_in_flight = compact(session.donuts_in_flight)
    session.donut_boxes = compact(session.donut_boxes)
    session.texas_boxes = compact(session.texas_boxes)
    session.life_pickups = compact(session.life_pickups)
    return report


def _hit_freddie(session, freddie, report: CollisionReport):
    satisfied = freddie.hit()
    session.score += SCORE_FREDDIE_HIT
    session.effects.extend(burst(freddie.pos.x, freddie.pos.y, PINK, 8, session.rng))

    if not satisfied:
        return

    report.satisfied += 1
    if session.special.add_progress():
        report.charges_earned += 1
        session.effects.extend(burst(session.world_w / 2, 100, GOLD, 30, session.rng))
        logger.info("Texas Donut charged (%d ready)", session.special.stockpile)


def _hit_powerup(session, box):
    collected = box.hit()
    session.score += box.hit_score
    session.effects.extend(burst(box.pos.x, box.pos.y, PINK, 8, session.rng))

    if not collected:
        return

    session.score += box.score
    if box.power_id == DONUT_BOX:
        session.economy.grant(box.reward)
        session.effects.extend(burst(box.pos.x, box.pos.y, BROWN, 15, session.rng))
    elif box.power_id == TEXAS_BOX:
        session.special.add_charge(box.reward)
    elif box.power_id == LIFE:
        session.lives += box.reward

    session.effects.extend(burst(box.pos.x, box.pos.y, GOLD, 20, session.rng))
    logger.debug("collected %s (+%d)", box.power_id, box.reward)
