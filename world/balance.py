# world/balance.py
"""
Wave scaling lives here so you can tune difficulty without touching Session code.

All functions take the 1-based wave number:
  enemy_count(w)    = 3 + 2w
  spawn_delay(w)    = floor(MIN + (MAX - MIN) * e^(-k*w))
  enemy_health(w)   = min(4, w // 3 + 1)
  enemy_speed(w, h) = saturating base speed * 0.8^(h-1)
  donuts_needed(w)  = enemy_count(w) * enemy_health(w)
"""
import math

from core.settings import (
    AMMO_CAP_SLACK,
    AMMO_GRANT_EXTRA,
    FREDDIE_HEALTH_STEP,
    FREDDIE_MAX_HEALTH,
    FREDDIE_MAX_SPEED,
    FREDDIE_MIN_SPEED,
    FREDDIE_SPEED_DECAY,
    FREDDIE_TOUGHNESS_SLOWDOWN,
    SPAWN_DELAY_DECAY,
    SPAWN_DELAY_MAX,
    SPAWN_DELAY_MIN,
)


def enemy_count(wave: int) -> int:
    return 3 + 2 * wave


def spawn_delay(wave: int) -> int:
    span = SPAWN_DELAY_MAX - SPAWN_DELAY_MIN
    return int(math.floor(SPAWN_DELAY_MIN + span * math.exp(-SPAWN_DELAY_DECAY * wave)))


def enemy_health(wave: int) -> int:
    return min(FREDDIE_MAX_HEALTH, wave // FREDDIE_HEALTH_STEP + 1)


def enemy_speed(wave: int, health: int = None) -> float:
    if health is None:
        health = enemy_health(wave)
    span = FREDDIE_MAX_SPEED - FREDDIE_MIN_SPEED
    base = FREDDIE_MAX_SPEED - span * math.exp(-FREDDIE_SPEED_DECAY * (wave - 1))
    # tougher Freddies walk slower
    return base * FREDDIE_TOUGHNESS_SLOWDOWN ** max(0, health - 1)


def donuts_needed(wave: int) -> int:
    return enemy_count(wave) * enemy_health(wave)


def wave_start_donuts(wave: int) -> int:
    return math.ceil(donuts_needed(wave) * (1.0 + AMMO_GRANT_EXTRA))


def donut_cap(wave: int) -> int:
    return math.ceil(donuts_needed(wave) * (1.0 + AMMO_CAP_SLACK))


def donut_box_reward(wave: int) -> int:
    return max(5, 3 + (wave // 2) * 2)
