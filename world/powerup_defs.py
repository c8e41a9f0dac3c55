from core.settings import (
    BROWN,
    DONUT_BOX_HEALTH,
    SCORE_BOX_DESTROYED,
    SCORE_BOX_HIT,
    SCORE_LIFE_PICKUP,
    SCORE_TEXAS_BOX,
)

DONUT_BOX = "donut_box"
TEXAS_BOX = "texas_box"
LIFE = "life"

POWERUPS = {
    DONUT_BOX: {
        "color": BROWN,
        "trim": (255, 215, 0),
        "health": DONUT_BOX_HEALTH,
        "hit_score": SCORE_BOX_HIT,
        "score": SCORE_BOX_DESTROYED,
    },
    TEXAS_BOX: {
        "color": (255, 140, 0),
        "trim": (255, 99, 71),
        "health": 1,
        "hit_score": 0,
        "score": SCORE_TEXAS_BOX,
    },
    LIFE: {
        "color": (255, 90, 120),
        "trim": (255, 255, 255),
        "health": 1,
        "hit_score": 0,
        "score": SCORE_LIFE_PICKUP,
    },
}

# collision priority: earlier kinds are checked first
PRIORITY = (DONUT_BOX, TEXAS_BOX, LIFE)
