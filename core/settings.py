# core/settings.py

TITLE = "Feed the Freddies"
WIDTH = 800
HEIGHT = 600
FPS = 60                      # simulation ticks per second

# Screens narrower than this count as "compact" (faster donut regen)
COMPACT_WIDTH = 600

# Colors (R,G,B)
SKY_TOP = (135, 206, 235)
SKY_BOTTOM = (144, 238, 144)
DANGER_COLOR = (255, 0, 0)
HUD_COLOR = (245, 245, 255)
GOLD = (255, 215, 0)
PINK = (255, 182, 193)
HOT_PINK = (255, 105, 180)
BROWN = (139, 69, 19)
RED = (255, 0, 0)
ORANGE = (255, 140, 0)

DANGER_ZONE_HEIGHT = 100

# --- Session ---
START_LIVES = 3
LAUNCH_OFFSET = 50            # launch point sits this far above the bottom edge

# --- Waves ---
WAVE_DELAY = 120              # ticks between wave complete and next wave
SPAWN_DELAY_MIN = 20          # ticks
SPAWN_DELAY_MAX = 60          # ticks
SPAWN_DELAY_DECAY = 0.15

# --- Freddies ---
FREDDIE_WIDTH = 50
FREDDIE_HEIGHT = 60
FREDDIE_SPAWN_Y = -50
FREDDIE_MAX_HEALTH = 4
FREDDIE_HEALTH_STEP = 3       # +1 health every N waves
FREDDIE_MIN_SPEED = 1.0       # px/tick at wave 1
FREDDIE_MAX_SPEED = 3.5       # px/tick asymptote
FREDDIE_SPEED_DECAY = 0.12
FREDDIE_TOUGHNESS_SLOWDOWN = 0.8   # speed multiplier per extra health point
FREDDIE_WOBBLE_SPEED = (0.06, 0.14)
FREDDIE_WOBBLE_AMP = (0.4, 0.8)
SATISFIED_FALL = 2.0
SATISFIED_SPIN = 0.2
SATISFIED_SHRINK = 0.98
SATISFIED_TICKS = 30
BOTTOM_MARGIN = 50            # below HEIGHT + this an unsatisfied Freddie costs a life

# --- Donuts (projectiles) ---
DONUT_SPEED = 12.0
DONUT_RADIUS = 15
DONUT_SPIN = 0.3
OFFSCREEN_MARGIN = 50

# --- Economy ---
AMMO_GRANT_EXTRA = 0.25       # wave-start grant = needed * (1 + extra)
AMMO_CAP_SLACK = 0.40         # regen cap = needed * (1 + slack)
REGEN_INTERVAL = 180          # ticks per regenerated donut
REGEN_INTERVAL_COMPACT = 120

# --- Powerups ---
POWERUP_WIDTH = 50
POWERUP_SPAWN_Y = -60
POWERUP_SPEED = 1.5
POWERUP_WOBBLE_SPEED = 0.08
POWERUP_WOBBLE_AMP = 0.8
POWERUP_SPIN = 0.05
POWERUP_MAX_LIVE = 1          # per kind

DONUT_BOX_HEALTH = 1
DONUT_BOX_FIRST_INTERVAL = (300, 600)
DONUT_BOX_INTERVAL = (400, 800)
TEXAS_BOX_INTERVAL_BASE = 1200
TEXAS_BOX_INTERVAL_FLOOR = 600
TEXAS_BOX_INTERVAL_STEP = 30
TEXAS_BOX_INTERVAL_SPREAD = 600
LIFE_INTERVAL_BASE = 2400
LIFE_INTERVAL_FLOOR = 900
LIFE_INTERVAL_STEP = 150
LIFE_INTERVAL_SPREAD = 900

# --- Scoring ---
SCORE_FREDDIE_HIT = 10
SCORE_FREDDIE_SATISFIED = 100     # times current wave
SCORE_BOX_HIT = 25
SCORE_BOX_DESTROYED = 100
SCORE_TEXAS_BOX = 500
SCORE_LIFE_PICKUP = 500

# --- Texas Donut ---
TEXAS_DONUT_REQUIRED = 15         # satisfied Freddies per charge
TEXAS_ANIMATION_TICKS = 90
TEXAS_PHASES = (("charge", 20), ("burst", 50), ("fade", 90))

# --- Effects ---
PARTICLE_LIFE = 30
PARTICLE_GRAVITY = 0.3
PARTICLE_SPREAD = 4.0
