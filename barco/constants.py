"""Game-wide constants for Barco.

Screen dimensions, colors, font sizes, tuning knobs for entities, spawning
and leveling, asset paths, and logging configuration.
"""
import os

WIDTH, HEIGHT = 960, 540           # 16:9 playfield
FPS = 60                           # target frame rate
BG_COLOR = (20, 60, 110)           # open sea
TEXT_COLOR = (235, 235, 235)       # light text
HITBOX_COLOR = (255, 235, 90)
PLAYER_COLOR = (80, 200, 120)
ENEMY_COLOR = (220, 80, 80)
FRIEND_COLOR = (190, 140, 80)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 20
FONT_SIZE_LARGE = 40

# Input
MOVE_UP = "up"
MOVE_DOWN = "down"

# Game Settings
INITIAL_LIVES = 3
POINTS_PER_ENEMY = 10              # multiplied by the current level
LIFE_LOSS_FLASH_MS = 300           # Screen flash when losing life
MAX_FRAME_DT = 0.25                # seconds; longer frames are clamped by the driver

# Player (boat)
PLAYER_X, PLAYER_Y = 80, 200
PLAYER_SIZE = 60
PLAYER_SPEED = 300                 # px/s

# Enemy (cannonball)
ENEMY_SIZE = 30
ENEMY_MIN_SPEED = 100              # px/s, keeps the lead aim away from zero
ENEMY_SPEED_RANGE = 150

# Friend (driftwood)
FRIEND_SIZE = 30
FRIEND_MIN_SPEED = 80
FRIEND_SPEED_RANGE = 80
FRIEND_ANGULAR_RATE = 5.0          # rad/s
FRIEND_AMPLITUDE = 2.0             # px per update

# Spawning (ms)
ENEMY_SPAWN_INTERVAL_MS = 2000
FRIEND_SPAWN_INTERVAL_MS = 4000

# Level System Settings
LEVEL_DURATION_S = 25.0            # simulated seconds per level
LEVEL_TIME_EPSILON = 1e-6          # tolerance for summed frame times
LEVEL_SPAWN_DECREASE = 200         # Decrease enemy spawn interval per level (ms)
MIN_SPAWN_INTERVAL = 500           # Minimum enemy spawn interval

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
PLAYER_SPRITE_PATH = os.path.join(ASSETS_DIR, "barco.png")
ENEMY_SPRITE_PATH = os.path.join(ASSETS_DIR, "cannonball.png")
FRIEND_SPRITE_PATH = os.path.join(ASSETS_DIR, "madera.png")
BACKGROUND_PATH = os.path.join(ASSETS_DIR, "fondo.png")
