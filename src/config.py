WIDTH = 1280
HEIGHT = 720
FULLSCREEN = False
FPS = 60
VSYNC = True
CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)
LOG_LEVEL = "INFO"

# Isometric tiles (pixels)
TILE_WIDTH = 64
TILE_HEIGHT = 64

# Map generation
MAP_SIZE_MIN = 10
MAP_SIZE_MAX = 50  # exclusive
MAP_SEED = None  # None = fresh entropy every run
# Percent per tile code, in roll order. Must sum to 100.
TERRAIN_WEIGHTS = {
    "GROUND_B": 15,
    "GROUND_A": 55,
    "GROUND_C": 15,
    "TREE_A": 8,
    "TREE_B": 5,
    "STUMP": 2,
}

# Props are lifted off their base tile by this fraction of tile height
PROP_LIFT_RATIO = 1 / 1.5
TREE_EXTRA_HEIGHT = 30.0
STUMP_HEIGHT_RATIO = 0.5

# Player
PLAYER_SPEED = 2.0  # pixels per update step
FRAME_DURATION = 0.1  # seconds per animation frame
FRAME_COUNT = 7
COMBO_WINDOW = 0.4  # seconds after the first swing that accept a follow-up
SPRITE_SCALE = 1.5
SPRITE_BASELINE_OFFSET = 25.0

# Camera
CAMERA_START_OFFSET_X = -500.0
CAMERA_ZOOM_STEP = 0.002
CAMERA_PAN_SPEED = 1.0
CAMERA_MIN_ZOOM = 0.1
CAMERA_MAX_ZOOM = 5.0
