# --- Configuration Constants ---
DEFAULT_FPS = 60
DEFAULT_RESOLUTION = (1280, 720)
DEFAULT_DURATION = 12.0  # seconds of the scripted gesture tour
DEFAULT_BPM = 60
DEFAULT_DPR = 1.0

# Frame scheduling
MAX_DELTA = 1 / 20  # clamp after the host was backgrounded

# Spawn governor
MAX_PARTICLES = 650
BASE_SPAWN_RATE = 48.0  # particles / second
MIN_SPAWN_RATE = 18.0
LOW_FPS_THRESHOLD = 45.0
SPAWN_DECAY_PER_SEC = 40.0
SPAWN_RECOVER_PER_SEC = 25.0
FALLBACK_FPS = 60.0

# Bursts (click / tap / hug release)
BURST_BASE = 18
BURST_SCALE = 18
BURST_STRENGTH_MIN = 0.65
BURST_STRENGTH_MAX = 1.6
BURST_HUG_GAIN = 0.9
BURST_JITTER = 8.0  # px * dpr
BURST_RADIAL_SPEED = 120.0  # px/s * dpr
BURST_FALL_FACTOR = 0.5

# Particle generation ranges
DEPTH_RANGE = (0.35, 1.0)
AMBIENT_SIZE_RANGE = (5.0, 16.0)
BURST_SIZE_RANGE = (5.0, 18.0)
FALL_SPEED_RANGE = (70.0, 200.0)
DRIFT_RANGE = (-10.0, 10.0)
AMBIENT_LIFETIME_RANGE = (4.0, 7.0)
BURST_LIFETIME_RANGE = (1.0, 2.0)
SWAY_RANGE = (0.8, 1.8)
ROTATION_RANGE = (-0.6, 0.6)
ANGULAR_VELOCITY_RANGE = (-1.4, 1.4)
ALPHA_RANGE = (0.25, 0.95)
SPAWN_BAND = 0.18  # ambient hearts start up to 18% of the height above the top

# Force field
HUG_THRESHOLD = 0.01
HUG_RADIUS = 520.0
HUG_PULL = 520.0
HUG_DAMPING = 0.55
HUG_MAX_SPEED = 520.0
SPIRAL_WINDOW = 1.0  # seconds after the last pointer move
SPIRAL_RADIUS = 360.0
SPIRAL_ORBIT = 260.0
SPIRAL_ORBIT_Y = 0.12
SPIRAL_PULL = 70.0
SPIRAL_PULL_Y = 0.18
IDLE_RADIUS = 280.0
IDLE_PULL = 70.0
IDLE_PULL_Y = 0.16
DIST_EPSILON = 0.0001

# Hug easing: fraction of the gap left after one second
HUG_EASE_BASE = 0.001

# Integrator
WIND_STRENGTH = 12.0  # px/s * dpr
DAMPING_X = 0.994
DAMPING_Y_AMBIENT = 0.9985
DAMPING_Y_BURST = 0.994
WRAP_MARGIN = 0.2
FLOOR_MARGIN = 1.25  # removed once y > 1.25 * height

# Rendering
TRAIL_ALPHA = 0.12  # white veil per frame, 0.12 - 0.18
PULSE_AMPLITUDE = 0.06
HIGHLIGHT_ALPHA = 0.22 * 0.95
HEART_CURVE_SAMPLES = 14
BG_COLOR = (255, 255, 255)

# Palette (BGR format for OpenCV, alpha)
PALETTE = (
    ((60, 20, 220), 0.95),  # crimson
    ((129, 64, 255), 0.85),  # hot pink
    ((180, 105, 255), 0.65),  # pink
    ((85, 0, 255), 0.75),  # rose
    ((200, 170, 255), 0.55),  # pale pink
)
