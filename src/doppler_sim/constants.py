"""Physical constants and tunables for the Doppler simulation (SI units)."""

# physics
SOUND_SPEED = 343.0  # m/s, air at room temperature
SOUND_SPEED_MIN = 1.0  # m/s
EMITTED_FREQ = 4.0  # Hz, low so individual wavefronts stay visible
FREQ_MIN = 0.1  # Hz
FREQ_MAX_FACTOR = 5.0  # upper clamp as a multiple of the emitted frequency
FREQ_CHANGE_THRESHOLD = 0.001  # Hz, below this the shift is reported as none
EPSILON = 1e-9

# wavefronts
MAX_AGE = 10.0  # s
FIELD_WIDTH = 800.0  # m
FIELD_HEIGHT = 600.0  # m

# signal buffers
HISTORY_LENGTH = 200
AMPLITUDE = 30.0

# frame timing
REAL_TIME_FACTOR = 0.5  # simulation seconds per wall-clock second
TIME_STEP_MAX = 0.05  # s

# motion
DRAG_SMOOTHING = 0.2  # fraction of the remaining distance covered per step
DRAG_RELEASE_HALF_LIFE = 0.01  # s of simulation time
MIN_VELOCITY_MAG = 0.01  # m/s
PICK_RADIUS = 10.0  # m
MOVE_STEP = 20.0  # m/s for keyboard motion

# keyboard steps
EMITTED_FREQ_STEP = 0.01  # Hz
SOUND_SPEED_STEP = 1.0  # m/s
