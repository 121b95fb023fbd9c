BRAIN_DEPTH = 3
SAMPLE_SEED = 20240229

# palettes the random brains draw from
ENERGY_THRESHOLDS = (0.2, 0.4, 0.6, 0.8)
SPEED_THRESHOLDS = (0.01, 0.05, 0.1)
FOOD_DISTANCE_THRESHOLDS = (0.05, 0.1, 0.2)
ROTATE_ANGULAR_SPEEDS = (-3.0, -1.0, 1.0, 3.0)
STICK_TO_SPEEDS = (0.02, 0.05, 0.1)
STICK_TO_MAX_ACCELERATION = 2.0

# bob
BOB_COUNT = 30
BOB_RADIUS = 0.01
BOB_BRAIN_UPDATE_TIME = 0.5
BOB_INITIAL_ANGULAR_SPEED = 0.01
BRAIN_ENERGY_COST = 0.002
SPEED_ENERGY_COST = 0.05
ANGULAR_SPEED_ENERGY_COST = 0.001
EAT_FOOD_ENERGY_COST = 0.01
EAT_REACH = 0.01
NEARBY_RADIUS = 0.25

# meat
MEAT_RADIUS = 0.005
MEAT_TIME_HEALTH_COST = 0.01
MEAT_ENERGY_VALUE = 0.3
MEAT_INITIAL_COUNT = 60
MEAT_SPAWN_RATE = 4.0  # per simulated second

# evolution
TIME_STEP = 0.05
GENERATION_TIME = 60.0
MUTATION_RATE = 0.05
ELITE_FRACTION = 0.25
EVOLVE_GENERATIONS = 5

# viewer
DISPLAY_DEPTH = 3
MAX_ELEMENTS = 512
LABEL_CROP_LENGTH = 24
SHOW_FULL_LABELS = False
STEPS_PER_TICK = 4
TICK_INTERVAL_MS = 200
USER_STATE_STORAGE_TYPE = "session"
