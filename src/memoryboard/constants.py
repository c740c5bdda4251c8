DEFAULT_COLUMNS = 4
DEFAULT_ROWS = 4

# Initial xorshift state; recorded shuffle sequences start from this seed.
DEFAULT_SEED = (1, 2)

# Number of full Fisher-Yates passes run after setup.
SHUFFLE_ITERATIONS = 3

# Scoring
POINTS_PER_MATCH = 100
MAX_MULTIPLIER = 4  # consecutive matches stop raising the multiplier here
