import logging
from datetime import datetime

# Simulation parameters
START_DATE = datetime(year=2030, month=6, day=3)
INITIAL_TIME = 7 * 60  # Monday @ 7am
RUN_DELTA = 60 * 3
TIME_STEP = 1. / 6  # 10 seconds between dispatcher calls
REOPTIMIZE = True

# Fleet (range in meters, capacity in seats)
VEHICLE_TYPES = {
    'air-taxi': (40_000, 1),
    'air-shuttle': (20_000, 4),
}
VEHICLES_PER_STATION = 1
CRUISE_SPEED = 2_500  # meters per minute
BOARDING_TIME = 1.
DEBOARDING_TIME = 1.

# Demand
REQUEST_RATE = 1.5  # requests per minute

# Network (STATIONS_PATH = None generates a grid of stations)
STATIONS_PATH = None
STATION_GRID = (3, 3)
STATION_SPACING = 8_000

# Output control
FUNCTION_TIMING = False
VERBOSE = False
DEBUG = False
CLOCK_LOG_TIME = 5
SNAPSHOT_PERIOD = 5
LOG_LEVEL = logging.INFO
OUTPUT_DIR = 'runs'
