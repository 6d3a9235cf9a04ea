from .formatting import cdate
from .sampling import sample_station_pair
from .clock import Clock
