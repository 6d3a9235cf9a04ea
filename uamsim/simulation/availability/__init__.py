from .spatial_index import SpatialIndex, AvailableVehicles, IndexConsistencyError
from .pooling_registry import PoolingRegistry
from .pending_queue import PendingRequestQueue
