from typing import Dict, Optional, Tuple
import numpy as np
from scipy.spatial import cKDTree
from ..elements import Vehicle, VehicleType

Coord = Tuple[float, float]
Bounds = Tuple[float, float, float, float]

class IndexConsistencyError(RuntimeError):
    """Raised when the availability index and the location lookup disagree."""


class SpatialIndex(object):
    def __init__(self, bounds: Bounds):
        """
        Nearest-neighbour index over the idle vehicles of one vehicle type.

        Inserts drop the k-d tree, it is rebuilt on the next query. Removals only mark
        the member stale; queries skip stale members until they outnumber the live ones.
        """
        self.bounds = bounds
        self.__locations: Dict[Vehicle, Coord] = {}
        self.__members = []
        self.__stale = set()
        self.__tree = None
        self.num_rebuilds = 0

    def __len__(self):
        return len(self.__locations)

    def __contains__(self, vehicle):
        return vehicle in self.__locations

    def location_of(self, vehicle: Vehicle) -> Optional[Coord]:
        return self.__locations.get(vehicle)

    def insert(self, vehicle: Vehicle, coord: Coord):
        min_x, min_y, max_x, max_y = self.bounds
        x, y = coord
        if not (min_x <= x <= max_x and min_y <= y <= max_y):
            raise ValueError(f'{vehicle} at {coord} lies outside of index bounds {self.bounds}')
        if vehicle in self.__locations:
            raise IndexConsistencyError(f'{vehicle} is already indexed at {self.__locations[vehicle]}')

        self.__locations[vehicle] = (float(x), float(y))
        self.__tree = None

    def remove(self, vehicle: Vehicle, coord: Coord):
        indexed = self.__locations.get(vehicle)
        if indexed is None or indexed != (float(coord[0]), float(coord[1])):
            raise IndexConsistencyError(f'{vehicle} is not indexed at {coord} (indexed at {indexed})')

        del self.__locations[vehicle]
        if self.__tree is not None:
            self.__stale.add(vehicle)
            if len(self.__stale) > len(self.__locations):
                self.__tree = None

    def __rebuild(self):
        self.__members = list(self.__locations.keys())
        self.__tree = cKDTree(np.array(list(self.__locations.values())))
        self.__stale = set()
        self.num_rebuilds += 1

    def nearest(self, coord: Coord) -> Optional[Vehicle]:
        if len(self.__locations) == 0:
            return None

        if self.__tree is None:
            self.__rebuild()

        # One more neighbour than stale members guarantees a live one
        k = len(self.__stale) + 1
        _, indices = self.__tree.query(np.asarray(coord, dtype=float), k=k)
        for i in np.atleast_1d(indices):
            vehicle = self.__members[int(i)]
            if vehicle not in self.__stale:
                return vehicle

        raise IndexConsistencyError(f'No live vehicle among the {k} nearest tree members')


class AvailableVehicles(object):
    def __init__(self, bounds: Bounds):
        """
        Idle vehicles partitioned by type, plus the location lookup shared by all indices.
        """
        self.bounds = bounds
        self.trees: Dict[VehicleType, SpatialIndex] = {}
        self.locations: Dict[Vehicle, Coord] = {}

    @property
    def vehicle_types(self):
        return list(self.trees.keys())

    def seed(self, vehicle: Vehicle, coord: Coord):
        """Startup insert, creating the index for the vehicle's type on first use."""
        if vehicle.vehicle_type not in self.trees:
            self.trees[vehicle.vehicle_type] = SpatialIndex(self.bounds)

        self.insert(vehicle, coord)

    def insert(self, vehicle: Vehicle, coord: Coord):
        tree = self.trees.get(vehicle.vehicle_type)
        if tree is None:
            raise IndexConsistencyError(f'No availability index for vehicle type {vehicle.vehicle_type.type_id}')

        tree.insert(vehicle, coord)
        self.locations[vehicle] = tree.location_of(vehicle)

    def remove(self, vehicle: Vehicle):
        coord = self.locations.get(vehicle)
        if coord is None:
            raise IndexConsistencyError(f'{vehicle} is not available')

        self.trees[vehicle.vehicle_type].remove(vehicle, coord)
        del self.locations[vehicle]

    def nearest(self, vehicle_type: VehicleType, coord: Coord) -> Optional[Vehicle]:
        tree = self.trees.get(vehicle_type)
        if tree is None:
            return None
        return tree.nearest(coord)

    def location_of(self, vehicle: Vehicle) -> Coord:
        return self.locations[vehicle]

    def is_available(self, vehicle: Vehicle) -> bool:
        return vehicle in self.locations

    def num_available(self, vehicle_type: VehicleType=None) -> int:
        if vehicle_type is None:
            return len(self.locations)

        tree = self.trees.get(vehicle_type)
        return 0 if tree is None else len(tree)
