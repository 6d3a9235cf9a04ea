from typing import Iterator
from ..elements import Vehicle

class PoolingRegistry(object):
    """Multi-seat vehicles flying to a pickup that may still take co-riders."""
    def __init__(self):
        self.__vehicles = {}

    def __len__(self):
        return len(self.__vehicles)

    def __contains__(self, vehicle):
        return vehicle in self.__vehicles

    def __iter__(self) -> Iterator[Vehicle]:
        # Snapshot, members may be discarded while scanning
        return iter(list(self.__vehicles))

    def add(self, vehicle: Vehicle):
        self.__vehicles[vehicle] = None

    def discard(self, vehicle: Vehicle):
        self.__vehicles.pop(vehicle, None)
