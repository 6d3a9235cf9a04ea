from .station import Station
from .task import TaskType, Task, Schedule
from .vehicle import VehicleType, Vehicle
from .request import Request
