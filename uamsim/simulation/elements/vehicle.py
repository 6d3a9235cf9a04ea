from collections import namedtuple
from .task import Schedule, Task, TaskType

VehicleType = namedtuple('VehicleType', 'type_id range capacity')

class Vehicle(object):
    def __init__(self, vehicle_id: str, vehicle_type: VehicleType, initial_station, start_time: float=0.,
                 capacity: int=None):
        """Instantiates a vehicle idling at its initial station.

        Args:
            vehicle_id (str): unique vehicle id
            vehicle_type (VehicleType): type defining range and seat count
            initial_station (Station): station the vehicle starts at
            start_time (float, optional): begin of the initial stay. Defaults to 0.
            capacity (int, optional): seats, overrides the type's capacity. Defaults to None.
        """
        self.vehicle_id = vehicle_id
        self.vehicle_type = vehicle_type
        self.initial_station_id = initial_station.station_id
        self.capacity = capacity if capacity is not None else vehicle_type.capacity
        self.schedule = Schedule(Task(TaskType.STAY, start_time, float('inf'), initial_station.link))

    @property
    def current_task(self) -> Task:
        return self.schedule.current_task

    @property
    def is_idle(self):
        task = self.schedule.current_task
        return task.task_type is TaskType.STAY and not self.schedule.has_next_task()

    def __repr__(self):
        return f'Vehicle({self.vehicle_id}, {self.vehicle_type.type_id})'
