from typing import Callable
from uamsim.simulation.params import CRUISE_SPEED, BOARDING_TIME, DEBOARDING_TIME
from ..elements import Request, Task, TaskType, Vehicle
from ..network import euclidean_distance

class SingleRideAppender(object):
    def __init__(self, cruise_speed: float=CRUISE_SPEED, boarding_time: float=BOARDING_TIME,
                 deboarding_time: float=DEBOARDING_TIME, listener: Callable[[Vehicle], None]=None):
        """Appends a single ride to the schedule of an idle vehicle.

        Note:
        Assignments are queued by "schedule" and only committed on the next "update" call.

        Args:
            cruise_speed (float, optional): straight-line speed in meters per minute. Defaults to CRUISE_SPEED.
            boarding_time (float, optional): duration of a pickup. Defaults to BOARDING_TIME.
            deboarding_time (float, optional): duration of a dropoff. Defaults to DEBOARDING_TIME.
            listener (Callable[[Vehicle], None], optional): called after a vehicle's schedule changed.
        """
        self.cruise_speed = cruise_speed
        self.boarding_time = boarding_time
        self.deboarding_time = deboarding_time
        self.listener = listener
        self.assignments = []

    def schedule(self, request: Request, vehicle: Vehicle, now: float):
        self.assignments.append((request, vehicle, now))

    def update(self, now: float=None):
        """Commits all queued assignments, starting the rides at `now` (or at the assignment time if not given)."""
        assignments, self.assignments = self.assignments, []
        for request, vehicle, time in assignments:
            self.append_ride(request, vehicle, time if now is None else max(time, now))
            if self.listener is not None:
                self.listener(vehicle)

    def flight_time(self, from_link, to_link) -> float:
        return euclidean_distance(from_link.coord, to_link.coord) / self.cruise_speed

    def append_ride(self, request: Request, vehicle: Vehicle, time: float):
        """Replaces the open end of the vehicle's idle stay by fly, pickup, fly, dropoff, stay.

        Args:
            request (Request): request to serve
            vehicle (Vehicle): idle vehicle
            time (float): time the ride starts
        """
        if not vehicle.is_idle:
            raise RuntimeError(f'{vehicle} is not idle, cannot append {request}')

        schedule = vehicle.schedule
        stay = schedule.current_task
        stay.end_time = max(time, stay.begin_time)

        t = stay.end_time
        access = Task(TaskType.FLY, t, t + self.flight_time(stay.link, request.from_link), stay.link,
                      to_link=request.from_link)
        t = access.end_time
        pickup = Task(TaskType.PICKUP, t, t + self.boarding_time, request.from_link, requests=[request])
        t = pickup.end_time
        flight = Task(TaskType.FLY, t, t + self.flight_time(request.from_link, request.to_link), request.from_link,
                      to_link=request.to_link)
        t = flight.end_time
        dropoff = Task(TaskType.DROPOFF, t, t + self.deboarding_time, request.to_link, requests=[request])
        t = dropoff.end_time

        for task in (access, pickup, flight, dropoff):
            schedule.add_task(task)
        schedule.add_task(Task(TaskType.STAY, t, float('inf'), request.to_link))
