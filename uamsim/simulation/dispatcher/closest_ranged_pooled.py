import logging
from typing import Dict, List, Optional
from uamsim.simulation.params import REOPTIMIZE, VERBOSE
from uamsim.utils.formatting import cdate
from uamsim.utils.timing import timing
from .dispatcher import Dispatcher
from ..availability import AvailableVehicles, PendingRequestQueue, PoolingRegistry
from ..elements import Request, Station, TaskType, Vehicle
from ..network import Network, euclidean_distance

logger = logging.getLogger(__name__)

class ClosestRangedPooledDispatcher(Dispatcher):
    def __init__(self, appender, stations: Dict[str, Station], network: Network, fleet: List[Vehicle],
                 reoptimize: bool=REOPTIMIZE, verbose: bool=VERBOSE):
        """Dispatcher assigning requests to the closest idle vehicle whose type has enough range,
        falling back to pooling onto vehicles en route to a pickup with the same origin and destination.

        Args:
            appender: collaborator turning a (request, vehicle) match into schedule tasks.
            stations (Dict[str, Station]): stations by id, used to place vehicles initially.
            network (Network): network whose bounding box sizes the availability indices.
            fleet (List[Vehicle]): all vehicles, idle at their initial station.
            reoptimize (bool, optional): whether matching runs on each time step. Defaults to REOPTIMIZE.
            verbose (bool, optional): whether to print detailed output. Defaults to VERBOSE.
        """
        self.appender = appender
        self.reoptimize_enabled = reoptimize
        self.verbose = verbose

        self.available_vehicles = AvailableVehicles(network.get_bounding_box())
        self.pooling_registry = PoolingRegistry()
        self.pending_requests = PendingRequestQueue()

        # Analytics
        self.num_direct_matches = 0
        self.num_pooled_matches = 0
        self.num_deferrals = 0

        for vehicle in fleet:
            coord = stations[vehicle.initial_station_id].coord
            self.available_vehicles.seed(vehicle, coord)

    def on_next_time_step(self, now: float):
        self.appender.update(now)
        if self.reoptimize_enabled:
            self.reoptimize(now)

    def on_request_submitted(self, request: Request):
        self.pending_requests.enqueue(request)

    def on_next_task_started(self, vehicle: Vehicle):
        task = vehicle.schedule.current_task
        if task.task_type is TaskType.STAY:
            self.available_vehicles.insert(vehicle, task.link.coord)
        elif task.task_type is TaskType.PICKUP:
            self.pooling_registry.discard(vehicle)

    @timing
    def reoptimize(self, now: float):
        """Tries to match every pending request once, in submission order.

        Args:
            now (float): current simulation time
        """
        deferred_requests = []
        for request in self.pending_requests.drain():
            vehicle = self.find_closest_feasible_vehicle(request)

            if vehicle is not None:
                self.available_vehicles.remove(vehicle)
                self.appender.schedule(request, vehicle, now)
                request.vehicle = vehicle
                if vehicle.capacity > 1:
                    self.pooling_registry.add(vehicle)

                self.num_direct_matches += 1
                logger.debug(f'{request} assigned to {vehicle}')
                if self.verbose:
                    print(f'{cdate(now)}: {request} assigned to {vehicle}')

            elif self.find_eligible_en_route_vehicle(request):
                self.num_pooled_matches += 1
                if self.verbose:
                    print(f'{cdate(now)}: {request} pooled onto {request.vehicle}')

            else:
                request.deferrals += 1
                self.num_deferrals += 1
                deferred_requests.append(request)

        self.pending_requests.requeue(deferred_requests)

    def find_closest_feasible_vehicle(self, request: Request) -> Optional[Vehicle]:
        """Closest idle vehicle over all types whose range covers the trip.

        Args:
            request (Request): request to serve

        Returns:
            Optional[Vehicle]: closest vehicle or None if no feasible type has an idle vehicle
        """
        feasible_types = [t for t in self.available_vehicles.vehicle_types if t.range >= request.distance]

        closest_vehicle = None
        closest_distance = float('inf')
        for vehicle_type in feasible_types:
            candidate = self.available_vehicles.nearest(vehicle_type, request.origin)
            if candidate is None:
                continue

            distance = euclidean_distance(request.origin, self.available_vehicles.location_of(candidate))
            if distance < closest_distance:
                closest_vehicle = candidate
                closest_distance = distance

        return closest_vehicle

    def find_eligible_en_route_vehicle(self, request: Request) -> bool:
        """Pools the request onto the first registered vehicle flying to a pickup
        with the same origin and destination.

        Args:
            request (Request): request to pool

        Returns:
            bool: True if the request was pooled, otherwise False.
        """
        for vehicle in self.pooling_registry:
            schedule = vehicle.schedule
            if schedule.current_task.task_type is not TaskType.FLY:
                continue

            pickup = schedule.task_at(1)
            dropoff = schedule.task_at(3)
            if pickup is None or pickup.task_type is not TaskType.PICKUP:
                logger.warning(f'Task following a FLY task is unexpectedly not a PICKUP task for vehicle: '
                               f'{vehicle.vehicle_id}')
                continue
            if dropoff is None or dropoff.task_type is not TaskType.DROPOFF:
                logger.warning(f'No DROPOFF task three positions after the current FLY task for vehicle: '
                               f'{vehicle.vehicle_id}')
                continue
            if len(pickup.requests) == 0:
                continue
            if len(dropoff.requests) >= vehicle.capacity:
                self.pooling_registry.discard(vehicle)
                continue

            pooled_request = pickup.requests[0]
            if not pooled_request.same_route_as(request):
                continue

            request.distance = pooled_request.distance
            request.vehicle = vehicle
            request.pooled = True
            pickup.requests.append(request)
            dropoff.requests.append(request)

            if len(dropoff.requests) >= vehicle.capacity:
                self.pooling_registry.discard(vehicle)

            logger.debug(f'{request} pooled onto {vehicle} ({len(dropoff.requests)}/{vehicle.capacity})')
            return True

        return False
