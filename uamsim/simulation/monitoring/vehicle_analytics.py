from typing import List
from simpy.core import Environment
from uamsim.utils.formatting import cdate

KEPLER_STR = '%Y/%m/%d %H:%M:%S'

class VehicleAnalytics(object):
    def __init__(self, env: Environment, fleet: List, dispatcher):
        self.env = env
        self.fleet = fleet
        self.dispatcher = dispatcher
        self.analytics = []

    def analyse(self, period: float=5):
        yield self.env.timeout(0.1) # Offset
        while True:
            yield self.env.timeout(period)
            self.gather_vehicle_information()

    def vehicle_state(self, vehicle) -> str:
        if self.dispatcher.available_vehicles.is_available(vehicle):
            return 'available'
        if vehicle in self.dispatcher.pooling_registry:
            return 'pooling'
        return 'busy'

    def gather_vehicle_information(self):
        """Generate snapshot of vehicle information.
        """
        datetime = cdate(self.env.now, format_str=KEPLER_STR)
        for vehicle in self.fleet:
            task = vehicle.current_task
            from_x, from_y = task.link.coord
            to_x, to_y = task.to_link.coord
            vehicle_data = [datetime, vehicle.vehicle_id, vehicle.vehicle_type.type_id, self.vehicle_state(vehicle),
                            task.task_type.value, len(task.requests), from_x, from_y, to_x, to_y]
            self.analytics.append(vehicle_data)
