import simpy
from simpy.core import Environment
from uamsim.utils import cdate
from ..dispatcher import Dispatcher
from ..elements import TaskType, Vehicle

class VehicleProcess(object):
    def __init__(self, env: Environment, vehicle: Vehicle, dispatcher: Dispatcher, verbose: bool=True):
        """
        Executes a vehicle's schedule and reports task transitions to the dispatcher.
        """
        self.env = env
        self.vehicle = vehicle
        self.dispatcher = dispatcher
        self.verbose = verbose
        self.waiting = False

        # Start the operate process when instance is created
        self.action = env.process(self.operate())

    def operate(self):
        schedule = self.vehicle.schedule
        while True:
            task = schedule.current_task

            # Idle until a ride is appended
            if not schedule.has_next_task():
                self.waiting = True
                try:
                    yield self.env.timeout(simpy.core.Infinity)
                except simpy.Interrupt:
                    pass
                self.waiting = False
                continue

            yield self.env.timeout(max(0., task.end_time - self.env.now))
            self.complete(task)
            schedule.next_task(self.env.now)
            self.start(schedule.current_task)
            self.dispatcher.on_next_task_started(self.vehicle)

    def complete(self, task):
        if task.task_type is TaskType.DROPOFF:
            for request in task.requests:
                request.dropoff_time = self.env.now

    def start(self, task):
        if task.task_type is TaskType.PICKUP:
            for request in task.requests:
                request.pickup_time = self.env.now
        if self.verbose:
            print(f'{cdate(self.env.now)}: Vehicle {self.vehicle.vehicle_id} starts {task.task_type.value} '
                  f'@ {task.link.link_id}')

    def wake(self):
        """Interrupts an idle vehicle after its schedule was extended."""
        if self.waiting:
            self.waiting = False
            self.action.interrupt()
