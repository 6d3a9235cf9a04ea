from simpy.core import Environment
from .dispatcher import Dispatcher

class TimeStepProcess(object):
    def __init__(self, env: Environment, dispatcher: Dispatcher, frequency: float):
        """
        Calls the dispatcher at a fixed frequency.
        """
        self.env = env
        self.dispatcher = dispatcher
        self.frequency = frequency

    def run(self):
        while True:
            yield self.env.timeout(self.frequency)
            self.dispatcher.on_next_time_step(self.env.now)
