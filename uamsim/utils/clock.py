from simpy.core import Environment
from uamsim.utils.formatting import cdate

KEPLER_STR = '%Y/%m/%d %H:%M:%S'

class Clock(object):
    def __init__(self, env: Environment, dispatcher, interval: float, verbose: bool=True):
        self.env = env
        self.dispatcher = dispatcher
        self.interval = interval
        self.verbose = verbose
        self.data = []

    def run(self):
        while True:
            yield self.env.timeout(self.interval)
            self.tick()

    def tick(self):
        """Records one row of dispatcher load figures."""
        time_string = cdate(self.env.now)
        datetime = cdate(self.env.now, format_str=KEPLER_STR)
        self.data.append([datetime, self.num_pending, self.num_available, self.num_pooling])
        if self.verbose:
            print(f'{time_string}: Pending requests: {self.num_pending:,} <> {self.num_available:,} available vehicles, '
                  f'{self.num_pooling:,} open for pooling')

    @property
    def num_pending(self):
        return len(self.dispatcher.pending_requests)

    @property
    def num_available(self):
        return self.dispatcher.available_vehicles.num_available()

    @property
    def num_pooling(self):
        return len(self.dispatcher.pooling_registry)
