from typing import Dict, List
import random
from simpy.core import Environment
from .arrival_process import ArrivalProcess
from ..dispatcher import Dispatcher
from ..elements import Request, Station
from ..network import euclidean_distance
from uamsim.utils import cdate, sample_station_pair

class RequestProcess(ArrivalProcess):
    def __init__(self, env: Environment, dispatcher: Dispatcher, collection: List, stations: Dict[str, Station],
                 rate: float, verbose: bool = True, debug: bool = False):
        """
        Simulates the arrival process of trip requests between stations.
        """
        super().__init__(env, dispatcher, collection, verbose, debug)
        self.stations = stations
        self.station_ids = list(stations.keys())
        self.rate = rate
        self.request_number = 0

        # Adjust for debug
        if self.debug:
            self.rate /= 10 # Slow down

    def submit_request(self) -> Request:
        origin_id, destination_id = sample_station_pair(self.station_ids)
        from_link = self.stations[origin_id].link
        to_link = self.stations[destination_id].link
        distance = euclidean_distance(from_link.coord, to_link.coord)

        request = Request(f'R{self.request_number}', from_link, to_link, distance, self.env.now)
        self.request_number += 1
        self.collection.append(request)
        self.dispatcher.on_request_submitted(request)

        if self.verbose:
            print(f'{cdate(self.env.now)}: {request} submitted, distance {distance:,.0f} m')
        return request

    def run(self):
        while True:
            # Simulate Poisson arrival
            t = random.expovariate(self.rate)
            yield self.env.timeout(t)
            self.submit_request()
