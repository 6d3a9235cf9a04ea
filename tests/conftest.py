import pytest
from uamsim.simulation.appender import SingleRideAppender
from uamsim.simulation.dispatcher import ClosestRangedPooledDispatcher
from uamsim.simulation.elements import Request, Station, Vehicle, VehicleType
from uamsim.simulation.network import Link, Network, euclidean_distance

COORDS = {
    'A': (0., 0.),
    'B': (10., 10.),
    'C': (1., 1.),
    'D': (50., 50.),
    'E': (100., 100.),
}


@pytest.fixture
def stations():
    return {sid: Station(sid, f'Station {sid}', Link(f'link_{sid}', coord)) for sid, coord in COORDS.items()}


@pytest.fixture
def network(stations):
    return Network([station.link for station in stations.values()])


@pytest.fixture
def make_dispatcher(stations, network):
    """Builds a dispatcher over (type, station id) vehicle specs with a fresh appender."""
    def factory(specs, reoptimize=True):
        fleet = [Vehicle(f'V{i}', vehicle_type, stations[sid]) for i, (vehicle_type, sid) in enumerate(specs)]
        appender = SingleRideAppender(cruise_speed=10., boarding_time=1., deboarding_time=1.)
        dispatcher = ClosestRangedPooledDispatcher(appender, stations, network, fleet, reoptimize=reoptimize,
                                                   verbose=False)
        return dispatcher, fleet
    return factory


@pytest.fixture
def make_request(stations):
    counter = [0]

    def factory(origin='C', destination='D', distance=None, time=0.):
        from_link = stations[origin].link
        to_link = stations[destination].link
        if distance is None:
            distance = euclidean_distance(from_link.coord, to_link.coord)
        request = Request(f'R{counter[0]}', from_link, to_link, distance, time)
        counter[0] += 1
        return request
    return factory


@pytest.fixture
def single_seat():
    return VehicleType('single', 100., 1)


@pytest.fixture
def quad_seat():
    return VehicleType('quad', 100., 4)


def start_next_task(dispatcher, vehicle, now):
    vehicle.schedule.next_task(now)
    dispatcher.on_next_task_started(vehicle)
    return vehicle.current_task


@pytest.fixture
def advance():
    return start_next_task
