import random
import numpy as np
import pytest
import simpy
from uamsim.simulation.appender import SingleRideAppender
from uamsim.simulation.arrivals import RequestProcess
from uamsim.simulation.dispatcher import ClosestRangedPooledDispatcher, TimeStepProcess
from uamsim.simulation.elements import TaskType
from uamsim.simulation.fleet import VehicleProcess, build_fleet, build_vehicle_types
from uamsim.simulation.monitoring import VehicleAnalytics, extract_request_information, extract_vehicle_information
from uamsim.simulation.network import generate_station_grid
from uamsim.utils import Clock


@pytest.fixture
def simulation():
    random.seed(7)
    np.random.seed(7)

    network, stations = generate_station_grid(2, 2, 5_000)
    vehicle_types = build_vehicle_types({'taxi': (10_000, 1), 'shuttle': (6_000, 4)})
    fleet = build_fleet(stations, vehicle_types, 1)
    env = simpy.Environment()

    processes = {}
    appender = SingleRideAppender(cruise_speed=2_500, listener=lambda vehicle: processes[vehicle].wake())
    dispatcher = ClosestRangedPooledDispatcher(appender, stations, network, fleet, verbose=False)
    for vehicle in fleet:
        processes[vehicle] = VehicleProcess(env, vehicle, dispatcher, verbose=False)

    env.process(TimeStepProcess(env, dispatcher, 1. / 6).run())
    requests = []
    env.process(RequestProcess(env, dispatcher, requests, stations, 3., verbose=False).run())
    va = VehicleAnalytics(env, fleet, dispatcher)
    env.process(va.analyse(5))
    clock = Clock(env, dispatcher, 5, verbose=False)
    env.process(clock.run())

    env.run(until=90)
    return dispatcher, fleet, requests, va, clock


def test_requests_are_pending_or_matched(simulation):
    dispatcher, fleet, requests, _, _ = simulation
    pending = set(dispatcher.pending_requests)

    assert len(requests) > 0
    for request in requests:
        assert (request in pending) != request.matched

    assert dispatcher.num_direct_matches > 0
    assert dispatcher.num_direct_matches + dispatcher.num_pooled_matches == sum(r.matched for r in requests)


def test_range_and_capacity_are_respected(simulation):
    dispatcher, fleet, requests, _, _ = simulation
    for request in requests:
        if request.matched and not request.pooled:
            assert request.vehicle.vehicle_type.range >= request.distance

    for vehicle in fleet:
        for task in vehicle.schedule.tasks:
            if task.task_type in (TaskType.PICKUP, TaskType.DROPOFF):
                assert len(task.requests) <= vehicle.capacity


def test_available_vehicles_are_idle_where_indexed(simulation):
    dispatcher, fleet, _, _, _ = simulation
    for vehicle in fleet:
        if dispatcher.available_vehicles.is_available(vehicle):
            assert vehicle.is_idle
            assert dispatcher.available_vehicles.location_of(vehicle) == vehicle.current_task.link.coord
            index = dispatcher.available_vehicles.trees[vehicle.vehicle_type]
            assert index.location_of(vehicle) == dispatcher.available_vehicles.location_of(vehicle)


def test_pooling_registry_holds_only_multi_seat_vehicles(simulation):
    dispatcher, _, _, _, _ = simulation
    for vehicle in dispatcher.pooling_registry:
        assert vehicle.capacity > 1
        assert not dispatcher.available_vehicles.is_available(vehicle)
        if vehicle.current_task.task_type is TaskType.FLY:
            assert vehicle.schedule.task_at(1).task_type is TaskType.PICKUP
            assert len(vehicle.schedule.task_at(3).requests) < vehicle.capacity


def test_completed_rides_are_timestamped(simulation):
    _, _, requests, _, _ = simulation
    completed = [r for r in requests if r.dropoff_time is not None]
    assert len(completed) > 0
    for request in completed:
        assert request.submission_time <= request.pickup_time <= request.dropoff_time


def test_monitoring_frames(simulation):
    dispatcher, fleet, requests, va, clock = simulation
    request_df = extract_request_information(requests)
    vehicle_df = extract_vehicle_information(fleet)

    assert len(request_df) == len(requests)
    assert request_df['matched'].sum() == sum(r.matched for r in requests)
    assert len(vehicle_df) == len(fleet)
    assert len(va.analytics) > 0
    assert len(clock.data) > 0
    assert all(row[1] >= 0 for row in clock.data)
