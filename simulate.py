import logging
import simpy
from uamsim.utils import Clock
from uamsim.simulation.appender import SingleRideAppender
from uamsim.simulation.arrivals import RequestProcess
from uamsim.simulation.dispatcher import ClosestRangedPooledDispatcher, TimeStepProcess
from uamsim.simulation.fleet import VehicleProcess, build_fleet, build_vehicle_types
from uamsim.simulation.monitoring import save_run, VehicleAnalytics
from uamsim.simulation.network import generate_station_grid, load_stations
from uamsim.simulation.params import *

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format='[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s')

    # Analysis Containers
    request_collection = []

    # Load stations
    if STATIONS_PATH is None:
        network, stations = generate_station_grid(*STATION_GRID, STATION_SPACING)
    else:
        network, stations = load_stations(STATIONS_PATH)

    # Fleet idling at the stations
    vehicle_types = build_vehicle_types(VEHICLE_TYPES)
    fleet = build_fleet(stations, vehicle_types, VEHICLES_PER_STATION, start_time=INITIAL_TIME)

    # Creates a SimPy Environment
    env = simpy.Environment(initial_time=INITIAL_TIME)

    # Instantiate dispatcher, vehicle processes are woken up once a ride is appended
    vehicle_processes = {}
    appender = SingleRideAppender(listener=lambda vehicle: vehicle_processes[vehicle].wake())
    dispatcher = ClosestRangedPooledDispatcher(appender, stations, network, fleet, REOPTIMIZE, VERBOSE)
    for vehicle in fleet:
        vehicle_processes[vehicle] = VehicleProcess(env, vehicle, dispatcher, VERBOSE)

    # Dispatcher time steps
    step_process = TimeStepProcess(env, dispatcher, TIME_STEP)
    env.process(step_process.run())

    # Request arrival process
    request_process = RequestProcess(env, dispatcher, request_collection, stations, REQUEST_RATE, VERBOSE, DEBUG)
    env.process(request_process.run())

    # Vehicle analytics
    va = VehicleAnalytics(env, fleet, dispatcher)
    env.process(va.analyse(SNAPSHOT_PERIOD))

    # Clock
    clock = None
    if CLOCK_LOG_TIME is not None:
        clock = Clock(env, dispatcher, CLOCK_LOG_TIME)
        env.process(clock.run())

    # Run simulation
    print(f'Starting simulation with {len(fleet)} vehicles at {len(stations)} stations.')
    print('=' * 80)
    env.run(until=INITIAL_TIME + RUN_DELTA)

    # Save simulation data
    print('=' * 80)
    print(f'Direct matches: {dispatcher.num_direct_matches:,}, pooled: {dispatcher.num_pooled_matches:,}, '
          f'still pending: {len(dispatcher.pending_requests):,}')
    save_run(request_collection, fleet, va, dispatcher, clock)
    print('=' * 80)
