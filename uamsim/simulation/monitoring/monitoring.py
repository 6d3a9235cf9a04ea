import os
import pandas as pd
import geopandas as gpd
from typing import List
from datetime import datetime
from shapely.geometry import Point
from uamsim.utils.clock import Clock
from uamsim.simulation import params
from uamsim.utils.formatting import cdate
from .vehicle_analytics import VehicleAnalytics
from ..elements import TaskType

KEPLER_STR = '%Y/%m/%d %H:%M:%S'

def __create_new_run(output_dir: str) -> str:
    folder_name = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
    new_dir = os.path.join(os.getcwd(), output_dir, folder_name)
    print('Created new directory for run:', new_dir)
    if not os.path.exists(new_dir):
        os.makedirs(new_dir)

    return new_dir


def extract_request_information(request_collection: List) -> gpd.GeoDataFrame:
    """Aggregates information from trip requests for analysis.

    Args:
        request_collection (List): list of all "Request" objects.

    Returns:
        gpd.GeoDataFrame: one row per request, located at its origin.
    """
    requests = []
    for request in request_collection:
        datetime = cdate(request.submission_time, format_str=KEPLER_STR)
        vehicle_id = request.vehicle.vehicle_id if request.matched else None
        requests.append([datetime, request.request_id, request.from_link.link_id, request.to_link.link_id,
                         Point(request.origin), request.distance, request.matched, request.pooled,
                         request.deferrals, vehicle_id, request.wait_time, request.dropoff_time is not None])

    col_info = ['datetime', 'request_id', 'from_link', 'to_link', 'geometry', 'distance', 'matched', 'pooled',
                'deferrals', 'vehicle_id', 'wait_time', 'completed']
    request_df = pd.DataFrame(requests, columns=col_info)
    return gpd.GeoDataFrame(request_df, geometry='geometry')


def extract_vehicle_information(fleet: List) -> pd.DataFrame:
    """Aggregates information from vehicles for analysis.

    Args:
        fleet (List): list of all "Vehicle" objects.
    """
    vehicles = []
    for vehicle in fleet:
        tasks = vehicle.schedule.tasks
        num_rides = sum(1 for task in tasks if task.task_type is TaskType.PICKUP)
        num_passengers = sum(len(task.requests) for task in tasks if task.task_type is TaskType.PICKUP)
        vehicles.append([vehicle.vehicle_id, vehicle.vehicle_type.type_id, vehicle.capacity, num_rides,
                         num_passengers])

    col_info = ['vehicle_id', 'vehicle_type', 'capacity', 'num_rides', 'num_passengers']
    return pd.DataFrame(vehicles, columns=col_info)


def extract_vehicle_snapshots(va: VehicleAnalytics) -> pd.DataFrame:
    """Extract vehicle analytics data.

    Args:
        va (VehicleAnalytics): vehicle analytics gatherer.

    Returns:
        pd.DataFrame: vehicle data.
    """
    col_info = ['datetime', 'vehicle_id', 'vehicle_type', 'state', 'task', 'num_requests', 'from_x', 'from_y',
                'to_x', 'to_y']
    vehicle_df = pd.DataFrame(va.analytics, columns=col_info)
    if vehicle_df.empty:
        return None

    vehicle_df['idle'] = vehicle_df['state'] == 'available'
    return vehicle_df


def save_clock_data(clock: Clock) -> pd.DataFrame:
    """Collects the dispatcher load recorded by the clock.

    Args:
        clock (Clock): clock giving high-level dispatcher load overviews.

    Returns:
        pd.DataFrame: dataframe containing time, pending requests and vehicle availability.
    """
    col_names = ['time', 'pending', 'available', 'pooling']
    return pd.DataFrame(clock.data, columns=col_names)


def save_metadata(path: str, dispatcher=None):
    data = {
        'START_DATE': params.START_DATE,
        'INITIAL_TIME': params.INITIAL_TIME,
        'RUN_DELTA': params.RUN_DELTA,
        'TIME_STEP': params.TIME_STEP,
        'REOPTIMIZE': params.REOPTIMIZE,
        'VEHICLE_TYPES': params.VEHICLE_TYPES,
        'VEHICLES_PER_STATION': params.VEHICLES_PER_STATION,
        'CRUISE_SPEED': params.CRUISE_SPEED,
        'REQUEST_RATE': params.REQUEST_RATE,
        'DEBUG': params.DEBUG
    }
    if dispatcher is not None:
        data['DIRECT_MATCHES'] = dispatcher.num_direct_matches
        data['POOLED_MATCHES'] = dispatcher.num_pooled_matches
        data['DEFERRALS'] = dispatcher.num_deferrals
        data['PENDING_AT_END'] = len(dispatcher.pending_requests)

    with open(os.path.join(path, 'metadata.txt'), 'w+') as f:
        f.write('SIMULATION METADATA\n')
        f.write('=' * 50)
        f.write('\n')
        for key, value in data.items():
            f.write(f'{key}: {value}\n')


def save_run(request_collection: List, fleet: List, va: VehicleAnalytics, dispatcher=None,
             clock: Clock=None, output_dir: str=params.OUTPUT_DIR) -> str:
    """Generates all analytics needed for analysis.

    Args:
        request_collection (List): list containing all request objects
        fleet (List): list containing all vehicle objects
        va (VehicleAnalytics): vehicle analytics object performing snapshots at time intervals
        dispatcher (optional): dispatcher whose counters go into the metadata. Defaults to None.
        clock (Clock, optional): models high-level dispatcher load. Defaults to None.
        output_dir (str, optional): directory collecting all runs. Defaults to OUTPUT_DIR.

    Returns:
        str: directory of the saved run
    """
    new_dir = __create_new_run(output_dir)
    request_info_df = extract_request_information(request_collection)
    request_info_df.to_csv(os.path.join(new_dir, 'request_info.csv'), index=False)

    vehicle_info_df = extract_vehicle_information(fleet)
    vehicle_info_df.to_csv(os.path.join(new_dir, 'vehicle_info.csv'), index=False)

    vehicle_snapshot_df = extract_vehicle_snapshots(va)
    if vehicle_snapshot_df is not None:
        vehicle_snapshot_df.to_csv(os.path.join(new_dir, 'vehicle_snapshots.csv'), index=False)

    if clock is not None:
        clock_df = save_clock_data(clock)
        clock_df.to_csv(os.path.join(new_dir, 'clock_info.csv'), index=False)

    save_metadata(new_dir, dispatcher)
    print('Simulation data successfully saved.')
    return new_dir
