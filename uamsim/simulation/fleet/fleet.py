from typing import Dict, List
from ..elements import Station, Vehicle, VehicleType

def build_vehicle_types(type_params: Dict) -> List[VehicleType]:
    """Creates vehicle types from a {type_id: (range, capacity)} mapping."""
    return [VehicleType(type_id, float(r), int(c)) for type_id, (r, c) in type_params.items()]


def build_fleet(stations: Dict[str, Station], vehicle_types: List[VehicleType], vehicles_per_station: int,
                start_time: float=0.) -> List[Vehicle]:
    """Places vehicles_per_station vehicles of every type at each station.

    Args:
        stations (Dict[str, Station]): stations by id
        vehicle_types (List[VehicleType]): types to instantiate
        vehicles_per_station (int): vehicles of each type per station
        start_time (float, optional): begin of the initial stays. Defaults to 0.

    Returns:
        List[Vehicle]: the fleet
    """
    fleet = []
    for station in stations.values():
        for vehicle_type in vehicle_types:
            for _ in range(vehicles_per_station):
                vehicle_id = f'{vehicle_type.type_id}_{len(fleet)}'
                fleet.append(Vehicle(vehicle_id, vehicle_type, station, start_time))

    return fleet
