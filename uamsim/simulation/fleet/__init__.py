from .fleet import build_vehicle_types, build_fleet
from .vehicle_process import VehicleProcess
