from .vehicle_analytics import VehicleAnalytics
from .monitoring import save_run, extract_request_information, extract_vehicle_information
