from .network import Link, Network, euclidean_distance, generate_station_grid, load_stations
