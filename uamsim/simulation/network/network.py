from collections import namedtuple
from typing import Dict, List, Tuple
import numpy as np
import pandas as pd
from shapely.geometry import MultiPoint
from ..elements import Station

Link = namedtuple('Link', 'link_id coord')

def euclidean_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))


class Network(object):
    def __init__(self, links: List[Link]):
        """
        Minimal network exposing the links vehicles and requests refer to.
        """
        self.links = {link.link_id: link for link in links}

    def __len__(self):
        return len(self.links)

    def get_bounding_box(self) -> Tuple[float, float, float, float]:
        """Bounding box of all link coordinates.

        Returns:
            Tuple[float, float, float, float]: min_x, min_y, max_x, max_y
        """
        if len(self.links) == 0:
            raise ValueError('Cannot compute bounding box of an empty network.')

        return MultiPoint([link.coord for link in self.links.values()]).bounds


def _build(rows: List[Tuple[str, str, float, float]]) -> Tuple[Network, Dict[str, Station]]:
    links = []
    stations = {}
    for station_id, name, x, y in rows:
        link = Link(f'link_{station_id}', (float(x), float(y)))
        links.append(link)
        stations[station_id] = Station(station_id, name, link)

    return Network(links), stations


def generate_station_grid(rows: int, cols: int, spacing: float) -> Tuple[Network, Dict[str, Station]]:
    """Lays out rows x cols stations on a regular grid.

    Args:
        rows (int): number of grid rows
        cols (int): number of grid columns
        spacing (float): distance between neighbouring stations

    Returns:
        Tuple[Network, Dict[str, Station]]: network and stations by id
    """
    xs, ys = np.meshgrid(np.arange(cols) * spacing, np.arange(rows) * spacing)
    station_rows = []
    for i, (x, y) in enumerate(zip(xs.ravel(), ys.ravel())):
        station_rows.append((f'S{i}', f'Vertiport {i}', x, y))

    return _build(station_rows)


def load_stations(path: str) -> Tuple[Network, Dict[str, Station]]:
    """Reads stations from a csv file with columns station_id, name, x, y."""
    station_df = pd.read_csv(path, dtype={'station_id': str, 'name': str})
    rows = station_df[['station_id', 'name', 'x', 'y']].itertuples(index=False, name=None)
    return _build(list(rows))
