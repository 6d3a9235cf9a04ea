import numpy as np
from typing import List, Tuple

def sample_station_pair(station_ids: List[str], weights: np.ndarray=None) -> Tuple[str, str]:
    """Samples an origin and a distinct destination station.

    Args:
        station_ids (List[str]): candidate station ids
        weights (np.ndarray, optional): sampling probabilities per station. Defaults to uniform.

    Returns:
        Tuple[str, str]: origin and destination station ids

    Raises:
        ValueError: if fewer than two stations are given
    """
    if len(station_ids) < 2:
        raise ValueError(f'At least two stations are needed to sample a trip, got {len(station_ids)}')
    origin, destination = np.random.choice(station_ids, size=2, replace=False, p=weights)
    return str(origin), str(destination)
