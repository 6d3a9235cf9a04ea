from collections import deque
from typing import Iterable, List
from ..elements import Request

class PendingRequestQueue(object):
    def __init__(self):
        """
        FIFO of requests waiting for a vehicle.
        """
        self.__queue = deque()

    def __len__(self):
        return len(self.__queue)

    def __iter__(self):
        return iter(list(self.__queue))

    def enqueue(self, request: Request):
        self.__queue.append(request)

    def drain(self) -> List[Request]:
        """Removes and returns all pending requests in submission order."""
        requests = list(self.__queue)
        self.__queue.clear()
        return requests

    def requeue(self, requests: Iterable[Request]):
        self.__queue.extend(requests)
