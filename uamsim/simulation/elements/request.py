class Request(object):
    def __init__(self, request_id: str, from_link, to_link, distance: float, submission_time: float):
        self.request_id = request_id
        self.from_link = from_link
        self.to_link = to_link
        self.distance = distance
        self.submission_time = submission_time

        # Match status
        self.vehicle = None
        self.pooled = False
        self.deferrals = 0

        # Timing
        self.pickup_time = None
        self.dropoff_time = None

    @property
    def origin(self):
        return self.from_link.coord

    @property
    def destination(self):
        return self.to_link.coord

    @property
    def matched(self):
        return self.vehicle is not None

    @property
    def wait_time(self):
        if self.pickup_time is None:
            return None
        return self.pickup_time - self.submission_time

    def same_route_as(self, other: 'Request') -> bool:
        """True if both requests start and end on equal links."""
        return self.from_link == other.from_link and self.to_link == other.to_link

    def __repr__(self):
        return f'Request({self.request_id}: {self.from_link.link_id} -> {self.to_link.link_id})'
