class Station(object):
    def __init__(self, station_id: str, name: str, link):
        """Vertiport vehicles stay at between trips.

        Args:
            station_id (str): unique station id
            name (str): human readable name
            link (Link): network link the station is attached to
        """
        self.station_id = station_id
        self.name = name
        self.link = link

    @property
    def coord(self):
        return self.link.coord

    def __repr__(self):
        return f'Station({self.station_id})'
