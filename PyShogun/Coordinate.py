class Coordinate:
    """
    Latitude/longitude pair in decimal degrees
    """
    def __init__(self, latitude : float, longitude : float):
        self.latitude = latitude
        self.longitude = longitude

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Coordinate):
            return False

        return (self.latitude, self.longitude) == (value.latitude, value.longitude)

    def __hash__(self) -> int:
        return hash((self.latitude, self.longitude))

    def __repr__(self) -> str:
        return f"Coordinate(latitude={self.latitude}, longitude={self.longitude})"

    def to_dict(self) -> dict:
        return {'latitude': self.latitude, 'longitude': self.longitude}
