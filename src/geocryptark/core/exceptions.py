"""
Exceptions for GeoCryptArk
This is placed such that there is a general error catcher
"""


class GeoCryptArkError(Exception):
    # general container for errors
    pass


class InvalidCoordinatesError(GeoCryptArkError, ValueError):
    # raised when a single lat/lng pair is out of range

    def __init__(self, lat, lng):
        self.lat = lat
        self.lng = lng
        super().__init__(
            "Invalid coordinates: latitude must be between -90 and 90, "
            "longitude must be between -180 and 180"
        )


class InvalidCoordinateListError(GeoCryptArkError, ValueError):
    # raised when scanning a coordinate list finds an out-of-range pair

    def __init__(self, lat, lng):
        self.lat = lat
        self.lng = lng
        super().__init__(
            "Invalid coordinates in list: latitude must be between -90 and 90, "
            f"longitude must be between -180 and 180. Got: lat={lat}, lng={lng}"
        )


class ConfigurationError(GeoCryptArkError):
    # raised when CLI/env configuration is missing or malformed
    pass
