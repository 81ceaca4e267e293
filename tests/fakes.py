"""
In-memory stand-ins for the upstream provider clients.

The fakes record every call, which lets tests assert on cache hits by
counting upstream requests.
"""

from datetime import datetime, timezone

from src.errors import UpstreamError

# 12:00 PDT on 1 July 2026
FIXED_NOW = datetime(2026, 7, 1, 19, 0, tzinfo=timezone.utc)

def make_open_meteo_payload(
    wind_speed_kmh=20.0,
    wind_gust_kmh=30.0,
    wind_direction=270.0,
    temperature=16.5,
    humidity=78.0,
    pressure=1015.2,
    visibility=24140.0,
):
    """Open-Meteo style hourly document with two samples per variable."""
    return {
        "latitude": 37.8,
        "longitude": -122.46,
        "hourly_units": {
            "time": "iso8601",
            "wind_speed_10m": "km/h",
            "wind_gusts_10m": "km/h",
            "wind_direction_10m": "°",
            "temperature_2m": "°C",
            "relative_humidity_2m": "%",
            "pressure_msl": "hPa",
            "visibility": "m",
        },
        "hourly": {
            "time": ["2026-07-01T12:00", "2026-07-01T13:00"],
            "wind_speed_10m": [wind_speed_kmh, 25.0],
            "wind_gusts_10m": [wind_gust_kmh, 35.0],
            "wind_direction_10m": [wind_direction, 265.0],
            "temperature_2m": [temperature, 17.0],
            "relative_humidity_2m": [humidity, 75.0],
            "pressure_msl": [pressure, 1015.0],
            "visibility": [visibility, 24000.0],
        },
    }


def make_tide_predictions():
    """CO-OPS hilo series around FIXED_NOW, in station local time."""
    return [
        {"t": "2026-07-01 05:12", "v": "-0.412", "type": "L"},
        {"t": "2026-07-01 11:50", "v": "4.980", "type": "H"},
        {"t": "2026-07-01 11:57", "v": "5.001", "type": "H"},
        {"t": "2026-07-01 17:36", "v": "1.204", "type": "L"},
        {"t": "2026-07-01 23:41", "v": "6.118", "type": "H"},
    ]


class FakeWeatherClient:
    """Stands in for OpenMeteoClient."""

    source = "open-meteo"

    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else make_open_meteo_payload()
        self.error = error
        self.calls = []
        self.closed = False

    def fetch_hourly(self, lat, lon, variables=None):
        self.calls.append((lat, lon))
        if self.error is not None:
            raise self.error
        return self.payload

    def close(self):
        self.closed = True


class FakeTideClient:
    """Stands in for NOAATidesClient."""

    source = "noaa-coops"

    def __init__(self, predictions=None, error=None):
        self.predictions = predictions if predictions is not None else make_tide_predictions()
        self.error = error
        self.calls = []
        self.closed = False

    def get_predictions(self, station, begin, end, **params):
        self.calls.append({"station": station, "begin": begin, "end": end, **params})
        if self.error is not None:
            raise self.error
        return self.predictions

    def close(self):
        self.closed = True


def upstream_failure(source="open-meteo"):
    return UpstreamError("connection refused", source=source)


