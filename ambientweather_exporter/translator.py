"""Translate one Ambient Weather report into gauge updates."""

import logging
from typing import Mapping, Optional, Sequence

from .formulas import dew_point, heat_index, wind_chill
from .gauges import WeatherGauges, remove_series

logger = logging.getLogger(__name__)

Fields = Mapping[str, Sequence[str]]

# numbered auxiliary sensors, temp1f..temp10f and friends
SLOTS = range(1, 11)

# (gauge attribute, discriminator, field) set best-effort after the outdoor block
SCALAR_FIELDS = [
    ("battery", "outdoor", "battout"),
    ("battery", "indoor", "battin"),
    ("battery", "lightning", "batt_lightning"),
    ("humidity", "indoor", "humidityin"),
    ("barometer", "relative", "baromrelin"),
    ("barometer", "absolute", "baromabsin"),
    ("wind_dir", "current", "winddir"),
    ("wind_dir", "avg10m", "winddir_avg10m"),
    ("wind_speed_mph", "gusts", "windgustmph"),
    ("solar_radiation", None, "solarradiation"),
    ("rain_in", "hourly", "hourlyrainin"),
    ("rain_in", "daily", "dailyrainin"),
    ("rain_in", "weekly", "weeklyrainin"),
    ("rain_in", "monthly", "monthlyrainin"),
    ("rain_in", "yearly", "yearlyrainin"),
    ("rain_in", "total", "totalrainin"),
    ("rain_in", "event", "eventrainin"),
    ("ultraviolet", None, "uv"),
    ("lightning_strikes", "day", "lightning_day"),
    ("lightning_distance", None, "lightning_distance"),
    ("lightning_last_strike", None, "lightning_time"),
]


def first_value(fields: Fields, name: str) -> Optional[str]:
    """Return the first value reported for ``name`` without CR/LF, or None."""
    values = fields.get(name)
    if not values:
        return None
    return values[0].replace("\n", "").replace("\r", "")


def parse_value(fields: Fields, name: str) -> Optional[float]:
    raw = first_value(fields, name)
    if raw is None:
        return None
    try:
        # float() is laxer than the station firmware format
        if "_" in raw or raw != raw.strip():
            raise ValueError(raw)
        return float(raw)
    except ValueError:
        logger.debug("Failed to parse value for %s: %r", name, raw)
        return None


class Translator:
    """Applies reports from one station to its gauges.

    Holds no per-report state, so ``translate`` may be called from several
    request threads at once.
    """

    def __init__(self, gauges: WeatherGauges):
        self.gauges = gauges
        self.name = gauges.station_name

    def translate(self, remote_address: str, fields: Fields) -> None:
        try:
            self._translate(remote_address, fields)
        except Exception:
            logger.exception("Failed to translate report from %s", remote_address)

    def _translate(self, remote_address, fields):
        g = self.gauges

        def update(gauge, *labels, field):
            value = parse_value(fields, field)
            if value is not None:
                gauge.labels(remote_address, self.name, *labels).set(value)
            return value

        for i in SLOTS:
            slot = str(i)
            soil = f"soil{i}"

            if first_value(fields, f"temp{i}f") is not None:
                update(g.temperature, slot, field=f"temp{i}f")
                update(g.battery, slot, field=f"batt{i}")
            else:
                remove_series(g.temperature, name=self.name, sensor=slot)
                remove_series(g.battery, name=self.name, sensor=slot)

            if first_value(fields, f"soilhum{i}") is not None:
                update(g.humidity, soil, field=f"soilhum{i}")
                update(g.battery, soil, field=f"battsm{i}")
            else:
                remove_series(g.humidity, name=self.name, sensor=soil)
                remove_series(g.battery, name=self.name, sensor=soil)

            if first_value(fields, f"humidity{i}") is not None:
                update(g.humidity, slot, field=f"humidity{i}")
            else:
                remove_series(g.humidity, name=self.name, sensor=slot)

        update(g.temperature, "indoor", field="tempinf")

        temp_f = update(g.temperature, "outdoor", field="tempf")
        if temp_f is not None:
            feels_like = temp_f
            wind_mph = update(g.wind_speed_mph, "sustained", field="windspeedmph")
            if wind_mph is not None and temp_f <= 40:
                feels_like = wind_chill(temp_f, wind_mph)
            rh = update(g.humidity, "outdoor", field="humidity")
            if rh is not None:
                g.temperature.labels(remote_address, self.name, "dewpoint").set(dew_point(temp_f, rh))
                if temp_f >= 80:
                    feels_like = heat_index(temp_f, rh)
            g.temperature.labels(remote_address, self.name, "feelsLike").set(feels_like)

        for attr, discriminator, field in SCALAR_FIELDS:
            labels = () if discriminator is None else (discriminator,)
            update(getattr(g, attr), *labels, field=field)

        station_type = first_value(fields, "stationtype")
        if station_type is not None:
            g.stationtype.labels(remote_address, self.name, station_type).set(1)
