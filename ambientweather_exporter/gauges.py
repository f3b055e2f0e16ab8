"""Gauge families published for a single weather station."""

from dataclasses import dataclass
from typing import Optional

from prometheus_client import CollectorRegistry, Gauge

# every family starts with these two labels
BASE_LABELS = ("remote_address", "name")


@dataclass
class WeatherGauges:
    station_name: str
    registry: CollectorRegistry
    temperature: Gauge  # fahrenheit
    battery: Gauge  # 1 = ok; 0 = low
    humidity: Gauge
    barometer: Gauge
    wind_dir: Gauge
    wind_speed_mph: Gauge
    solar_radiation: Gauge
    rain_in: Gauge
    ultraviolet: Gauge
    lightning_strikes: Gauge
    lightning_last_strike: Gauge
    lightning_distance: Gauge
    stationtype: Gauge


def _gauge(registry, prefix, name, documentation, *labels):
    return Gauge(
        name,
        documentation,
        labelnames=BASE_LABELS + labels,
        namespace=prefix,
        registry=registry,
    )


def build_gauges(
    station_name: str, prefix: str = "", registry: Optional[CollectorRegistry] = None
) -> WeatherGauges:
    """Create and register every gauge family.

    An empty ``prefix`` leaves metric names unprefixed, otherwise names
    become ``<prefix>_<name>``.
    """
    if registry is None:
        registry = CollectorRegistry()
    prefix = prefix or ""

    return WeatherGauges(
        station_name=station_name or "",
        registry=registry,
        temperature=_gauge(registry, prefix, "temperature", "Temperature in fahrenheit", "sensor"),
        battery=_gauge(registry, prefix, "battery", "Battery status, 1 = ok, 0 = low", "sensor"),
        humidity=_gauge(registry, prefix, "humidity", "Relative humidity in percent", "sensor"),
        barometer=_gauge(registry, prefix, "barometer", "Barometric pressure in inHg", "type"),
        wind_dir=_gauge(registry, prefix, "wind_dir", "Wind direction in degrees", "period"),
        wind_speed_mph=_gauge(registry, prefix, "wind_speed_mph", "Wind speed in mph", "type"),
        solar_radiation=_gauge(registry, prefix, "solar_radiation", "Solar radiation in W/m2"),
        rain_in=_gauge(registry, prefix, "rain_in", "Rain in inches", "period"),
        ultraviolet=_gauge(registry, prefix, "ultraviolet", "Ultra Violet index 1-10"),
        lightning_strikes=_gauge(registry, prefix, "lightning_strikes", "Lightning strike count", "period"),
        lightning_last_strike=_gauge(
            registry, prefix, "lightning_last_strike", "Last lightning strike in seconds since Epoch"
        ),
        lightning_distance=_gauge(
            registry, prefix, "lightning_distance", "Last lightning strike distance in km"
        ),
        stationtype=_gauge(registry, prefix, "stationtype_info", "Station type reported by the device", "type"),
    )


def remove_series(gauge: Gauge, **labels: str) -> int:
    """Remove every series of ``gauge`` whose labels match ``labels``.

    Labels that are not given match anything, so a sensor slot can be
    dropped regardless of the address it was last reported from.
    Returns the number of series removed.
    """
    wanted = {key: str(value) for key, value in labels.items()}
    removed = 0
    for metric in gauge.collect():
        for sample in metric.samples:
            if all(sample.labels.get(key) == value for key, value in wanted.items()):
                try:
                    # sample labels keep the family's label order
                    gauge.remove(*sample.labels.values())
                except KeyError:
                    # already gone, removed by a concurrent report
                    continue
                removed += 1
    return removed
