import pytest
from prometheus_client import CollectorRegistry

from ambientweather_exporter import Translator, build_gauges

STATION = "backyard"
REMOTE = "192.168.1.50"


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def gauges(registry):
    return build_gauges(STATION, registry=registry)


@pytest.fixture
def translator(gauges):
    return Translator(gauges)


@pytest.fixture
def sample(registry):
    """Read a series back, None when it is not in the registry."""

    def read(metric, discriminator=None, label="sensor", remote=REMOTE, name=STATION):
        labels = {"remote_address": remote, "name": name}
        if discriminator is not None:
            labels[label] = discriminator
        return registry.get_sample_value(metric, labels)

    return read
