import pytest

from json_unescaper.runtime import telemetry


@pytest.fixture(autouse=True)
def quiet_telemetry():
    telemetry.configure(preset="quiet")
    yield
