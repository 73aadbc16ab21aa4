import pytest

from cronfields import telemetry


@pytest.fixture(autouse=True)
def reset_telemetry():
    yield

    telemetry._handlers.clear()
