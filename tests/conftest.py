import pytest

from pymuzzle.ballistics.energy import UnitSystem


@pytest.fixture(params=[UnitSystem.METRIC, UnitSystem.IMPERIAL], ids=["metric", "imperial"])
def units(request) -> UnitSystem:
    """Runs a test once per unit system."""
    return request.param
