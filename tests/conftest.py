import pytest

from LengthCalc import config_manager
from LengthCalc.LengthEngine import Compiler
from LengthCalc.UnitSystem import UnitSystem, UnitType


def make_compiler(unit_type, **overrides):
    settings = dict(config_manager.DEFAULT_SETTINGS)
    settings.update(overrides)
    return Compiler(unit_type, settings=settings)


@pytest.fixture
def generic():
    return make_compiler(UnitType.GENERIC)


@pytest.fixture
def metric():
    return make_compiler(UnitType.METRIC)


@pytest.fixture
def imperial():
    return make_compiler(UnitType.IMPERIAL)


@pytest.fixture
def metric_units():
    return UnitSystem(UnitType.METRIC)


@pytest.fixture
def imperial_units():
    return UnitSystem(UnitType.IMPERIAL)
