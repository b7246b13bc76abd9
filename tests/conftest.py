import pytest

from hyperservice.testing import FixtureLoader, MockService
from models import DATA_DIR


@pytest.fixture
def loader() -> FixtureLoader:
    return FixtureLoader(str(DATA_DIR / "input"))


@pytest.fixture
def service() -> MockService:
    return MockService(str(DATA_DIR / "output"))
