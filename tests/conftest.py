import pytest

from helpers import ScriptedRandom


@pytest.fixture
def quiet_rng():
    """An rng whose spawn roll never hits the trigger value."""
    return ScriptedRandom()
