import matplotlib

matplotlib.use("Agg")

import pytest

from roi import InputRecord


@pytest.fixture
def defaults():
    return InputRecord.defaults()
