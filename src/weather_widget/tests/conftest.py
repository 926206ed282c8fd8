from datetime import datetime

import pytest

from weather_widget.tests.fakes import (
    FakeProvider,
    LONDON,
    LONDON_FORECAST,
    PARIS,
    PARIS_FORECAST,
)


@pytest.fixture
def noon():
    return lambda: datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def provider():
    return FakeProvider(
        {"Paris": PARIS, "London": LONDON},
        {"Paris": PARIS_FORECAST, "London": LONDON_FORECAST},
    )
