from pathlib import Path

from dotenv import load_dotenv
import pytest

from bridal_quote.schemas.quote import DayDetails, ServiceChoice, ServiceForm
from bridal_quote.services.artist_pricing import DEFAULT_PRICES

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")


@pytest.fixture
def prices():
    return DEFAULT_PRICES


@pytest.fixture
def makeup_only():
    return ServiceChoice(makeup=True, hair=False)


@pytest.fixture
def make_form():
    """Build a ServiceForm; ``days`` is a list of DayDetails keyword dicts."""

    def _make(artist="Lola", days=None, **kwargs):
        per_day = [DayDetails(**d) for d in (days or [])]
        return ServiceForm(artist=artist, per_day=per_day, **kwargs)

    return _make
