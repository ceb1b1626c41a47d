from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.db.engine import get_engine
from app.db.schema import metadata, models
from app.main import app

SEED_ROWS = [
    {"model_pk": 1, "model_id": "WRANGLER", "trim_level": "Sport", "num_doors": 2,
     "wheel_size": 17, "base_price": Decimal("28475.00")},
    {"model_pk": 2, "model_id": "WRANGLER", "trim_level": "Sport", "num_doors": 4,
     "wheel_size": 17, "base_price": Decimal("31975.00")},
    {"model_pk": 3, "model_id": "WRANGLER", "trim_level": "Sport S", "num_doors": 4,
     "wheel_size": 17, "base_price": Decimal("35225.00")},
    {"model_pk": 4, "model_id": "GLADIATOR", "trim_level": "Sport", "num_doors": 4,
     "wheel_size": 17, "base_price": Decimal("35040.00")},
    {"model_pk": 5, "model_id": "GRAND_CHEROKEE", "trim_level": "Summit", "num_doors": 4,
     "wheel_size": 21, "base_price": Decimal("59990.50")},
]


@pytest.fixture
def engine(tmp_path, monkeypatch):
    """Empty catalog schema in a throwaway SQLite file."""
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'test.sqlite'}")
    engine = get_engine()
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_engine(engine):
    with engine.begin() as conn:
        conn.execute(models.insert(), SEED_ROWS)
    return engine


@pytest.fixture
def client(seeded_engine):
    return TestClient(app)
