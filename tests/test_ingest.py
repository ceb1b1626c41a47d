"""
Tests for the catalog CSV loader (scripts/ingest.py).
"""

from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from app.db.schema import models
from app.main import app
from scripts.ingest import load_into_db, parse_jeep_csv, parse_price, parse_trim

BUNDLED_CSV = Path(__file__).resolve().parents[1] / "data" / "jeep_models.csv"

HEADER = "ModelId,TrimLevel,NumDoors,WheelSize,BasePrice\n"


@pytest.fixture
def csv_file(tmp_path):
    def write(*lines: str):
        path = tmp_path / "jeeps.csv"
        path.write_text(HEADER + "".join(line + "\n" for line in lines))
        return str(path)

    return write


class TestParseJeepCsv:
    def test_valid_rows_are_parsed(self, csv_file) -> None:
        records, stats = parse_jeep_csv(csv_file(
            "WRANGLER,Sport,2,17,28475.00",
            "COMPASS, Limited ,4,18,31575",
        ))

        assert records == [
            {"model_id": "WRANGLER", "trim_level": "Sport", "num_doors": 2,
             "wheel_size": 17, "base_price": Decimal("28475.00")},
            {"model_id": "COMPASS", "trim_level": "Limited", "num_doors": 4,
             "wheel_size": 18, "base_price": Decimal("31575.00")},
        ]
        assert stats["n_rows"] == 2
        assert stats["n_records"] == 2
        assert stats["n_errors"] == 0

    def test_invalid_rows_are_counted_not_loaded(self, csv_file) -> None:
        records, stats = parse_jeep_csv(csv_file(
            "WRANGLER,Sport,2,17,28475.00",
            "DELOREAN,Sport,2,15,100.00",
            "WRANGLER,@#$%,2,17,100.00",
            "WRANGLER,Rubicon,two,17,100.00",
            "WRANGLER,Rubicon,2,17,-5.00",
            "WRANGLER,Rubicon,2,17",
        ))

        assert len(records) == 1
        assert stats["n_rows"] == 6
        assert stats["n_errors"] == 5
        assert [ex["row_number"] for ex in stats["error_examples"]] == [2, 3, 4, 5, 6]

    def test_duplicate_rows_keep_the_last_price(self, csv_file) -> None:
        records, stats = parse_jeep_csv(csv_file(
            "WRANGLER,Sport,2,17,28475.00",
            "WRANGLER,Sport,2,17,29000.00",
        ))

        assert [r["base_price"] for r in records] == [Decimal("29000.00")]
        assert stats["n_duplicates"] == 1
        assert len(stats["duplicate_examples"]) == 1

    def test_bundled_catalog_parses_cleanly(self) -> None:
        records, stats = parse_jeep_csv(str(BUNDLED_CSV))

        assert stats["n_errors"] == 0
        assert stats["n_duplicates"] == 0
        assert len(records) == stats["n_rows"]


class TestFieldParsers:
    @pytest.mark.parametrize("value", ["", "x" * 31, "Sport!", "Sport-S", "Sport_S", "Sport\tS", "_"])
    def test_bad_trims_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            parse_trim(value)

    @pytest.mark.parametrize("value", ["abc", "NaN", "-0.01", "1.001"])
    def test_bad_prices_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            parse_price(value)


class TestLoadIntoDb:
    def test_load_is_idempotent(self, engine, csv_file) -> None:
        records, _ = parse_jeep_csv(csv_file(
            "WRANGLER,Sport,2,17,28475.00",
            "GLADIATOR,Sport,4,17,35040.00",
        ))

        load_into_db(records)
        load_into_db(records)

        with engine.connect() as conn:
            count = conn.execute(select(func.count()).select_from(models)).scalar_one()
        assert count == 2

    def test_reload_updates_price(self, engine, csv_file) -> None:
        load_into_db(parse_jeep_csv(csv_file("WRANGLER,Sport,2,17,28475.00"))[0])
        load_into_db(parse_jeep_csv(csv_file("WRANGLER,Sport,2,17,29995.00"))[0])

        with engine.connect() as conn:
            prices = conn.execute(select(models.c.base_price)).scalars().all()
        assert prices == [Decimal("29995.00")]

    def test_loaded_rows_are_served_by_the_api(self, engine, csv_file) -> None:
        load_into_db(parse_jeep_csv(csv_file("RENEGADE,Trailhawk,4,17,29145.00"))[0])

        response = TestClient(app).get("/jeeps", params={"model": "RENEGADE", "trim": "Trailhawk"})

        assert response.status_code == 200
        [jeep] = response.json()
        assert Decimal(jeep["basePrice"]) == Decimal("29145.00")
