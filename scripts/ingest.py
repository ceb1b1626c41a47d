# scripts/ingest.py

import csv
import logging
import re
from decimal import Decimal, InvalidOperation

from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.engine import get_engine
from app.db.schema import models
from app.models.jeeps import TRIM_MAX_LENGTH, TRIM_PATTERN, JeepModel

logger = logging.getLogger(__name__)

FILE_PATH = "data/jeep_models.csv"

NATURAL_KEY = ("model_id", "trim_level", "num_doors", "wheel_size")


# ---- Helpers ----

def parse_model_id(value: str) -> str:
    return JeepModel(value.strip()).value


def parse_trim(value: str) -> str:
    value = value.strip()
    if not value or len(value) > TRIM_MAX_LENGTH or not re.fullmatch(TRIM_PATTERN, value):
        raise ValueError(f"invalid trim level {value!r}")
    return value


def parse_count(value: str) -> int:
    count = int(value.strip())
    if count <= 0:
        raise ValueError(f"expected a positive integer, got {count}")
    return count


def parse_price(value: str) -> Decimal:
    try:
        price = Decimal(value.strip())
    except InvalidOperation:
        raise ValueError(f"invalid price {value!r}")
    if not price.is_finite() or price < 0:
        raise ValueError(f"price must be a non-negative amount, got {value!r}")
    if price != price.quantize(Decimal("0.01")):
        raise ValueError(f"price has more than two decimals: {value!r}")
    return price.quantize(Decimal("0.01"))


def upsert_jeep(conn, jeep_row: dict) -> None:
    """
    Insert or update a catalog row by its natural key (idempotent load).

    jeep_row: dict mapping column names to values, e.g.
      {
        "model_id": "WRANGLER",
        "trim_level": "Sport",
        "num_doors": 2,
        "wheel_size": 17,
        "base_price": Decimal("28475.00"),
      }
    """
    stmt = sqlite_insert(models).values(**jeep_row)

    # Only the price is mutable; everything else is the key
    stmt = stmt.on_conflict_do_update(
        index_elements=[models.c[name] for name in NATURAL_KEY],
        set_={"base_price": stmt.excluded.base_price},
    )

    conn.execute(stmt)


def parse_jeep_csv(file_path: str = FILE_PATH):
    records_by_key = {}

    n_rows = 0
    n_errors = 0
    error_examples = []
    n_duplicates = 0
    duplicate_examples: list[str] = []

    with open(file_path, newline="") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                record = {
                    "model_id": parse_model_id(row["ModelId"]),
                    "trim_level": parse_trim(row["TrimLevel"]),
                    "num_doors": parse_count(row["NumDoors"]),
                    "wheel_size": parse_count(row["WheelSize"]),
                    "base_price": parse_price(row["BasePrice"]),
                }
            except (KeyError, ValueError, ArithmeticError, AttributeError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )
                continue

            key = tuple(record[name] for name in NATURAL_KEY)
            if key in records_by_key:
                n_duplicates += 1
                if len(duplicate_examples) < 5:
                    duplicate_examples.append(
                        f"Duplicate model {key!r} at CSV row {n_rows}"
                    )

            # later rows win, same as the upsert would
            records_by_key[key] = record

    records = list(records_by_key.values())

    stats = {
        "n_rows": n_rows,
        "n_records": len(records),
        "n_errors": n_errors,
        "error_examples": error_examples,
        "n_duplicates": n_duplicates,
        "duplicate_examples": duplicate_examples,
    }
    return records, stats


def load_into_db(records):
    engine = get_engine()
    with engine.begin() as conn:
        for record in records:
            upsert_jeep(conn, record)


def main():
    configure_logging(settings.log_level)

    records, stats = parse_jeep_csv(FILE_PATH)
    load_into_db(records)

    logger.info("Total CSV rows read:   %s", stats["n_rows"])
    logger.info("Catalog rows loaded:   %s", stats["n_records"])
    logger.info("Rows with errors:      %s", stats["n_errors"])
    logger.info("Duplicate models:      %s", stats["n_duplicates"])
    for example in stats["duplicate_examples"]:
        logger.warning("Duplicate model example: %s", example)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
