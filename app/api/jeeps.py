# app/api/jeeps.py

import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import ValidationError
from sqlalchemy import select

from app.db.engine import get_engine
from app.db.schema import models
from app.errors import JeepMappingError, JeepNotFoundError
from app.models.jeeps import TRIM_MAX_LENGTH, TRIM_PATTERN, Jeep, JeepModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jeeps", tags=["jeeps"])

CENTS = Decimal("0.01")


def _row_to_jeep(row) -> Jeep:
    try:
        return Jeep(
            model_pk=row["model_pk"],
            model_id=JeepModel(row["model_id"]),
            trim_level=row["trim_level"],
            num_doors=row["num_doors"],
            wheel_size=row["wheel_size"],
            base_price=Decimal(str(row["base_price"])).quantize(CENTS),
        )
    except ValidationError as e:
        raise JeepMappingError(row["model_pk"], f"{e.error_count()} invalid field(s)") from e
    except (ValueError, ArithmeticError, TypeError) as e:
        raise JeepMappingError(row["model_pk"], repr(e)) from e


@router.get("", response_model=List[Jeep])
def fetch_jeeps(
    model: Optional[JeepModel] = Query(
        default=None,
        description="The model name (e.g. 'WRANGLER')",
    ),
    trim: Optional[str] = Query(
        default=None,
        max_length=TRIM_MAX_LENGTH,
        pattern=TRIM_PATTERN,
        description="The trim level (e.g. 'Sport'); exact match",
    ),
) -> List[Jeep]:
    """
    Returns the catalog rows matching the optional model and/or trim.
    """
    logger.info("Fetching jeeps: model=%s, trim=%s", model.value if model else None, trim)

    stmt = select(
        models.c.model_pk,
        models.c.model_id,
        models.c.trim_level,
        models.c.num_doors,
        models.c.wheel_size,
        models.c.base_price,
    )

    # Exact match on whichever filters were supplied
    if model is not None:
        stmt = stmt.where(models.c.model_id == model.value)
    if trim is not None:
        stmt = stmt.where(models.c.trim_level == trim)

    stmt = stmt.order_by(models.c.model_pk)

    engine = get_engine()

    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()

    if not rows:
        raise JeepNotFoundError(model.value if model else None, trim)

    return [_row_to_jeep(row) for row in rows]
