# app/models/jeeps.py

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# ASCII letters, digits and spaces only
TRIM_PATTERN = r"^[A-Za-z0-9 ]*$"
TRIM_MAX_LENGTH = 30


class JeepModel(str, Enum):
    CHEROKEE = "CHEROKEE"
    COMPASS = "COMPASS"
    GLADIATOR = "GLADIATOR"
    GRAND_CHEROKEE = "GRAND_CHEROKEE"
    RENEGADE = "RENEGADE"
    WRANGLER = "WRANGLER"
    WRANGLER_4XE = "WRANGLER_4XE"


class Jeep(BaseModel):
    """
    One row of the catalog. Serialized with the camelCase keys
    clients expect (modelPK, modelId, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),
    )

    model_pk: int = Field(alias="modelPK")
    model_id: JeepModel = Field(alias="modelId")
    trim_level: str = Field(alias="trimLevel")
    num_doors: int = Field(alias="numDoors")
    wheel_size: int = Field(alias="wheelSize")
    base_price: Decimal = Field(alias="basePrice", ge=0, decimal_places=2)
