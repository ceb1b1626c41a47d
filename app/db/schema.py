# app/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, Numeric, Text,
    CheckConstraint, UniqueConstraint
)

metadata = MetaData()

models = Table(
    "models",
    metadata,
    Column("model_pk", Integer, primary_key=True, autoincrement=True),
    Column("model_id", Text, nullable=False),
    Column("trim_level", Text, nullable=False),
    Column("num_doors", Integer, nullable=False),
    Column("wheel_size", Integer, nullable=False),
    Column("base_price", Numeric(9, 2), nullable=False),
    UniqueConstraint(
        "model_id", "trim_level", "num_doors", "wheel_size",
        name="uq_models_natural_key",
    ),
    CheckConstraint("base_price >= 0", name="ck_models_base_price_nonneg"),
)
