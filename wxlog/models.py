from pathlib import Path
from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# --- Schema defaults ---

DEFAULT_FIELDS: Tuple[str, ...] = ("day", "condition", "high", "low")
DEFAULT_NUMERIC_FIELD = "high"
DEFAULT_STORE_PATH = Path("data") / "store.txt"

DELIMITER = "|"
SEPARATOR = "="

# One stored row: field name -> raw string value
Record = Dict[str, str]

# --- Store configuration ---

class StoreConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    fields: Tuple[str, ...] = DEFAULT_FIELDS  # canonical serialization order
    numeric_field: str = DEFAULT_NUMERIC_FIELD  # "" disables the total
    path: Path = DEFAULT_STORE_PATH

    @field_validator("fields")
    @classmethod
    def check_fields(cls, fields: Tuple[str, ...]) -> Tuple[str, ...]:
        if not fields:
            raise ValueError("at least one field is required")
        if len(set(fields)) != len(fields):
            raise ValueError(f"duplicate field names: {fields}")
        for name in fields:
            if not name or DELIMITER in name or SEPARATOR in name:
                raise ValueError(f"invalid field name: {name!r}")
        return fields

    @model_validator(mode="after")
    def check_numeric_field(self) -> "StoreConfig":
        if self.numeric_field and self.numeric_field not in self.fields:
            raise ValueError(f"numeric field {self.numeric_field!r} is not one of {self.fields}")
        return self
