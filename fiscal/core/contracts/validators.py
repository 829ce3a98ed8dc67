"""
JSON Schema Contract Validators

The QR code payload is checked against a JSON Schema (Draft 2020-12)
before it is encoded. Schemas ship with the package in schema/.

Schemas:
- afip_qr_payload.json (QR code payload, authority format version 1)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

QR_PAYLOAD_SCHEMA = "afip_qr_payload"


def load_schema(schema_name: str, schema_dir: Path | None = None) -> Dict[str, Any]:
    """
    Load and meta-validate a schema file.

    Raises:
        FileNotFoundError: If <schema_dir>/<schema_name>.json does not exist
        ValueError: If the file is not a valid Draft 2020-12 schema
    """
    schema_path = (schema_dir or SCHEMA_DIR) / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


class ContractValidator:
    """Draft 2020-12 validator bound to one schema file."""

    def __init__(self, schema_name: str, schema_dir: Path | None = None):
        self.schema_name = schema_name
        self.schema = load_schema(schema_name, schema_dir)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: If the data does not match the schema
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)


@lru_cache(maxsize=None)
def fiscal_qr_payload_validator() -> ContractValidator:
    """Shared validator of the QR payload, loaded on first use."""
    return ContractValidator(QR_PAYLOAD_SCHEMA)


def validate_fiscal_qr_payload(data: Dict[str, Any]) -> None:
    """
    Validate a QR code payload.

    Raises:
        jsonschema.ValidationError: If the payload does not match the schema
    """
    fiscal_qr_payload_validator().validate(data)
