"""
JSON Schema for the structural form accepted by the multi-field validator.

Field values are left unconstrained: scalars and arrays of scalars are the
expected shapes, anything else is stringified by the rules.
"""

# =============================================================================
# Field mapping schema
# =============================================================================
FIELD_MAPPING_SCHEMA: dict = {
    "name": "field_mapping",
    "schema": {
        "type": "object",
        "description": "Root of a request body; keys become field names",
    },
}
