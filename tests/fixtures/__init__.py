"""Fixtures for graphql_loader tests"""

from pathlib import Path

__all__ = ["fixtures_path", "invalid_schema_pattern", "schema_pattern"]

# directory with the schema files used as fixtures
fixtures_path = Path(__file__).parent

# matches the valid schema split over the files in the schema directory
schema_pattern = "schema/**/*.graphql"

# matches a schema that references an undefined type
invalid_schema_pattern = "invalid/*.graphql"
