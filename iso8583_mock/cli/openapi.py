"""Generate the OpenAPI specification from the FastAPI app.

Usage:
    iso8583-mock-openapi [output_path]

Writes the OpenAPI 3.1 document for the mock ISO 8583 API, by default to
docs/openapi.json.
"""

import json
import sys
from datetime import UTC, datetime
from pathlib import Path

DEFAULT_OUTPUT = "docs/openapi.json"


def generate_openapi(output_path: str = DEFAULT_OUTPUT) -> dict:
    """Generate and save OpenAPI specification."""
    from iso8583_mock.main import create_app

    app = create_app()
    openapi_spec = app.openapi()

    openapi_spec["info"]["x-generated-at"] = datetime.now(UTC).isoformat()

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with open(output, "w") as f:
        json.dump(openapi_spec, f, indent=2)

    print(f"OpenAPI spec written to: {output}")
    return openapi_spec


def main() -> None:
    """Generate OpenAPI spec."""
    generate_openapi(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_OUTPUT)
