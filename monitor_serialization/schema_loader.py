from pathlib import Path
import json

_SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def load_schema(name: str):
    schema_path = _SCHEMAS_DIR / name
    if not schema_path.exists():
        raise FileNotFoundError(f"Missing interval schema: {schema_path}")
    return json.loads(schema_path.read_text(encoding="utf-8"))
