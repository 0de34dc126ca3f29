"""Utility helpers for safe JSON handling and pretty formatting."""
from __future__ import annotations
from base64 import urlsafe_b64encode
from datetime import date, datetime
from typing import Any
import json

class _FaunaJSONEncoder(json.JSONEncoder):
    """Encodes the client's wire types; everything else goes to ``json``."""

    def default(self, obj: Any) -> Any:
        if hasattr(obj, 'to_fauna_json'):
            return obj.to_fauna_json()
        if isinstance(obj, datetime):
            return {'@ts': obj.isoformat()}
        if isinstance(obj, date):
            return {'@date': obj.isoformat()}
        if isinstance(obj, (bytes, bytearray)):
            return {'@bytes': urlsafe_b64encode(bytes(obj)).decode('ascii')}
        return super().default(obj)

def to_json_pretty(value: Any) -> str:
    """Serialize ``value`` as indented JSON with sorted keys.

    Raises ``TypeError`` for content the encoder does not understand.
    """
    return json.dumps(value, cls=_FaunaJSONEncoder, indent=2, sort_keys=True)

def safe_json_load(text: str | None):
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None
