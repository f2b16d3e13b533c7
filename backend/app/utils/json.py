from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import orjson
from fastapi.responses import JSONResponse


def _default(o: Any):
    if isinstance(o, Decimal):
        return float(o)
    if isinstance(o, (datetime, date)):
        return o.isoformat()
    if isinstance(o, (set, frozenset)):
        return sorted(o)
    raise TypeError(f"Type is not JSON serializable: {type(o).__name__}")


def dumps_bytes(obj: Any) -> bytes:
    # Tab counts and option maps may be keyed by enums.
    return orjson.dumps(obj, option=orjson.OPT_NON_STR_KEYS, default=_default)


class ConsoleJSONResponse(JSONResponse):
    """JSON response rendered with orjson; also accepts Decimals and sets."""

    def render(self, content: Any) -> bytes:
        return dumps_bytes(content)
