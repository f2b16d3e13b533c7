"""Request checks shared by the settings form routers."""

from typing import Any, Iterable, Optional

from fastapi import status
from pydantic import TypeAdapter, ValidationError

from ..schemas.pricing_parameter import SortUpdate
from ..services.option_sets import unknown_options
from ..utils.errors import api_error

_sort_updates = TypeAdapter(list[SortUpdate])


def parse_sort_updates(payload: Any, missing_message: str = "Updates must be an array") -> list[SortUpdate]:
    updates = payload.get("updates") if isinstance(payload, dict) else None
    if not isinstance(updates, list):
        raise api_error(missing_message)
    try:
        return _sort_updates.validate_python(updates)
    except ValidationError:
        raise api_error("Each update must have id and sort_order")


def reject_unknown(field: str, selected: Optional[Iterable[Any]], options: Iterable[Any]) -> None:
    """400 when ``selected`` names ids missing from the loaded option list."""
    unknown = unknown_options(selected, options)
    if unknown:
        raise api_error(f"Unknown {field}: {', '.join(unknown)}", status.HTTP_400_BAD_REQUEST)
