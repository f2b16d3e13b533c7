"""Multi-select helpers shared by the settings forms."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional


def _ids(values: Iterable[Any]) -> set[str]:
    return {str(v) for v in values}


def all_selected(selected: Iterable[Any], options: Iterable[Any]) -> bool:
    """True when the selection equals the option set.

    An empty option list is never "all selected"; the checkbox has nothing
    to reflect.
    """
    option_ids = _ids(options)
    return bool(option_ids) and _ids(selected) == option_ids


def toggle_select_all(selected: Iterable[Any], options: Iterable[Any]) -> list[str]:
    """Return the selection after clicking "Select All".

    Clears everything when all options are already selected, otherwise
    selects every option (in option order).
    """
    options = [str(o) for o in options]
    if all_selected(selected, options):
        return []
    return list(dict.fromkeys(options))


def unknown_options(selected: Optional[Iterable[Any]], options: Iterable[Any]) -> list[str]:
    if not selected:
        return []
    option_ids = _ids(options)
    return sorted(_ids(selected) - option_ids)


def _normalize(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def find_duplicate_name(
    name: Optional[str],
    category: Optional[str],
    siblings: Iterable[Mapping[str, Any] | Any],
    exclude_id: Optional[str] = None,
    category_field: str = "variable_category",
):
    """Return the sibling whose name collides with ``name``, or ``None``.

    Names compare case- and whitespace-insensitively within one category;
    ``category=None`` compares across all siblings. ``exclude_id`` skips the
    record being edited.
    """
    wanted = _normalize(name)
    if not wanted:
        return None
    for sibling in siblings:
        get = sibling.get if isinstance(sibling, Mapping) else lambda k, s=sibling: getattr(s, k, None)
        if exclude_id is not None and str(get("id")) == str(exclude_id):
            continue
        if category is not None and _normalize(get(category_field)) != _normalize(category):
            continue
        if _normalize(get("name")) == wanted:
            return sibling
    return None
