"""Case-insensitive substring matching used by list filters."""


def matches_search(term: str | None, *values: str | None) -> bool:
    """True when ``term`` is empty or occurs in any of ``values``."""
    if not term:
        return True
    needle = term.casefold()
    return any(needle in value.casefold() for value in values if value)
