"""
Public flag normalization.

The public API lets callers say "disabled", "hidden" or "hide_in_taskbar".
Internally every flag is positive-sense, so the inverted names are mapped
exactly once, here, and never stored.
"""

from typing import Any, Dict

from ..errors import InvalidConfiguration

# public (negative-sense) name -> internal (positive-sense) name
INVERTED_FLAGS: Dict[str, str] = {
    "disabled": "enabled",
    "hidden": "visible",
    "hide_in_taskbar": "show_in_taskbar",
}


def check_flag(value: Any, name: str) -> bool:
    """
    Validate a boolean option.

    Strings such as "false" or "no" are rejected, not coerced.

    Raises:
        InvalidConfiguration: If value is not a bool
    """
    if not isinstance(value, bool):
        raise InvalidConfiguration(f"must be true or false, got {value!r}", field=name)
    return value


def normalize_flags(options: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace inverted public flags with their positive-sense counterparts.

    Args:
        options: Keyword options as supplied by the caller

    Returns:
        New dict with inverted flags mapped and negated

    Raises:
        InvalidConfiguration: If a flag is not a bool, or if both the public
            and internal name are given with contradicting values
    """
    normalized = dict(options)
    for public_name, internal_name in INVERTED_FLAGS.items():
        if internal_name in normalized:
            check_flag(normalized[internal_name], internal_name)
        if public_name not in normalized:
            continue
        value = not check_flag(normalized.pop(public_name), public_name)
        if internal_name in normalized and normalized[internal_name] != value:
            raise InvalidConfiguration(
                f"contradicts {internal_name}={normalized[internal_name]!r}",
                field=public_name,
            )
        normalized[internal_name] = value
    return normalized
