from enum import Enum


def to_text(value) -> str:
    """
    Coerce an untrusted field or payload value to a string. Never raises.

    - None → ""
    - Enum members → their value (str() of a str-Enum member is 'Class.MEMBER')
    - booleans → "true" / "false"
    - integral floats → no trailing ".0" (42.0 → "42")
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
        if value is None:
            return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return str(value)
    except Exception:
        return ""
