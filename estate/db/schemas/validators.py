"""Field constraints shared by several schema modules."""

DIGITS = r"^[0-9]+$"


def lower_email(value: str | None) -> str | None:
    """Proxy identity lookups compare addresses lower-cased."""
    if value is None:
        return value
    return value.lower()
