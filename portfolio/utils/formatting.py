"""Serialization helpers shared by the models."""


def isoformat(value):
    """Render a datetime for JSON, keeping None as None."""
    return value.isoformat() if value else None
