def text_field(data: dict, key: str):
    """Reads an optional string field from a request payload."""
    value = data.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
