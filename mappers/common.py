def fields_to_copy(info, fields, partial: bool):
    """Names of *fields* to copy from *info*; a partial update only copies what was sent."""
    if not partial:
        return list(fields)
    sent = getattr(info, "model_fields_set", None)
    if sent is None:
        return [name for name in fields if getattr(info, name, None) is not None]
    return [name for name in fields if name in sent]
