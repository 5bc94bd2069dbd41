from ulid import ULID


def new_id() -> str:
    """26-character, lexicographically time-sortable identifier."""
    return str(ULID())
