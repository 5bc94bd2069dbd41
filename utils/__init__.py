"""Shared utilities for the backend."""
from utils.case import (
    KeyCase,
    KeyCaseCodec,
    dict_keys_to_snake,
    to_camel_key,
    to_snake_key,
)
from utils.ids import new_id
from utils.slug import slugify

__all__ = [
    "KeyCase",
    "KeyCaseCodec",
    "to_camel_key",
    "to_snake_key",
    "dict_keys_to_snake",
    "new_id",
    "slugify",
]
