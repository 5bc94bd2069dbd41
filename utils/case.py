"""
Key case conversion for the JSON boundary (camelCase on the wire, snake_case inside).
Uses Pydantic's alias_generators so the word-splitting rule matches schema aliases.
"""
from enum import Enum
from typing import Any

from pydantic.alias_generators import to_camel, to_snake


class KeyCase(str, Enum):
    SNAKE = "snake"
    CAMEL = "camel"


def to_snake_key(s: str) -> str:
    """Convert a single key (camelCase, PascalCase, kebab-case or snake_case) to snake_case."""
    return to_snake(s)


def to_camel_key(s: str) -> str:
    """Convert a single key to lowerCamelCase. Keys are split as snake_case first."""
    return to_camel(to_snake(s))


class KeyCaseCodec:
    """
    Recursively rewrites mapping keys into one casing convention.

    Mappings are rebuilt with converted keys and converted values, sequences are
    converted element-wise, every other value is returned unchanged. When two
    source keys land on the same target key the later one wins.
    """

    def key(self, key: Any, convention: KeyCase) -> Any:
        if not isinstance(key, str):
            return key
        if convention is KeyCase.CAMEL:
            return to_camel_key(key)
        return to_snake_key(key)

    def convert(self, value: Any, convention: KeyCase) -> Any:
        if isinstance(value, dict):
            return {self.key(k, convention): self.convert(v, convention) for k, v in value.items()}
        if isinstance(value, list):
            return [self.convert(x, convention) for x in value]
        return value


_codec = KeyCaseCodec()


def dict_keys_to_snake(obj: Any) -> Any:
    """Recursively convert dict keys from camelCase to snake_case for API input normalization."""
    return _codec.convert(obj, KeyCase.SNAKE)
