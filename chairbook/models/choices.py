from enum import Enum
from typing import TypeVar

ChoiceT = TypeVar('ChoiceT', bound=Enum)


def normalize_choice(value, choices: type[ChoiceT], aliases: dict[str, ChoiceT]):
    """Map a wire value (canonical name or backend alias) onto ``choices``.

    Values that match nothing are returned unchanged so pydantic reports them.
    """
    if isinstance(value, choices) or not isinstance(value, str):
        return value

    normalized = value.strip().lower()
    if normalized in aliases:
        return aliases[normalized]

    normalized = normalized.replace('-', '_')
    for choice in choices:
        if choice.value == normalized:
            return choice

    return value
