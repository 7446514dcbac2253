"""Web – enum display labels and select-list options."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable


@dataclasses.dataclass(frozen=True)
class SelectOption:
    text: str
    value: str
    selected: bool = False


def option_value(member: Enum) -> str:
    """Wire value of *member*: its value when that is a string, else its name."""
    return member.value if isinstance(member.value, str) else member.name


def display_name(member: Enum) -> str:
    """Friendly ``label`` of *member*, falling back to its wire value."""
    label = getattr(member, "label", None)
    return label if isinstance(label, str) and label else option_value(member)


def options_list(enum_type: type[Enum], selected: Iterable[str] | None = None) -> list[SelectOption]:
    """One :class:`SelectOption` per member, marking those whose value is in *selected*."""
    chosen = set(selected or ())
    return [
        SelectOption(
            text=display_name(member),
            value=option_value(member),
            selected=option_value(member) in chosen,
        )
        for member in enum_type
    ]


__all__ = ["SelectOption", "display_name", "option_value", "options_list"]
