"""Action definitions and the ordered registry each widget offers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator


@dataclass(frozen=True)
class ActionDefinition:
    """A button in a widget: an icon and a prompt template.

    ``template`` takes the resolved form values as keyword arguments and
    returns the prompt text. It must accept placeholder tokens as well as
    real values.
    """

    id: str
    label: str
    icon: str
    template: Callable[..., str]

    def render(self, **values: str) -> str:
        return self.template(**values)


class ActionRegistry:
    """Fixed, ordered sequence of actions with unique ids."""

    def __init__(self, actions: Iterable[ActionDefinition]) -> None:
        self._actions: tuple[ActionDefinition, ...] = tuple(actions)
        self._by_id: dict[str, ActionDefinition] = {}
        for action in self._actions:
            if action.id in self._by_id:
                raise ValueError(f"Duplicate action id: {action.id}")
            self._by_id[action.id] = action

    def resolve(self, action_id: str) -> ActionDefinition | None:
        return self._by_id.get(action_id)

    def ids(self) -> list[str]:
        return [action.id for action in self._actions]

    def __iter__(self) -> Iterator[ActionDefinition]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)
