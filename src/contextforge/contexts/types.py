"""ActionContext: the state threaded through one action invocation."""

from dataclasses import dataclass, field
from typing import Any

from contextforge.errors import ContextStateError


@dataclass
class ActionContext:
    """Mutable state for a single create/update/destroy/show/index call.

    A fresh ActionContext is built per public call and discarded afterward.

    Attributes:
        actor: The acting principal, opaque to the engine
        params: Input payload (attributes for build/create/update, search
            params for index)
        action: Name of the running action; fixed once set
        object: Target entity, wrapped in the context's adapter once resolved
        id: Identifier used to look the target up in ``scope``
        model_class: Overrides the context's default model class
        scope: Collection the target is looked up in (or searched, for index)
        searcher: Overrides the context's default searcher class
        extras: Free-form values set by callers and hooks
    """

    actor: Any = None
    params: dict[str, Any] = field(default_factory=dict)
    action: str | None = None
    object: Any = None
    id: Any = None
    model_class: type | None = None
    scope: Any = None
    searcher: type | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "action":
            current = getattr(self, "action", None)
            if current is not None and value != current:
                raise ContextStateError(
                    f"Cannot change action from '{current}' to '{value}' mid-pipeline"
                )
        super().__setattr__(name, value)

    def __getitem__(self, key: str) -> Any:
        return self.extras[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.extras[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.extras.get(key, default)
