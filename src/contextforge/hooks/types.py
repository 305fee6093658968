"""Hook system types for contextforge.

Defines the data structures of the hook pipeline:
- HookFn: signature of a hook callable
- HookEntry: one registered callable in a named hook slot
- HOOK_POINTS: the named phases the built-in contexts run, in pipeline order
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from contextforge.contexts.types import ActionContext

# Hook function signature: (ActionContext) -> ActionContext | None
HookFn = Callable[["ActionContext"], "ActionContext | None"]

# Order in which phases appear across the built-in actions
HOOK_POINTS = (
    "setup",
    "setup_build",
    "setup_create",
    "setup_update",
    "setup_destroy",
    "setup_change",
    "setup_show",
    "setup_index",
    "before_change",
    "before_create",
    "before_update",
    "before_destroy",
    "after_create_success",
    "after_update_success",
    "after_destroy_success",
    "after_change_success",
    "after_create_failure",
    "after_update_failure",
    "after_destroy_failure",
    "after_change_failure",
    "after_create",
    "after_update",
    "after_destroy",
    "after_change",
)


@dataclass(frozen=True)
class HookEntry:
    """A callable registered under a hook name.

    Attributes:
        fn: The hook callable
        bound: True for hooks declared in a context class body; these are
            called with the context instance as first argument
    """

    fn: Callable[..., Any]
    bound: bool = False

    @property
    def name(self) -> str:
        return getattr(self.fn, "__qualname__", repr(self.fn))

    def __call__(self, owner: Any, context: ActionContext) -> ActionContext | None:
        if self.bound:
            return self.fn(owner, context)
        return self.fn(context)
