"""Hook registry for contextforge.

Each context class owns one HookRegistry. A subclass registry starts as a
snapshot of its bases' registries taken when the subclass is defined, so
inherited hooks always run before the subclass's own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from contextforge.errors import HookRegistryFrozenError
from contextforge.hooks.types import HookEntry, HookFn

if TYPE_CHECKING:
    from contextforge.contexts.types import ActionContext

logger = logging.getLogger(__name__)

# Attribute set by @hook on functions declared in a class body
HOOK_MARKER = "__contextforge_hooks__"


class HookRegistry:
    """Ordered hook lists keyed by hook name.

    Registration appends. Once frozen the registry is read-only and can be
    shared across threads without locking.

    Example:
        registry = HookRegistry()
        registry.register("before_create", stamp_owner)
        context = registry.run("before_create", context)
    """

    def __init__(self, entries: dict[str, Iterable[HookEntry]] | None = None):
        self._entries: dict[str, tuple[HookEntry, ...]] = {
            name: tuple(items) for name, items in (entries or {}).items()
        }
        self._frozen = False

    @classmethod
    def merged(cls, registries: Iterable[HookRegistry]) -> HookRegistry:
        """Combine registries in order.

        Used for subclasses with several context bases. Each entry a later
        registry shares with the earlier ones is consumed once, so a hook
        inherited through two paths runs once while repeats within a single
        registry are kept.
        """
        combined: dict[str, list[HookEntry]] = {}
        for registry in registries:
            for name, items in registry._entries.items():
                slot = combined.setdefault(name, [])
                inherited = list(slot)
                for entry in items:
                    if entry in inherited:
                        inherited.remove(entry)
                    else:
                        slot.append(entry)
        return cls(combined)

    def copy(self) -> HookRegistry:
        """Return an unfrozen snapshot of this registry."""
        return type(self)(self._entries)

    def register(self, name: str, fn: HookFn, *, bound: bool = False) -> None:
        """Append a hook callable to the named slot.

        Args:
            name: Hook name (e.g., "before_create")
            fn: Callable taking the ActionContext and returning it
            bound: Call ``fn`` with the context instance as first argument

        Raises:
            HookRegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise HookRegistryFrozenError(
                f"Cannot register hook '{name}': registry is frozen. "
                "Hooks must be registered before the context is first instantiated."
            )
        if not callable(fn):
            raise TypeError(f"Hook '{name}' must be callable, got {fn!r}")
        self._entries[name] = self._entries.get(name, ()) + (HookEntry(fn, bound),)

    def get(self, name: str) -> tuple[HookEntry, ...]:
        """Return the entries registered under ``name`` (empty if none)."""
        return self._entries.get(name, ())

    def run(self, name: str, context: ActionContext, owner: Any = None) -> ActionContext:
        """Thread ``context`` through every hook registered under ``name``.

        Each hook receives the previous hook's return value. A hook returning
        None leaves the context unchanged. Exceptions raised by a hook are not
        caught; hooks that already ran are not undone.

        Args:
            name: Hook name
            context: The action context
            owner: Context instance passed to class-body hooks

        Returns:
            The context returned by the last hook, or ``context`` if none ran
        """
        entries = self.get(name)
        if not entries:
            return context

        logger.debug("Running %d '%s' hook(s)", len(entries), name)
        for entry in entries:
            result = entry(owner, context)
            if result is not None:
                context = result
        return context

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def list_registered(self) -> list[str]:
        """List hook names that have at least one entry."""
        return sorted(name for name, items in self._entries.items() if items)

    def __contains__(self, name: str) -> bool:
        return bool(self._entries.get(name))

    def __len__(self) -> int:
        return sum(len(items) for items in self._entries.values())


def hook(*names: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator declaring a method in a context class body as a hook.

    The method is registered when the class is created and is called with the
    context instance and the ActionContext.

    Usage:
        class ContactCreate(CreateContext):
            @hook("before_create")
            def stamp_owner(self, ctx):
                ctx.object.owner_id = self.actor.id
                return ctx
    """
    if not names:
        raise ValueError("hook() requires at least one hook name")

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        declared = getattr(fn, HOOK_MARKER, ())
        setattr(fn, HOOK_MARKER, declared + names)
        return fn

    return decorator
