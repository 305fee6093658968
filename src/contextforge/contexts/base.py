"""BaseContext: shared configuration, hook plumbing and policy gate.

Concrete contexts (BuildContext, CreateContext, ...) subclass BaseContext.
Configuration is declared on the class:

    class ContactContext(CRUDContext):
        model_class = Contact
        policy_class = ContactPolicy
        searcher_class = ContactSearcher
        adapter_class = SQLAdapter

Hooks are registered at class-definition time, either with ``@hook`` in the
class body or through the class-level registrars (``@ContactContext.setup``).
The hook registry is frozen the first time the class is instantiated.
"""

from __future__ import annotations

import functools
import logging
import types
from collections.abc import Callable
from typing import Any, ClassVar

from contextforge.adapters.base import BaseAdapter
from contextforge.config import get_settings
from contextforge.contexts.types import ActionContext
from contextforge.errors import ConfigurationError, MissingTargetError, UnauthorizedError
from contextforge.hooks.registry import HOOK_MARKER, HookRegistry
from contextforge.hooks.types import HookFn

logger = logging.getLogger(__name__)

# ActionContext attributes that may be passed as keyword options
CONTEXT_FIELDS = ("object", "id", "model_class", "scope", "searcher")


class hook_point:
    """Class-level registrar for one hook name.

    Accessed on a context class it returns a function that registers its
    argument, so it works both as ``Ctx.before_create(fn)`` and as a
    ``@Ctx.before_create`` decorator.
    """

    def __init__(self, name: str):
        self.hook_name = name

    def __get__(self, instance: Any, owner: type[BaseContext]) -> Callable[[HookFn], HookFn]:
        def register(fn: HookFn) -> HookFn:
            owner.register_hook(self.hook_name, fn)
            return fn

        register.__name__ = self.hook_name
        return register


class entrypoint:
    """Action method callable on an instance or on the class.

    Called on the class, it allocates an instance for the ``actor`` keyword
    and delegates to it:

        ContactContext.create(params={...}, actor=user)
        ContactContext(user).create(params={...})
    """

    def __init__(self, fn: Callable[..., Any]):
        self.fn = fn
        functools.update_wrapper(self, fn)

    def __get__(self, instance: Any, owner: type) -> Callable[..., Any]:
        if instance is not None:
            return types.MethodType(self.fn, instance)

        @functools.wraps(self.fn)
        def call_on_class(*args: Any, actor: Any = None, **kwargs: Any) -> Any:
            return self.fn(owner(actor), *args, **kwargs)

        return call_on_class


class BaseContext:
    """Base for all action contexts.

    Attributes:
        model_class: Default model class targets are built from or looked up in
        policy_class: Policy constructed as ``policy_class(actor, subject)``
        adapter_class: Adapter wrapping model classes and objects
        hooks: This class's hook registry
    """

    model_class: ClassVar[type | None] = None
    policy_class: ClassVar[type | None] = None
    adapter_class: ClassVar[type[BaseAdapter] | None] = None
    hooks: ClassVar[HookRegistry] = HookRegistry()

    setup = hook_point("setup")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parents = [
            base.hooks for base in cls.__bases__ if isinstance(getattr(base, "hooks", None), HookRegistry)
        ]
        if len(parents) == 1:
            cls.hooks = parents[0].copy()
        else:
            cls.hooks = HookRegistry.merged(parents)
        for attr in vars(cls).values():
            for name in getattr(attr, HOOK_MARKER, ()):
                cls.hooks.register(name, attr, bound=True)

    def __init__(self, actor: Any = None, *, adapter: type[BaseAdapter] | None = None):
        self.actor = actor
        self._adapter = adapter
        type(self).hooks.freeze()

    @classmethod
    def register_hook(cls, name: str, fn: HookFn) -> None:
        """Append ``fn`` to this class's ``name`` hooks."""
        cls.hooks.register(name, fn)

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    @property
    def adapter(self) -> type[BaseAdapter]:
        """Adapter class: constructor argument, class attribute, then settings."""
        return self._adapter or self.adapter_class or get_settings().adapter()

    def wrap(self, obj: Any) -> BaseAdapter:
        """Wrap ``obj`` in the adapter unless it is already wrapped."""
        if isinstance(obj, BaseAdapter):
            return obj
        return self.adapter(obj)

    def resolve_model_class(self, ctx: ActionContext) -> type:
        model_class = ctx.model_class or self.model_class
        if model_class is None:
            raise ConfigurationError(f"{type(self).__name__} has no model_class configured")
        return model_class

    def build_context(self, action: str, params: dict[str, Any] | None, **options: Any) -> ActionContext:
        """Allocate the ActionContext for one public call.

        Options naming ActionContext attributes fill those attributes; any
        other option lands in ``extras``.
        """
        known = {key: options.pop(key) for key in CONTEXT_FIELDS if key in options}
        return ActionContext(
            actor=self.actor,
            params=dict(params or {}),
            action=action,
            extras=options,
            **known,
        )

    def run_hooks(self, name: str, ctx: ActionContext) -> ActionContext:
        return type(self).hooks.run(name, ctx, owner=self)

    # ------------------------------------------------------------------
    # Policy gate
    # ------------------------------------------------------------------

    def authorize(self, subject: Any, action: str, ctx: ActionContext) -> Any:
        """Ask the policy whether the actor may perform ``action`` on ``subject``.

        The policy is built once per call as ``policy_class(actor, subject)``
        and its ``can_<action>()`` predicate is invoked exactly once.

        Raises:
            ConfigurationError: If no policy is configured or it lacks the predicate
            UnauthorizedError: If the predicate returns a falsy value
        """
        if self.policy_class is None:
            raise ConfigurationError(f"{type(self).__name__} has no policy_class configured")

        policy = self.policy_class(ctx.actor, subject)
        predicate = getattr(policy, f"can_{action}", None)
        if predicate is None:
            raise ConfigurationError(
                f"{self.policy_class.__name__} does not define can_{action}()"
            )

        if not predicate():
            logger.info("Policy %s denied '%s'", self.policy_class.__name__, action)
            raise UnauthorizedError(ctx.actor, action, subject)
        return subject

    # ------------------------------------------------------------------
    # Target resolution shared by update, destroy and show
    # ------------------------------------------------------------------

    def find_object(self, ctx: ActionContext) -> ActionContext:
        """Resolve ``ctx.object`` from an explicit object or by ``ctx.id``.

        With an id, the target is looked up with ``scope.find(id)``; the scope
        defaults to the model adapter's ``fetch_all()``.

        Raises:
            MissingTargetError: If neither ``object`` nor ``id`` was supplied
        """
        if ctx.object is not None:
            ctx.object = self.wrap(ctx.object)
            return ctx

        if ctx.id is None:
            raise MissingTargetError(f"{ctx.action} requires an id or an object")

        if ctx.scope is None:
            ctx.scope = self.wrap(self.resolve_model_class(ctx)).fetch_all()
        ctx.object = self.wrap(ctx.scope.find(ctx.id))
        return ctx
