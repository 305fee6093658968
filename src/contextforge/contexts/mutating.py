"""Shared lifecycle for actions that persist a change.

Create, update and destroy all run the same skeleton:

    setup -> setup_<action> -> setup_change -> resolve target -> authorize
    -> before_change -> before_<action> -> persist
    -> after_<action>_success + after_change_success   (persist returned true)
     | after_<action>_failure + after_change_failure   (persist returned false)
    -> after_<action> -> after_change

A MutatingAction describes one action; ChangeContext.run_action executes it.
An exception raised anywhere aborts the remaining phases.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from contextforge.contexts.base import BaseContext, hook_point
from contextforge.contexts.types import ActionContext
from contextforge.errors import ContextStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutatingAction:
    """Descriptor of one state-changing action.

    Attributes:
        name: Action name; also selects the policy predicate ``can_<name>``
        resolve: Name of the context method that sets ``ctx.object``
        persist: Name of the adapter method performing the change; returns a bool
    """

    name: str
    resolve: str
    persist: str

    @property
    def setup_hooks(self) -> tuple[str, ...]:
        return ("setup", f"setup_{self.name}", "setup_change")

    @property
    def before_hooks(self) -> tuple[str, ...]:
        return ("before_change", f"before_{self.name}")

    @property
    def success_hooks(self) -> tuple[str, ...]:
        return (f"after_{self.name}_success", "after_change_success")

    @property
    def failure_hooks(self) -> tuple[str, ...]:
        return (f"after_{self.name}_failure", "after_change_failure")

    @property
    def always_hooks(self) -> tuple[str, ...]:
        return (f"after_{self.name}", "after_change")


class ChangeContext(BaseContext):
    """Base for contexts whose actions persist a change."""

    setup_change = hook_point("setup_change")
    before_change = hook_point("before_change")
    after_change_success = hook_point("after_change_success")
    after_change_failure = hook_point("after_change_failure")
    after_change = hook_point("after_change")

    def run_action(self, action: MutatingAction, ctx: ActionContext) -> ActionContext:
        """Run the full lifecycle of ``action`` over ``ctx``.

        Returns:
            The context after the last ``after_*`` hook

        Raises:
            UnauthorizedError: If the policy refuses; no before/after hook runs
            ContextStateError: If resolution left ``ctx.object`` empty
        """
        ctx.action = action.name
        for name in action.setup_hooks:
            ctx = self.run_hooks(name, ctx)

        logger.debug("%s: resolving target for '%s'", type(self).__name__, action.name)
        ctx = getattr(self, action.resolve)(ctx)
        self.authorize(ctx.object, action.name, ctx)

        for name in action.before_hooks:
            ctx = self.run_hooks(name, ctx)

        if ctx.object is None:
            raise ContextStateError(f"'{action.name}' has no object to persist")

        persisted = bool(getattr(ctx.object, action.persist)())
        if persisted:
            branch = action.success_hooks
        else:
            logger.warning(
                "%s: %s() returned false for '%s'",
                type(self).__name__,
                action.persist,
                action.name,
            )
            branch = action.failure_hooks

        for name in branch + action.always_hooks:
            ctx = self.run_hooks(name, ctx)
        return ctx
