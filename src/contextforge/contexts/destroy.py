"""DestroyContext: look an object up, authorize it and destroy it."""

from typing import Any

from contextforge.adapters.base import unwrap
from contextforge.contexts.base import entrypoint, hook_point
from contextforge.contexts.mutating import ChangeContext, MutatingAction
from contextforge.contexts.types import ActionContext

DESTROY = MutatingAction(name="destroy", resolve="setup_destroy_object", persist="destroy")


class DestroyContext(ChangeContext):
    """Destroy action.

    Usage:
        ContactDestroy(user).destroy(id=42)
        ContactDestroy.destroy(object=contact, actor=user)
    """

    setup_destroy = hook_point("setup_destroy")
    before_destroy = hook_point("before_destroy")
    after_destroy_success = hook_point("after_destroy_success")
    after_destroy_failure = hook_point("after_destroy_failure")
    after_destroy = hook_point("after_destroy")

    def setup_destroy_object(self, ctx: ActionContext) -> ActionContext:
        return self.find_object(ctx)

    @entrypoint
    def destroy(self, params: dict[str, Any] | None = None, **options: Any) -> Any:
        """Destroy the object given as ``object`` or found by ``id``.

        Raises:
            MissingTargetError: If neither ``id`` nor ``object`` is given
        """
        ctx = self.build_context("destroy", params, **options)
        ctx = self.run_action(DESTROY, ctx)
        return unwrap(ctx.object)
