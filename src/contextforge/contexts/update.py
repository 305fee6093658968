"""UpdateContext: look an object up, assign params, authorize and save."""

from typing import Any

from contextforge.adapters.base import unwrap
from contextforge.contexts.base import entrypoint, hook_point
from contextforge.contexts.mutating import ChangeContext, MutatingAction
from contextforge.contexts.types import ActionContext

UPDATE = MutatingAction(name="update", resolve="setup_update_object", persist="save")


class UpdateContext(ChangeContext):
    """Update action; the target is found by ``id`` or given as ``object``."""

    setup_update = hook_point("setup_update")
    before_update = hook_point("before_update")
    after_update_success = hook_point("after_update_success")
    after_update_failure = hook_point("after_update_failure")
    after_update = hook_point("after_update")

    def setup_update_object(self, ctx: ActionContext) -> ActionContext:
        ctx = self.find_object(ctx)
        ctx.object = self.wrap(ctx.object.assign_attributes(**ctx.params))
        return ctx

    @entrypoint
    def update(self, params: dict[str, Any] | None = None, **options: Any) -> Any:
        ctx = self.build_context("update", params, **options)
        ctx = self.run_action(UPDATE, ctx)
        return unwrap(ctx.object)
