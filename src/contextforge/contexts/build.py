"""BuildContext: instantiate a model object without persisting it."""

from typing import Any

from contextforge.adapters.base import unwrap
from contextforge.contexts.base import BaseContext, entrypoint, hook_point
from contextforge.contexts.types import ActionContext


class BuildContext(BaseContext):
    """Builds an unsaved object: setup -> setup_build -> instantiate + assign."""

    setup_build = hook_point("setup_build")

    def setup_build_object(self, ctx: ActionContext) -> ActionContext:
        """Resolve ``ctx.object`` and assign ``ctx.params`` to it.

        An explicit ``object`` is used as is. Otherwise the object is
        instantiated from ``ctx.model_class`` or the context's model_class.
        """
        if ctx.object is not None:
            obj = self.wrap(ctx.object)
        else:
            obj = self.wrap(self.resolve_model_class(ctx)).instantiate()

        ctx.object = self.wrap(obj.assign_attributes(**ctx.params))
        return ctx

    @entrypoint
    def build(self, params: dict[str, Any] | None = None, **options: Any) -> Any:
        ctx = self.build_context("build", params, **options)
        ctx = self.run_hooks("setup", ctx)
        ctx = self.run_hooks("setup_build", ctx)
        ctx = self.setup_build_object(ctx)
        return unwrap(ctx.object)
