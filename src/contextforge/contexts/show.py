"""ShowContext: look an object up and authorize reading it."""

from typing import Any

from contextforge.adapters.base import unwrap
from contextforge.contexts.base import BaseContext, entrypoint, hook_point


class ShowContext(BaseContext):
    setup_show = hook_point("setup_show")

    @entrypoint
    def show(self, params: dict[str, Any] | None = None, **options: Any) -> Any:
        ctx = self.build_context("show", params, **options)
        ctx = self.run_hooks("setup", ctx)
        ctx = self.run_hooks("setup_show", ctx)
        ctx = self.find_object(ctx)
        self.authorize(ctx.object, "show", ctx)
        return unwrap(ctx.object)
