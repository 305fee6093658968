"""CreateContext: build an object, authorize it and save it."""

from typing import Any

from contextforge.adapters.base import unwrap
from contextforge.contexts.base import entrypoint, hook_point
from contextforge.contexts.build import BuildContext
from contextforge.contexts.mutating import ChangeContext, MutatingAction
from contextforge.contexts.types import ActionContext

CREATE = MutatingAction(name="create", resolve="setup_create_object", persist="save")


class CreateContext(BuildContext, ChangeContext):
    """Create action.

    Usage:
        class ContactCreate(CreateContext):
            model_class = Contact
            policy_class = ContactPolicy
            adapter_class = SQLAdapter

        contact = ContactCreate(user).create(params={"name": "Ada"})
    """

    setup_create = hook_point("setup_create")
    before_create = hook_point("before_create")
    after_create_success = hook_point("after_create_success")
    after_create_failure = hook_point("after_create_failure")
    after_create = hook_point("after_create")

    def setup_create_object(self, ctx: ActionContext) -> ActionContext:
        return self.setup_build_object(ctx)

    @entrypoint
    def create(self, params: dict[str, Any] | None = None, **options: Any) -> Any:
        """Create an object from ``params``.

        Options:
            object: Use this object instead of instantiating one
            model_class: Instantiate this class instead of the context's model_class
            Anything else is stored in ``ctx.extras`` for hooks.

        Returns:
            The created domain object, whether or not ``save()`` succeeded
        """
        ctx = self.build_context("create", params, **options)
        ctx = self.run_action(CREATE, ctx)
        return unwrap(ctx.object)
