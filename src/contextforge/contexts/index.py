"""IndexContext: resolve a scope and delegate to a Searcher."""

from typing import Any, ClassVar

from contextforge.contexts.base import BaseContext, entrypoint, hook_point
from contextforge.errors import ConfigurationError


class IndexContext(BaseContext):
    """Index action: setup -> setup_index -> scope -> authorize -> search.

    The searcher's return value is returned verbatim; no hook runs after it.

    Attributes:
        searcher_class: Default Searcher, constructed as ``searcher_class(scope=scope)``
    """

    searcher_class: ClassVar[type | None] = None

    setup_index = hook_point("setup_index")

    def policy_scope(self, scope: Any) -> Any:
        """Narrow ``scope`` through the policy's Scope class, if it has one."""
        scope_class = getattr(self.policy_class, "Scope", None)
        if scope_class is None:
            return scope
        return scope_class(scope, self.actor).resolve()

    @entrypoint
    def index(self, params: dict[str, Any] | None = None, **options: Any) -> Any:
        """Search the scope with ``params``.

        Options:
            scope: Search this collection instead of ``model_class``'s fetch_all()
            searcher: Searcher class overriding ``searcher_class``
        """
        ctx = self.build_context("index", params, **options)
        ctx = self.run_hooks("setup", ctx)
        ctx = self.run_hooks("setup_index", ctx)

        if ctx.scope is None:
            ctx.scope = self.wrap(self.resolve_model_class(ctx)).fetch_all()
        self.authorize(ctx.scope, "index", ctx)
        scope = self.policy_scope(ctx.scope)

        searcher_class = ctx.searcher or self.searcher_class
        if searcher_class is None:
            raise ConfigurationError(f"{type(self).__name__} has no searcher_class configured")
        return searcher_class(scope=scope).search(ctx.params)
