"""Searcher base class: turns a scope and params into a result set.

A searcher runs its ``setup`` steps and then its ``filter`` steps over the
scope. Each step is ``fn(scope, params) -> scope`` and may be guarded by
``when``/``unless`` predicates on the params.

Usage:
    class ContactSearcher(Searcher):
        boolean_params = ("active",)

    @ContactSearcher.filter(when=lambda params: "name" in params)
    def by_name(scope, params):
        return scope.where(name=params["name"])

    results = ContactSearcher(scope=Contact.all()).search({"name": "Ada"})
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

logger = logging.getLogger(__name__)

StepFn = Callable[[Any, dict[str, Any]], Any]
ParamsPredicate = Callable[[dict[str, Any]], bool]

TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n", "off", ""})


@dataclass(frozen=True)
class SearchStep:
    """A setup or filter step with its optional guards."""

    fn: StepFn
    when: ParamsPredicate | None = None
    unless: ParamsPredicate | None = None

    def applies(self, params: dict[str, Any]) -> bool:
        if self.when is not None and not self.when(params):
            return False
        if self.unless is not None and self.unless(params):
            return False
        return True


def to_boolean(value: Any) -> Any:
    """Convert "true"/"false" style strings to bool; other values pass through."""
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return value


class Searcher:
    """Base searcher.

    Attributes:
        boolean_params: Param names converted with to_boolean before searching
        setup_steps: Steps run before filters (inherited by subclasses)
        filter_steps: Filtering steps (inherited by subclasses)
    """

    boolean_params: ClassVar[tuple[str, ...]] = ()
    setup_steps: ClassVar[tuple[SearchStep, ...]] = ()
    filter_steps: ClassVar[tuple[SearchStep, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Snapshot of the parent's steps; later parent registrations stay there
        cls.setup_steps = tuple(cls.setup_steps)
        cls.filter_steps = tuple(cls.filter_steps)

    def __init__(self, scope: Any = None):
        self.scope = scope

    @classmethod
    def setup(
        cls,
        fn: StepFn | None = None,
        *,
        when: ParamsPredicate | None = None,
        unless: ParamsPredicate | None = None,
    ) -> Any:
        """Register a setup step; usable as ``@S.setup`` or ``@S.setup(when=...)``."""

        def register(step_fn: StepFn) -> StepFn:
            cls.setup_steps = cls.setup_steps + (SearchStep(step_fn, when, unless),)
            return step_fn

        return register(fn) if fn is not None else register

    @classmethod
    def filter(
        cls,
        fn: StepFn | None = None,
        *,
        when: ParamsPredicate | None = None,
        unless: ParamsPredicate | None = None,
    ) -> Any:
        """Register a filter step; usable as ``@S.filter`` or ``@S.filter(when=...)``."""

        def register(step_fn: StepFn) -> StepFn:
            cls.filter_steps = cls.filter_steps + (SearchStep(step_fn, when, unless),)
            return step_fn

        return register(fn) if fn is not None else register

    def default_scope(self) -> Any:
        """Scope searched when none was given to the constructor."""
        raise NotImplementedError(f"{type(self).__name__} needs a scope or a default_scope()")

    def normalize_params(self, params: dict[str, Any]) -> dict[str, Any]:
        normalized = dict(params)
        for name in self.boolean_params:
            if name in normalized:
                normalized[name] = to_boolean(normalized[name])
        return normalized

    def search(self, params: dict[str, Any] | None = None) -> Any:
        """Apply setup and filter steps to the scope.

        Returns:
            The scope returned by the last applicable step
        """
        params = self.normalize_params(params or {})
        scope = self.scope if self.scope is not None else self.default_scope()

        for step in self.setup_steps + self.filter_steps:
            if step.applies(params):
                scope = step.fn(scope, params)

        logger.debug("%s searched with %d param(s)", type(self).__name__, len(params))
        return scope
