"""BaseAdapter: uniform wrapper over a concrete persistence object.

An adapter wraps exactly one object: either a model class (so it can
``instantiate`` and ``fetch_all``) or a model instance (so it can ``save``,
``destroy`` and ``assign_attributes``). Every other attribute access is
delegated to the wrapped object.

Concrete adapters must override all five operations. The base raises
NotImplementedError for each so a broken adapter fails loudly.
"""

from __future__ import annotations

from typing import Any


class BaseAdapter:
    """Delegating wrapper normalizing an ORM object to one capability set.

    The wrapped object's class is exposed as the ``wrapped_class`` tag.
    Policies and other consumers query the tag (or ``is_a``) instead of
    relying on the wrapper's own type.
    """

    __slots__ = ("_wrapped",)

    def __init__(self, wrapped: Any):
        if isinstance(wrapped, BaseAdapter):
            wrapped = wrapped.unwrap()
        object.__setattr__(self, "_wrapped", wrapped)

    def instantiate(self, **attributes: Any) -> BaseAdapter:
        raise NotImplementedError(f"{type(self).__name__}.instantiate not implemented in adapter")

    def fetch_all(self) -> Any:
        raise NotImplementedError(f"{type(self).__name__}.fetch_all not implemented in adapter")

    def save(self) -> bool:
        raise NotImplementedError(f"{type(self).__name__}.save not implemented in adapter")

    def destroy(self) -> bool:
        raise NotImplementedError(f"{type(self).__name__}.destroy not implemented in adapter")

    def assign_attributes(self, **attributes: Any) -> BaseAdapter:
        raise NotImplementedError(
            f"{type(self).__name__}.assign_attributes not implemented in adapter"
        )

    def unwrap(self) -> Any:
        """Return the wrapped domain object."""
        return self._wrapped

    @property
    def wrapped_class(self) -> type:
        """The concrete domain type behind the wrapper."""
        return type(self._wrapped)

    def is_a(self, check_class: type) -> bool:
        """True only for the exact wrapped class, never the adapter's own."""
        return self.wrapped_class is check_class

    def __getattr__(self, name: str) -> Any:
        # Only reached for names missing on the adapter itself
        if name == "_wrapped":
            raise AttributeError(name)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._wrapped, name, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseAdapter):
            other = other.unwrap()
        return self._wrapped == other

    def __hash__(self) -> int:
        return hash(self._wrapped)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrapped!r})"


def unwrap(obj: Any) -> Any:
    """Return the domain object behind an adapter, or ``obj`` itself."""
    if isinstance(obj, BaseAdapter):
        return obj.unwrap()
    return obj


def subject_class(obj: Any) -> type:
    """Return the domain type of ``obj``, reading the adapter tag when wrapped."""
    if isinstance(obj, BaseAdapter):
        return obj.wrapped_class
    return type(obj)
