"""Shared fakes for the contextforge test suite."""

from dataclasses import dataclass, replace
from unittest.mock import MagicMock

import pytest

from contextforge.adapters import BaseAdapter
from contextforge.config import reset_settings
from contextforge.policy import Policy


# =============================================================================
# Fake domain model and adapters
# =============================================================================


@dataclass
class Person:
    first_name: str | None = None
    last_name: str | None = None

    @classmethod
    def all(cls):
        raise AssertionError("Person.all must be patched by the relation fixture")


class FakeSuccessAdapter(BaseAdapter):
    def instantiate(self, **attributes):
        return type(self)(self.unwrap()(**attributes))

    def fetch_all(self):
        return self.unwrap().all()

    def save(self):
        return True

    def destroy(self):
        return True

    def assign_attributes(self, **attributes):
        return type(self)(replace(self.unwrap(), **attributes))


class FakeFailureAdapter(FakeSuccessAdapter):
    def save(self):
        return False

    def destroy(self):
        return False


class FakeErrorAdapter(FakeSuccessAdapter):
    def save(self):
        raise RuntimeError("save exploded")

    def destroy(self):
        raise RuntimeError("destroy exploded")


def make_policy(response: bool = True) -> type[Policy]:
    """Build a Policy subclass answering ``response`` and recording its use."""

    class FakePolicy(Policy):
        built: list = []
        checks: list = []

        def __init__(self, actor, subject):
            super().__init__(actor, subject)
            type(self).built.append((actor, subject))

        def _answer(self, action):
            type(self).checks.append(action)
            return response

        def can_index(self):
            return self._answer("index")

        def can_show(self):
            return self._answer("show")

        def can_create(self):
            return self._answer("create")

        def can_update(self):
            return self._answer("update")

        def can_destroy(self):
            return self._answer("destroy")

    FakePolicy.built = []
    FakePolicy.checks = []
    return FakePolicy


def make_context_class(base, policy, adapter=FakeSuccessAdapter, **attrs):
    """Subclass ``base`` with test configuration."""
    namespace = {
        "model_class": Person,
        "policy_class": policy,
        "adapter_class": adapter,
        **attrs,
    }
    return type(f"Test{base.__name__}", (base,), namespace)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings():
    """Reset cached settings before and after each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def user():
    return MagicMock(name="user")


@pytest.fixture
def person():
    return Person(first_name="Test", last_name="Person")


@pytest.fixture
def relation(monkeypatch, person):
    """Collection returned by Person.all(); find() returns ``person``."""
    relation = MagicMock(name="relation")
    relation.find.return_value = person
    monkeypatch.setattr(Person, "all", MagicMock(return_value=relation))
    return relation


@pytest.fixture
def policy():
    return make_policy(True)


@pytest.fixture
def denying_policy():
    return make_policy(False)


@pytest.fixture
def canary():
    return MagicMock(name="canary")


def pinged(canary) -> list[str]:
    """Names the canary was pinged with, in order."""
    return [c.args[0] for c in canary.ping.call_args_list]


def ping_hook(name: str):
    """Hook pinging ``ctx["canary"]`` with its own name."""

    def fn(ctx):
        ctx["canary"].ping(name)
        return ctx

    fn.__qualname__ = f"ping_{name}"
    return fn
