"""Shared pytest fixtures for the passive-check test suite."""

import socket

import pytest


class FakeResolver:
    """Resolver returning fixed names, recording each call."""

    def __init__(self, short="web01", canonical="web01.example.com"):
        self.short = short
        self.canonical = canonical
        self.calls: list[bool] = []

    def resolve(self, canonical: bool) -> str:
        self.calls.append(canonical)
        return self.canonical if canonical else self.short


class FailingResolver:
    """Resolver that behaves like a machine with no resolvable hostname."""

    def __init__(self):
        self.calls = 0

    def resolve(self, canonical: bool) -> str:
        self.calls += 1
        raise socket.gaierror(-2, "Name or service not known")


@pytest.fixture()
def resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture()
def failing_resolver() -> FailingResolver:
    return FailingResolver()
