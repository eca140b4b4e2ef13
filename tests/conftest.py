"""Pytest configuration for all tests."""

from __future__ import annotations

import shutil
from collections.abc import Callable

import pytest

from compose_manager import ComposeManager
from compose_manager.config import get_settings
from compose_manager.core.utils import logger
from compose_manager.types import CommandResult, ComposeInvocation


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "docker: marks tests that require docker-compose")


class FakeRunner:
    """Command runner that records invocations and replays canned results.

    Results are returned in order; the last one is repeated once exhausted.
    A callable can be given instead to compute the result from the invocation.
    """

    def __init__(
        self,
        results: list[CommandResult] | None = None,
        handler: Callable[[ComposeInvocation], CommandResult] | None = None,
    ) -> None:
        self.results = list(results or [CommandResult(output="", exit_code=0)])
        self.handler = handler
        self.invocations: list[ComposeInvocation] = []

    def execute(self, invocation: ComposeInvocation) -> CommandResult:
        self.invocations.append(invocation)
        if self.handler is not None:
            return self.handler(invocation)
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]

    @property
    def last(self) -> ComposeInvocation:
        return self.invocations[-1]

    @property
    def last_subcommand(self) -> str:
        """Subcommand text of the last invocation (everything after -f/--project-name pairs)."""
        args = list(self.last.args)
        while args and args[0] in ("-f", "--project-name"):
            args = args[2:]
        return " ".join(args)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to a previous test's captured stdout."""
    yield
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for FakeRunner instances."""

    def _make(output: str = "", exit_code: int = 0, **kwargs) -> FakeRunner:
        if "results" in kwargs or "handler" in kwargs:
            return FakeRunner(**kwargs)
        return FakeRunner([CommandResult(output=output, exit_code=exit_code)])

    return _make


@pytest.fixture
def runner(make_runner) -> FakeRunner:
    """Runner that succeeds with empty output."""
    return make_runner()


@pytest.fixture
def manager(runner: FakeRunner) -> ComposeManager:
    """ComposeManager wired to the default fake runner."""
    return ComposeManager(runner=runner)


@pytest.fixture(scope="session")
def docker_compose():
    """Check that docker-compose is available and return the CLI name."""
    if shutil.which("docker-compose") is None:
        pytest.skip("'docker-compose' is missing or not available in PATH.")
    return "docker-compose"
