"""Shared test configuration and language-model stand-ins."""

import asyncio

import pytest

from models.schemas.requirement import Requirement, RequirementCategory


class FailingLLM:
    """Raises on every call, like an unreachable provider."""

    def __init__(self) -> None:
        self.calls = 0

    async def generate_json(self, prompt, *, temperature=0.3, max_output_tokens=1024):
        self.calls += 1
        raise RuntimeError("provider unavailable")


class StaticLLM:
    """Returns a canned payload and remembers the prompts it was sent."""

    def __init__(self, payload) -> None:
        self.payload = payload
        self.prompts: list[str] = []

    async def generate_json(self, prompt, *, temperature=0.3, max_output_tokens=1024):
        self.prompts.append(prompt)
        return self.payload


class SlowLLM:
    async def generate_json(self, prompt, *, temperature=0.3, max_output_tokens=1024):
        await asyncio.sleep(1)
        return ["too late"]


@pytest.fixture
def failing_llm():
    return FailingLLM()


@pytest.fixture
def slow_llm():
    return SlowLLM()


@pytest.fixture
def static_llm():
    return StaticLLM


def make_requirements(*terms: str) -> list[Requirement]:
    """Requirements with strictly descending weights, in the given order."""
    n = len(terms)
    return [
        Requirement(term=t, weight=n - i, category=RequirementCategory.GENERAL)
        for i, t in enumerate(terms)
    ]
