"""Shared test fixtures."""

from __future__ import annotations

import os

# Keep LiteLLM from fetching its model price map at import time
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from resume_studio.services.ai_service_manager import AIServiceManager
from resume_studio.services.rule_based_enhancer import RuleBasedEnhancer
from resume_studio.utils.dependencies import get_ai_service_manager


def _only(*names: str) -> AsyncMock:
    """Probe that reports just `names` as reachable."""
    return AsyncMock(side_effect=lambda backend: backend in names)


@pytest.fixture
def rule_based() -> RuleBasedEnhancer:
    return RuleBasedEnhancer()


@pytest.fixture
def completion() -> AsyncMock:
    return AsyncMock(return_value="Resolved 40+ customer orders daily, achieving 98% accuracy")


@pytest.fixture
def offline_manager() -> AIServiceManager:
    """No backend configured; every backend call raises BackendUnavailable."""
    return AIServiceManager(
        priority="deepseek,ollama,huggingface",
        completion=AsyncMock(),
        probe=AsyncMock(return_value=False),
    )


@pytest.fixture
def online_manager(completion) -> AIServiceManager:
    """Only DeepSeek is reachable; its replies come from the `completion` mock."""
    return AIServiceManager(
        priority="deepseek,ollama,huggingface",
        completion=completion,
        probe=_only("deepseek"),
    )


@pytest.fixture
def make_manager():
    """Build a manager over an arbitrary completion mock and set of reachable backends."""

    def _make(completion: AsyncMock, *available: str, priority: str = "deepseek,ollama,huggingface"):
        return AIServiceManager(priority=priority, completion=completion, probe=_only(*available))

    return _make


@pytest.fixture
def sample_resume_data() -> dict:
    return {
        "personal": {"fullName": "Jane Doe", "email": "jane@example.com", "phone": "555-0100"},
        "skills": ["Python", "SQL", {"name": "Tableau"}, "Excel", "Statistics", "Forecasting"],
        "experience": [
            {
                "title": "Data Analyst",
                "company": "Globex",
                "description": "I analyzed sales data weekly.",
                "achievements": ["Cut reporting time by 40%", "Built the regional sales dashboard"],
            },
            {"title": "Intern", "company": "Initech"},
        ],
    }


@pytest.fixture
def client_for():
    """TestClient factory with the shared AI service manager swapped out."""
    from resume_studio.main import app

    def _client(manager: AIServiceManager) -> TestClient:
        async def _override() -> AIServiceManager:
            await manager.initialize()
            return manager

        app.dependency_overrides[get_ai_service_manager] = _override
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client(client_for, offline_manager) -> TestClient:
    return client_for(offline_manager)


@pytest.fixture
def online_client(client_for, online_manager) -> TestClient:
    return client_for(online_manager)
