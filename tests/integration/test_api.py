"""Integration tests for API endpoints."""
import json

import pytest
from httpx import AsyncClient, ASGITransport

from prompt_factory.core.adapters.registry import build_default_registry
from prompt_factory.dependencies import get_llm_factory
from prompt_factory.main import create_app
from prompt_factory.utils.exceptions import LLMError

VALID_FORM = {
    "target_models": ["claude", "flux", "mistral"],
    "task_type": "redaction",
    "domain": "marketing",
    "task_description": "Write a tagline",
    "image": {"subject": "a watch on a desk"},
}


@pytest.fixture
def app():
    application = create_app()
    # Lifespan doesn't run in test, so the registry is set up by hand
    application.state.adapter_registry = build_default_registry()
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def use_llm(app, make_client, make_factory):
    """Install fake LLM clients; returns the factory for inspection."""
    def _install(*clients):
        factory = make_factory(list(clients))
        app.dependency_overrides[get_llm_factory] = lambda: factory
        return factory
    return _install


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_list_providers(client):
    response = await client.get("/api/v1/providers")
    assert response.status_code == 200
    assert len(response.json()["providers"]) == 7

    response = await client.get("/api/v1/providers", params={"category": "video"})
    assert [p["id"] for p in response.json()["providers"]] == ["veo"]


@pytest.mark.asyncio
async def test_list_providers_bad_category(client):
    response = await client.get("/api/v1/providers", params={"category": "audio"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_validate_form(client):
    response = await client.post("/api/v1/prompts/validate", json={"target_models": ["veo"]})
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert [issue["field"] for issue in data["issues"]] == ["task_type", "video.subject"]


@pytest.mark.asyncio
async def test_generate_prompts(client):
    response = await client.post("/api/v1/prompts", json={"form": VALID_FORM})
    assert response.status_code == 200
    data = response.json()

    assert data["generic"]["context"] == "Domaine : marketing"
    assert [p["provider"]["id"] for p in data["prompts"]] == ["claude", "flux", "mistral"]

    claude = data["prompts"][0]
    assert "<task>\nWrite a tagline\n</task>" in claude["adapted"]["user_prompt"]
    assert claude["preview"].startswith("# Prompt optimise pour Claude")
    assert claude["raw"].startswith("=== SYSTEM PROMPT ===")
    assert claude["estimated_tokens"] > 0
    assert claude["filename"] == "prompt-claude.md"

    mistral = data["prompts"][2]
    assert mistral["adapted"]["notes"] == [
        "Aucune optimisation specifique appliquee pour ce modele."
    ]


@pytest.mark.asyncio
async def test_generate_with_feedback_and_answers(client):
    response = await client.post(
        "/api/v1/prompts",
        json={
            "form": {**VALID_FORM, "target_models": ["claude"]},
            "feedback": "Moins de 8 mots",
            "questions": [{"id": "q1", "question": "Quel produit ?"}],
            "answers": {"q1": "Une montre"},
        },
    )
    assert response.status_code == 200
    user = response.json()["prompts"][0]["adapted"]["user_prompt"]
    assert "<constraints>\nMoins de 8 mots\n</constraints>" in user
    assert "<answer>Une montre</answer>" in user


@pytest.mark.asyncio
async def test_generate_invalid_form(client):
    response = await client.post("/api/v1/prompts", json={"form": {"target_models": []}})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "FormValidationError"
    assert {issue["field"] for issue in data["issues"]} == {"target_models", "task_type"}


@pytest.mark.asyncio
async def test_extract_merges_into_form(client, use_llm, make_client):
    factory = use_llm(make_client([json.dumps({"domain": "horlogerie", "tone": "elegant"})]))
    response = await client.post(
        "/api/v1/extract",
        json={
            "free_text": "Un slogan elegant pour une montre",
            "api_key": "sk-ant-request",
            "form": VALID_FORM,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["extracted"]["domain"] == "horlogerie"
    assert data["merged_form"]["domain"] == "marketing"
    assert data["merged_form"]["tone"] == "elegant"
    assert factory.builds == [("extract", "sk-ant-request", None)]


@pytest.mark.asyncio
async def test_extract_agent_mode(client, use_llm, make_client):
    use_llm(make_client([json.dumps({"working_on": "un blog", "trying_to_do": "publier"})]))
    response = await client.post(
        "/api/v1/extract",
        json={"free_text": "Aide pour mon blog", "mode": "agent", "platform": "claude"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["platform"] == "claude"
    assert data["agent"]["working_on"] == "un blog"
    assert data["extracted"] is None


@pytest.mark.asyncio
async def test_extract_requires_text(client, use_llm, make_client):
    use_llm(make_client())
    response = await client.post("/api/v1/extract", json={"free_text": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_questions(client, use_llm, make_client):
    use_llm(make_client([json.dumps([{"question": "Quel ton ?", "type": "textarea"}])]))
    response = await client.post("/api/v1/questions", json={"form": VALID_FORM})
    assert response.status_code == 200
    data = response.json()
    assert data["questions"] == [
        {"id": "q1", "question": "Quel ton ?", "placeholder": "", "type": "textarea", "options": None}
    ]


@pytest.mark.asyncio
async def test_refine_adapted_prompt(client, use_llm, make_client):
    use_llm(make_client(["Prompt plus court"]))
    adapted = {"provider_id": "claude", "system_prompt": "S", "user_prompt": "U"}
    response = await client.post("/api/v1/refine", json={"adapted": adapted})
    assert response.status_code == 200
    data = response.json()
    assert data["optimized_prompt"] == "Prompt plus court"
    assert data["adapted"]["user_prompt"] == "U"
    assert data["adapted"]["optimized"]["text"] == "Prompt plus court"
    assert "+Prompt plus court" in data["diff"]


@pytest.mark.asyncio
async def test_refine_requires_prompt(client, use_llm, make_client):
    use_llm(make_client())
    response = await client.post("/api/v1/refine", json={"raw_prompt": "  "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_refine_missing_credentials(app, client, monkeypatch):
    from prompt_factory import dependencies
    from prompt_factory.config import Settings

    monkeypatch.setattr(
        dependencies, "settings",
        Settings(_env_file=None, anthropic_api_key="", openai_api_key=""),
    )
    response = await client.post("/api/v1/refine", json={"raw_prompt": "Mon prompt"})
    assert response.status_code == 400
    assert response.json()["error"] == "MissingCredentialsError"


@pytest.mark.asyncio
async def test_refine_invalid_key(client):
    response = await client.post(
        "/api/v1/refine", json={"raw_prompt": "Mon prompt", "api_key": "bad-key"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidCredentialsError"


@pytest.mark.asyncio
async def test_upstream_rate_limit_passed_through(client, use_llm, make_client):
    use_llm(make_client(error=LLMError("anthropic", "too many", status_code=429)))
    response = await client.post("/api/v1/refine", json={"raw_prompt": "Mon prompt"})
    assert response.status_code == 429


@pytest.mark.asyncio
async def test_upstream_failure_is_bad_gateway(client, use_llm, make_client):
    use_llm(make_client(error=LLMError("anthropic", "overloaded", status_code=529)))
    response = await client.post("/api/v1/questions", json={"form": VALID_FORM})
    assert response.status_code == 502
    assert response.json()["error"] == "LLMError"
