"""HTTP-level tests; the shared AI service manager is swapped for a mocked one."""

from unittest.mock import AsyncMock

import pytest

from resume_studio.utils.errors import BackendAuthFailure, BackendQuotaExceeded, GenericEnhancementFailure


class TestHealth:
    def test_health_offline(self, offline_client):
        response = offline_client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["services"] == {"ruleBasedEnhancement": True, "aiEnhancement": False}

    def test_health_online(self, online_client):
        assert online_client.get("/api/health").json()["services"]["aiEnhancement"] is True


class TestKeywordEnhance:
    """POST /api/enhance"""

    def test_blank_text(self, offline_client):
        response = offline_client.post("/api/enhance", json={"text": "  "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Text is required"

    def test_search(self, offline_client):
        body = offline_client.post(
            "/api/enhance", json={"text": "customer service", "industry": "customer-service", "type": "search"}
        ).json()
        assert body["type"] == "search"
        assert body["query"] == "customer service"
        assert body["results"]

    def test_quantify(self, offline_client):
        body = offline_client.post(
            "/api/enhance", json={"text": "Led a team", "industry": "sales", "type": "quantify"}
        ).json()
        assert body["type"] == "quantification"
        assert "size" in body["suggestions"]

    def test_enhancement(self, offline_client):
        body = offline_client.post(
            "/api/enhance", json={"text": "Fixed leaking pipes", "industry": "plumbing", "level": "entry"}
        ).json()
        assert body["type"] == "enhancement"
        assert body["enhanced"].startswith("Diagnosed and repaired leaking pipes")
        assert body["detectedIndustry"] == "plumbing"
        assert "actionVerbs" in body["suggestions"]
        assert 0 <= body["confidence"] <= 0.95

    def test_unknown_type_is_rejected(self, offline_client):
        response = offline_client.post("/api/enhance", json={"text": "Led a team", "type": "translate"})
        assert response.status_code == 422


class TestEngineEndpoint:
    """POST /api/enhance/engine"""

    def test_offline_result_shape(self, offline_client):
        response = offline_client.post(
            "/api/enhance/engine",
            json={"originalText": "I helped customers with their orders daily", "industry": "retail"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["enhancedText"] == "I assisted customers with their orders daily"
        assert body["originalText"] == "I helped customers with their orders daily"
        suggestions = body["improvements"]["quantificationSuggestions"]
        assert [s["category"] for s in suggestions] == ["volume", "frequency"]
        assert body["improvements"]["confidence"] <= 0.95

    def test_text_alias(self, online_client):
        body = online_client.post("/api/enhance/engine", json={"text": "Helped customers"}).json()
        assert body["enhancedText"] == "Resolved 40+ customer orders daily, achieving 98% accuracy"

    def test_blank_text(self, offline_client):
        response = offline_client.post("/api/enhance/engine", json={"originalText": ""})
        assert response.status_code == 400


class TestAIEnhance:
    """POST /api/ai/enhance and friends"""

    def test_backend_success(self, online_client):
        body = online_client.post(
            "/api/ai/enhance", json={"text": "Helped customers", "context": {"jobTitle": "Cashier"}}
        ).json()
        assert body["enhanced"] == "Resolved 40+ customer orders daily, achieving 98% accuracy"
        assert body["fallback"] is False
        assert body["context"] == {"jobTitle": "Cashier"}

    def test_unavailable_falls_back_to_rule_based(self, offline_client):
        body = offline_client.post("/api/ai/enhance", json={"text": "Handled customer complaints"}).json()
        assert body["fallback"] is True
        assert body["enhanced"] == "Managed customer complaints, maintaining 95% satisfaction rate"

    @pytest.mark.parametrize(
        ("error", "status"),
        [(BackendQuotaExceeded, 402), (BackendAuthFailure, 401), (GenericEnhancementFailure, 500)],
    )
    def test_backend_errors_map_to_status(self, client_for, make_manager, error, status):
        client = client_for(make_manager(AsyncMock(side_effect=error(backend="deepseek")), "deepseek"))
        response = client.post("/api/ai/enhance", json={"text": "Helped customers"})
        assert response.status_code == status
        assert response.json()["detail"] == error.message

    def test_blank_text(self, offline_client):
        response = offline_client.post("/api/ai/enhance", json={"text": ""})
        assert response.status_code == 400
        assert response.json()["detail"] == "Text is required for enhancement"

    def test_unknown_context_key_is_rejected(self, offline_client):
        response = offline_client.post("/api/ai/enhance", json={"text": "Helped", "context": {"mood": "happy"}})
        assert response.status_code == 422

    def test_quantify(self, client_for, make_manager):
        completion = AsyncMock(return_value="Cut response time by 30% across 200+ daily tickets")
        client = client_for(make_manager(completion, "deepseek"))
        body = client.post(
            "/api/ai/enhance-quantify", json={"text": "Answered tickets", "context": {"industry": "Customer Support"}}
        ).json()
        assert body["industry"] == "customer_service"
        assert body["quantification"]["percentages"] == ["30%"]
        assert body["quantification"]["hasQuantification"] is True

    def test_quantify_offline(self, offline_client):
        response = offline_client.post("/api/ai/enhance-quantify", json={"text": "Answered tickets"})
        assert response.status_code == 503

    def test_fallback_endpoint(self, online_client, completion):
        body = online_client.post("/api/ai/enhance-fallback", json={"text": "Handled customer complaints"}).json()
        assert body["fallback"] is True
        assert body["enhanced"] == "Managed customer complaints, maintaining 95% satisfaction rate"
        completion.assert_not_awaited()


class TestRuleBasedEndpoint:
    """POST /api/ai/enhance-rule-based"""

    def test_bulk(self, offline_client):
        body = offline_client.post(
            "/api/ai/enhance-rule-based",
            json={"type": "bulk", "texts": ["Handled customer complaints", ""]},
        ).json()
        assert body["method"] == "rule-based"
        assert body["enhanced"] == ["Managed customer complaints, maintaining 95% satisfaction rate", ""]

    def test_skills(self, offline_client):
        body = offline_client.post(
            "/api/ai/enhance-rule-based",
            json={"type": "skills", "context": {"jobTitle": "Software Engineer"}},
        ).json()
        assert body["type"] == "skills"
        assert "Leadership" in body["suggestions"]

    def test_summary_defaults_to_three_years(self, offline_client):
        body = offline_client.post(
            "/api/ai/enhance-rule-based",
            json={"type": "summary", "context": {"jobTitle": "Data Analyst", "keySkills": ["SQL"]}},
        ).json()
        assert body["suggestions"].startswith("Results-driven Data Analyst with 3 years of experience.")

    def test_single_text_requires_text(self, offline_client):
        assert offline_client.post("/api/ai/enhance-rule-based", json={}).status_code == 400


class TestUnifiedEnhance:
    """POST/GET /api/ai/enhance-free"""

    def test_offline_single_text(self, offline_client):
        body = offline_client.post("/api/ai/enhance-free", json={"text": "Handled customer complaints"}).json()
        assert body["service"] == "rule-based"
        assert body["availableServices"] == ["rule-based"]
        assert body["enhanced"] == "Managed customer complaints, maintaining 95% satisfaction rate"

    def test_online_single_text(self, online_client):
        body = online_client.post("/api/ai/enhance-free", json={"text": "Helped customers"}).json()
        assert body["service"] == "deepseek"
        assert body["availableServices"] == ["deepseek", "rule-based"]

    def test_backend_failure_falls_back(self, client_for, make_manager):
        client = client_for(make_manager(AsyncMock(side_effect=BackendQuotaExceeded()), "deepseek"))
        body = client.post("/api/ai/enhance-free", json={"text": "Handled customer complaints"}).json()
        assert body["service"] == "rule-based"
        assert body["enhanced"] == "Managed customer complaints, maintaining 95% satisfaction rate"

    def test_bulk_replaces_failed_items(self, client_for, make_manager):
        completion = AsyncMock(side_effect=[BackendQuotaExceeded(), "Second enhanced"])
        client = client_for(make_manager(completion, "deepseek"))
        body = client.post(
            "/api/ai/enhance-free",
            json={"type": "bulk", "texts": ["Handled customer complaints", "Second item"]},
        ).json()
        assert body["enhanced"] == [
            "Managed customer complaints, maintaining 95% satisfaction rate",
            "Second enhanced",
        ]

    def test_offline_skills(self, offline_client):
        body = offline_client.post(
            "/api/ai/enhance-free", json={"type": "skills", "context": {"jobTitle": "Nurse"}}
        ).json()
        assert body["service"] == "rule-based"
        assert body["suggestions"]

    def test_status(self, offline_client):
        body = offline_client.get("/api/ai/enhance-free").json()
        assert body["serviceStatus"]["rule-based"] is True
        assert body["availableServices"] == ["rule-based"]


class TestSuggest:
    """POST /api/ai/suggest"""

    def test_skills(self, client_for, make_manager):
        client = client_for(make_manager(AsyncMock(return_value="Python, SQL, Tableau"), "deepseek"))
        body = client.post("/api/ai/suggest", json={"type": "skills", "context": {"jobTitle": "Analyst"}}).json()
        assert body["suggestions"] == ["Python", "SQL", "Tableau"]
        assert body["context"] == {"jobTitle": "Analyst", "keySkills": []}

    def test_invalid_type(self, offline_client):
        assert offline_client.post("/api/ai/suggest", json={"type": "poems"}).status_code == 422

    def test_offline(self, offline_client):
        response = offline_client.post("/api/ai/suggest", json={"type": "achievements"})
        assert response.status_code == 503


class TestTradesAndCoverLetters:
    def test_trades(self, offline_client):
        body = offline_client.post(
            "/api/trades/enhance", json={"text": "I fixed leaking pipes every day", "trade": "plumber"}
        ).json()
        assert body["success"] is True
        assert body["enhanced"] == "I repaired leaking pipes every day."
        assert set(body["suggestions"]) == {"improvements", "metrics", "skills", "certifications"}

    def test_trades_blank(self, offline_client):
        assert offline_client.post("/api/trades/enhance", json={"text": ""}).status_code == 400

    def test_generate_offline(self, offline_client, sample_resume_data):
        body = offline_client.post(
            "/api/cover-letter/generate",
            json={"resumeData": sample_resume_data, "companyName": "Acme", "positionTitle": "Analyst"},
        ).json()
        assert body["success"] is True
        assert body["coverLetter"].startswith("Dear Hiring Manager,")

    def test_template(self, offline_client, sample_resume_data):
        body = offline_client.post(
            "/api/cover-letter/template",
            json={"resumeData": sample_resume_data, "jobDetails": {"companyName": "Acme"}, "length": "brief"},
        ).json()
        assert body["body"] == ""
        assert body["fullText"].startswith("Dear Hiring Manager,")

    def test_enhance_blank(self, offline_client):
        response = offline_client.post("/api/cover-letter/enhance", json={"content": " "})
        assert response.status_code == 400

    def test_enhance(self, offline_client):
        body = offline_client.post("/api/cover-letter/enhance", json={"content": "We made good progress"}).json()
        assert body == {"success": True, "enhancedContent": "We created effective progress."}


class TestLLMRoutes:
    def test_backends(self, offline_client):
        backends = offline_client.get("/api/llm/backends").json()["backends"]
        assert {b["id"] for b in backends} == {"deepseek", "ollama", "huggingface"}

    def test_status(self, online_client):
        body = online_client.get("/api/llm/status").json()
        assert body["results"]["deepseek"]["available"] is True
        assert body["results"]["rule-based"]["available"] is True
        assert body["availableServices"] == ["deepseek", "rule-based"]
