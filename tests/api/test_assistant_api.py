"""API tests for the page-scoped assistant chat."""

from manualkit.core.exceptions import LLMMaxRetriesError

ETICA = ["diretrizes", "etica-e-conduta"]


class TestAssistantChat:

    def test_answers_with_page_context(self, client, user_headers, fake_llm):
        response = client.post(
            "/api/assistant/chat",
            json={
                "path": ETICA,
                "message": "O que é confidencialidade?",
                "history": [
                    {"role": "model", "content": "Olá! Como posso ajudar?"},
                    {"role": "user", "content": "Oi"},
                ],
            },
            headers=user_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"response": "Resposta de teste.", "model": "fake-model"}

        call = fake_llm.calls[0]
        assert call["prompt"] == "O que é confidencialidade?"
        assert "Proteger informações sensíveis" in call["system_prompt"]
        assert "/page/faturamento/pedido-venda" in call["system_prompt"]
        assert call["chat_history"] == [
            {"role": "assistant", "content": "Olá! Como posso ajudar?"},
            {"role": "user", "content": "Oi"},
        ]

    def test_unknown_page(self, client, user_headers):
        response = client.post(
            "/api/assistant/chat", json={"path": ["nada"], "message": "Oi"}, headers=user_headers,
        )

        assert response.status_code == 404

    def test_llm_failure_is_bad_gateway(self, client, user_headers, fake_llm):
        fake_llm.error = LLMMaxRetriesError("Max retries (3) reached")

        response = client.post(
            "/api/assistant/chat", json={"path": ETICA, "message": "Oi"}, headers=user_headers,
        )

        assert response.status_code == 502

    def test_requires_login(self, client):
        response = client.post("/api/assistant/chat", json={"path": ETICA, "message": "Oi"})

        assert response.status_code == 401
