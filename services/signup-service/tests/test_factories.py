from __future__ import annotations

from fastapi.testclient import TestClient

from signup_service.config import Settings
from signup_service.factories import make_signup_controller
from signup_service.main import app
from signup_service.presentation.protocols import HttpRequest


def test_factory_builds_working_controller():
    controller = make_signup_controller(Settings(email_check_deliverability=False))

    response = controller.handle(
        HttpRequest(
            body={
                "name": "Teste",
                "email": "teste@gmail.com",
                "password": "teste@123",
                "passwordConfirmation": "teste@123",
            }
        )
    )

    assert response.status_code == 200
    assert response.body.email == "teste@gmail.com"


def test_application_serves_health_metrics_and_signup():
    with TestClient(app) as client:
        assert client.get("/healthz").json() == {"status": "ok"}

        response = client.post("/v1/signup", json={"name": "Teste"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing param: email"}

        metrics = client.get("/metrics")
        assert metrics.status_code == 200
        assert "signup_responses_total" in metrics.text
