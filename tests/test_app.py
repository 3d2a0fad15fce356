from evaleads.core.config import EmailConfig


def test_health_reports_configuration(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "email_configured": True,
        "sms_configured": True,
        "sms_signature_verification": True,
        "lead_form_variant": "full",
    }


def test_health_degraded_without_email_settings(build_client):
    response = build_client(email=EmailConfig()).get("/health")

    assert response.json()["status"] == "degraded"
    assert response.json()["email_configured"] is False


def test_root(client):
    assert client.get("/").json()["message"] == "API is running"


def test_forwarded_for_takes_first_address(client, limiter, valid_lead):
    client.post(
        "/lead-submission",
        json=valid_lead,
        headers={"X-Forwarded-For": " 192.0.2.7 , 10.0.0.2", "X-Real-IP": "10.0.0.3"},
    )
    assert limiter.get("192.0.2.7").count == 1


def test_lifespan_runs_with_missing_configuration(build_client):
    with build_client(email=EmailConfig()) as client:
        assert client.get("/").status_code == 200
