import httpx
import pytest

from evaleads.core.config import EmailConfig, LeadFormConfig


def test_valid_submission_sends_notice_and_confirmation(client, sender, valid_lead):
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert len(sender.sent) == 2

    internal, confirmation = sender.sent
    assert internal.to == ["leads@evahomecleaning.com"]
    assert internal.sender == "hello@evahomecleaning.com"
    assert internal.subject == "New cleaning lead: Jo Lee"
    assert internal.reply_to == "jo@example.com"
    assert "City/ZIP: 94107" in internal.text
    assert '<p style="margin:0 0 8px">Phone: 4155551234</p>' in internal.html

    assert confirmation.to == ["jo@example.com"]
    assert confirmation.subject == "We got your quote request"
    assert confirmation.reply_to == "hello@evahomecleaning.com"
    assert "Hi Jo Lee," in confirmation.html


def test_filled_honeypot_rejected_without_sending(client, sender, valid_lead):
    valid_lead["company"] = "x"
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 400
    assert response.json() == {"error": "Submission rejected."}
    assert sender.sent == []


def test_link_in_message_rejected_without_sending(client, sender, valid_lead):
    valid_lead["message"] = "cheap pills at www.example.com"
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 400
    assert sender.sent == []


def test_short_phone_is_invalid_submission(client, sender, valid_lead):
    valid_lead["phone"] = "123456"
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid form submission."}
    assert sender.sent == []


def test_malformed_json_is_invalid_submission(client, sender):
    response = client.post(
        "/lead-submission",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid form submission."}
    assert sender.sent == []


def test_missing_consent_rejected(client, sender, valid_lead):
    valid_lead["consent"] = False
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 400
    assert response.json() == {"error": "Consent is required."}
    assert sender.sent == []


def test_sixth_submission_in_window_is_rate_limited(client, sender, valid_lead):
    headers = {"X-Forwarded-For": "203.0.113.9, 10.0.0.1"}
    statuses = [
        client.post("/lead-submission", json=valid_lead, headers=headers).status_code
        for _ in range(6)
    ]

    assert statuses == [200, 200, 200, 200, 200, 429]
    assert len(sender.sent) == 10


def test_rate_limit_response_body(client, valid_lead):
    for _ in range(5):
        client.post("/lead-submission", json=valid_lead)
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 429
    assert response.json() == {"error": "Too many requests. Please try again shortly."}


def test_rate_limit_resets_after_window(client, clock, valid_lead):
    for _ in range(6):
        client.post("/lead-submission", json=valid_lead)
    clock.advance(15 * 60)

    assert client.post("/lead-submission", json=valid_lead).status_code == 200


def test_invalid_submissions_count_toward_limit(client, sender, valid_lead):
    for _ in range(5):
        client.post("/lead-submission", json={"name": "x"})

    assert client.post("/lead-submission", json=valid_lead).status_code == 429
    assert sender.sent == []


def test_clients_are_limited_independently(client, limiter, valid_lead):
    for _ in range(5):
        client.post("/lead-submission", json=valid_lead, headers={"X-Real-IP": "198.51.100.1"})

    response = client.post("/lead-submission", json=valid_lead, headers={"X-Real-IP": "198.51.100.2"})
    assert response.status_code == 200
    assert limiter.get("198.51.100.1").count == 5
    assert limiter.get("198.51.100.2").count == 1


def test_anonymous_clients_share_unknown_bucket(client, limiter, valid_lead):
    client.post("/lead-submission", json=valid_lead)
    assert limiter.get("unknown").count == 1


def test_identical_submissions_are_not_deduplicated(client, sender, valid_lead):
    client.post("/lead-submission", json=valid_lead)
    client.post("/lead-submission", json=valid_lead)

    assert len(sender.sent) == 4


def test_missing_configuration_returns_500(build_client, sender, limiter, valid_lead):
    client = build_client(email=EmailConfig(api_key="re_test", from_email="hello@evahomecleaning.com"))
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 500
    assert response.json() == {"error": "Server email configuration missing."}
    assert sender.sent == []
    assert len(limiter) == 0


def test_provider_error_on_internal_notice_returns_500(client, sender, valid_lead):
    sender.fail_on_call = 1
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 500
    assert response.json() == {"error": "Unable to send email right now."}
    assert len(sender.sent) == 1


def test_provider_error_on_confirmation_returns_same_500(client, sender, valid_lead):
    sender.fail_on_call = 2
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 500
    assert response.json() == {"error": "Unable to send email right now."}


def test_transport_error_returns_500(client, sender, valid_lead):
    sender.raise_on_call = 1
    sender.raise_exc = httpx.ConnectError("connection refused")
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 500
    assert response.json() == {"error": "Unable to send email right now."}


def test_unexpected_sender_failure_returns_500(client, sender, valid_lead):
    sender.raise_on_call = 1
    sender.raise_exc = RuntimeError("boom")
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 500
    assert response.json() == {"error": "Unable to send email right now."}


def test_quick_variant_sends_only_internal_notice(build_client, sender):
    client = build_client(lead_form=LeadFormConfig(variant="quick"))
    response = client.post(
        "/lead-submission",
        json={"name": "Jo Lee", "phone": "4155551234", "city_or_zip": "94107", "email": "jo@example.com"},
    )

    assert response.status_code == 200
    assert len(sender.sent) == 1
    assert "Home type: -" in sender.sent[0].text


def test_quick_variant_without_email_has_no_reply_to(build_client, sender):
    client = build_client(lead_form=LeadFormConfig(variant="quick"))
    response = client.post(
        "/lead-submission",
        json={"name": "Jo Lee", "phone": "4155551234", "city_or_zip": "94107"},
    )

    assert response.status_code == 200
    assert sender.sent[0].reply_to is None
    assert "Email: -" in sender.sent[0].text


def test_markup_like_forwarded_for_on_accepted_lead(client, sender, limiter, valid_lead):
    response = client.post("/lead-submission", json=valid_lead, headers={"X-Forwarded-For": "[/x]"})

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert len(sender.sent) == 2
    assert limiter.get("[/x]").count == 1


def test_markup_like_forwarded_for_still_gets_429(client, sender, valid_lead):
    headers = {"X-Forwarded-For": "[bold][/x][/red]"}
    statuses = [
        client.post("/lead-submission", json=valid_lead, headers=headers).status_code
        for _ in range(6)
    ]

    assert statuses == [200, 200, 200, 200, 200, 429]


def test_markup_in_sender_exception_returns_generic_500(client, sender, valid_lead):
    sender.raise_on_call = 1
    sender.raise_exc = RuntimeError("[/boom] upstream said [red")
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 500
    assert response.json() == {"error": "Unable to send email right now."}


@pytest.mark.parametrize("consent", ["yes", "on", "true", 1])
def test_non_boolean_consent_is_invalid_submission(client, sender, valid_lead, consent):
    valid_lead["consent"] = consent
    response = client.post("/lead-submission", json=valid_lead)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid form submission."}
    assert sender.sent == []
