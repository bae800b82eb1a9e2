import pytest

from api.connectors.hub.webhook.verify import (
    WebhookChallengeError,
    verify_webhook_challenge,
)


def test_verify_webhook_challenge_ok() -> None:
    challenge = verify_webhook_challenge(
        hub_mode="subscribe",
        hub_verify_token="token",
        hub_challenge="xyz123",
        expected_token="token",
    )
    assert challenge == "xyz123"


def test_verify_webhook_challenge_echoes_verbatim() -> None:
    challenge = verify_webhook_challenge(
        hub_mode="subscribe",
        hub_verify_token="token",
        hub_challenge=" Abc 123 ",
        expected_token="token",
    )
    assert challenge == " Abc 123 "


def test_verify_webhook_challenge_missing_challenge_is_empty() -> None:
    challenge = verify_webhook_challenge(
        hub_mode="subscribe",
        hub_verify_token="token",
        hub_challenge=None,
        expected_token="token",
    )
    assert challenge == ""


def test_verify_webhook_challenge_missing_token() -> None:
    with pytest.raises(WebhookChallengeError, match="missing_verify_token"):
        verify_webhook_challenge(
            hub_mode="subscribe",
            hub_verify_token="token",
            hub_challenge="x",
            expected_token=None,
        )


@pytest.mark.parametrize(
    ("hub_mode", "hub_verify_token"),
    [
        ("subscribe", "wrong"),
        ("subscribe", "TOKEN"),
        ("subscribe", None),
        ("unsubscribe", "token"),
        ("Subscribe", "token"),
        (None, "token"),
    ],
)
def test_verify_webhook_challenge_rejected(
    hub_mode: str | None, hub_verify_token: str | None
) -> None:
    with pytest.raises(WebhookChallengeError, match="verification_failed"):
        verify_webhook_challenge(
            hub_mode=hub_mode,
            hub_verify_token=hub_verify_token,
            hub_challenge="x",
            expected_token="token",
        )
