import logging

from services.redaction import redact_dict, redact_text


def test_redact_text_masks_phone_and_email():
    text = "recipient priya@example.in phone +919876543210 alt 09123456789"
    redacted = redact_text(text)
    assert "priya@example.in" not in redacted
    assert "+919876543210" not in redacted
    assert "09123456789" not in redacted
    assert "p***@example.in" in redacted


def test_redact_text_keeps_amounts_and_transaction_ids():
    text = "amount=50000.01 transaction_id=GC1760000000000000000ABCDEF12"
    assert redact_text(text) == text


def test_redact_dict_masks_sensitive_keys():
    payload = {
        "recipient_name": "Juan Dela Cruz",
        "recipient_phone": "+639123456789",
        "bank_account": "1234567890",
        "bank_code": "BOPIPHMM",
    }
    redacted = redact_dict(payload)
    assert redacted["recipient_name"] == "[REDACTED]"
    assert redacted["recipient_phone"] == "+6391****89"
    assert redacted["bank_account"] == "[REDACTED]"
    assert redacted["bank_code"] == "BOPIPHMM"


def test_log_line_uses_redaction_helper(caplog):
    logger = logging.getLogger("redaction-test")
    caplog.set_level(logging.INFO)
    msg = redact_text("email priya@example.in phone +919876543210")
    logger.info("payload=%s", msg)
    assert "priya@example.in" not in caplog.text
    assert "+919876543210" not in caplog.text
