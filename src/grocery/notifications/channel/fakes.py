"""In-memory adapters, used by default and in tests."""

from uuid import uuid4

from grocery.notifications.channel.ports import EmailPort, SMSPort


class _RecordingAdapter:
    prefix = "msg"
    default_failure = "delivery failed"

    def __init__(self):
        self.sent_messages: list[dict] = []
        self.reset()

    def configure(self, should_succeed: bool = True, failure_reason: str | None = None):
        """Make subsequent sends succeed or fail with ``failure_reason``."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason or self.default_failure

    def reset(self):
        self.sent_messages.clear()
        self.configure()

    def _deliver(self, **message) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"{self.prefix}-{uuid4().hex[:12]}"
        self.sent_messages.append({"message_id": message_id, **message})
        return {"message_id": message_id, "status": "sent"}


class FakeSMSAdapter(_RecordingAdapter, SMSPort):
    prefix = "sms"
    default_failure = "SMS delivery failed"

    def send(self, to: str, body: str) -> dict:
        return self._deliver(to=to, body=body)


class FakeEmailAdapter(_RecordingAdapter, EmailPort):
    prefix = "email"
    default_failure = "Email delivery failed"

    def send(self, to: str, subject: str, body: str) -> dict:
        return self._deliver(to=to, subject=subject, body=body)
