"""Registry of notification channel adapters.

Each channel resolves to an in-memory fake until a real gateway is
registered with `set_channel`, normally at application startup.
"""

SMS = "sms"
EMAIL = "email"

_adapters: dict[str, object] = {}


def _default_adapter(channel: str):
    from grocery.notifications.channel.fakes import FakeEmailAdapter, FakeSMSAdapter

    return {SMS: FakeSMSAdapter, EMAIL: FakeEmailAdapter}[channel]()


def _check_channel(channel: str) -> None:
    if channel not in (SMS, EMAIL):
        raise ValueError(f"Unknown channel type: {channel}")


def get_channel(channel: str):
    """Return the adapter for ``channel`` ("sms" or "email")."""
    _check_channel(channel)
    if channel not in _adapters:
        _adapters[channel] = _default_adapter(channel)
    return _adapters[channel]


def set_channel(channel: str, adapter) -> None:
    _check_channel(channel)
    _adapters[channel] = adapter


def reset_channels() -> None:
    _adapters.clear()
