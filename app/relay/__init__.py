from app.relay.relay import Relay, RelaySession, RelayState

__all__ = ["Relay", "RelaySession", "RelayState"]
