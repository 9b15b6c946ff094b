from tripjournal.token.store import TokenStore

__all__ = ["TokenStore"]
