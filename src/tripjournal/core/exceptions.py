class TripJournalError(Exception):
    pass


class ConfigurationError(TripJournalError):
    pass


class NetworkError(TripJournalError):
    pass


class InvalidURLError(NetworkError):
    pass


class BadResponseError(NetworkError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(NetworkError):
    pass


class DecodeError(NetworkError):
    pass
