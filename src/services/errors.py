class ServiceError(Exception):
    pass


class TranslationServiceError(ServiceError):
    pass


class NetworkTimeoutError(TranslationServiceError):
    def __init__(self, url: str, timeout_seconds: float):
        super().__init__(f"Network timeout after {timeout_seconds}s: {url}")
        self.url = url
        self.timeout_seconds = timeout_seconds


class InvalidTranslationResult(ServiceError):
    def __init__(self, value: object, reason: str):
        super().__init__(f"Rejected translation {value!r}: {reason}")
        self.value = value
        self.reason = reason


class MalformedRecordShape(ServiceError):
    def __init__(self, field: str, observed: object):
        super().__init__(f"Field {field!r} has unsupported shape: {type(observed).__name__}")
        self.field = field
        self.observed_type = type(observed).__name__


class UnsupportedLanguageError(ServiceError, ValueError):
    def __init__(self, language: object):
        super().__init__(f"Unsupported language: {language!r}")
        self.language = language
