"""
Error types raised by the jr call pipeline
"""

from typing import Any, Optional


class JrError(Exception):
    """Base class for every fatal jr error"""

    prefix = "Error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def describe(self) -> str:
        """Diagnostic line printed to stderr"""
        return f"{self.prefix}: {self.detail}"


class ParameterError(JrError):
    """A parameter token could not be turned into a key/value pair"""

    prefix = "Invalid argument"

    def __init__(self, token: str):
        super().__init__(token)
        self.token = token


class StdinError(JrError):
    prefix = "Couldn't read from stdin"


class ConnectError(JrError):
    prefix = "Couldn't connect to server"


class CallError(JrError):
    """Transport or protocol failure during the exchange"""

    prefix = "Call failed"


class RemoteError(CallError):
    """The server answered with a non-null error member"""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data


class InvalidReplyError(JrError):
    prefix = "Call returned invalid JSON"

    def __init__(self, raw: bytes):
        super().__init__(raw.decode("utf-8", errors="replace"))
        self.raw = raw
