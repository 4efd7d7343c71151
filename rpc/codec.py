"""
Line-delimited JSON-RPC envelopes

Requests are written as one JSON object per line. Responses are read back one
line at a time; the `result` member is kept as the exact text the server sent
so that -no-format can print it untouched.
"""

import json
import re
from dataclasses import dataclass
from json.decoder import scanstring
from typing import Any, Dict, Optional, Tuple

from .errors import CallError, InvalidReplyError, RemoteError
from .render import compact

_WS = re.compile(r"[ \t\n\r]*")


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


@dataclass(frozen=True)
class Reply:
    """A successful response"""
    id: Any
    raw: bytes  # the result member as received

    def value(self) -> Any:
        return json.loads(self.raw)


def encode_request(
    method: str,
    params: Optional[bytes],
    request_id: int,
    wrap_params: bool = False,
) -> bytes:
    """Build one request line.

    `params` is inserted as-is apart from whitespace removal, which keeps a
    multi-line document on a single line. With wrap_params the payload is
    sent as a one-element array, the shape Go net/rpc servers expect.
    """
    members = [
        b'"jsonrpc":"2.0"',
        b'"method":' + json.dumps(method).encode("utf-8"),
    ]

    if wrap_params:
        inner = compact(params) if params is not None else b"null"
        members.append(b'"params":[' + inner + b"]")
    elif params is not None:
        members.append(b'"params":' + compact(params))

    members.append(b'"id":' + json.dumps(request_id).encode("utf-8"))
    return b"{" + b",".join(members) + b"}\n"


def _scan_object(text: str) -> Dict[str, Tuple[str, Any]]:
    """Map each member of a top-level object to (raw text, decoded value)"""
    members: Dict[str, Tuple[str, Any]] = {}

    idx = _WS.match(text, 0).end()
    if text[idx:idx + 1] != "{":
        raise ValueError("response is not a JSON object")
    idx = _WS.match(text, idx + 1).end()

    if text[idx:idx + 1] == "}":
        idx += 1
    else:
        while True:
            if text[idx:idx + 1] != '"':
                raise ValueError(f"expected member name at offset {idx}")
            key, idx = scanstring(text, idx + 1)
            idx = _WS.match(text, idx).end()
            if text[idx:idx + 1] != ":":
                raise ValueError(f"expected ':' at offset {idx}")
            start = _WS.match(text, idx + 1).end()
            value, idx = _decoder.raw_decode(text, start)
            members[key] = (text[start:idx], value)

            idx = _WS.match(text, idx).end()
            separator = text[idx:idx + 1]
            idx += 1
            if separator == "}":
                break
            if separator != ",":
                raise ValueError(f"expected ',' or '}}' at offset {idx - 1}")
            idx = _WS.match(text, idx).end()

    if text[idx:].strip(" \t\r\n"):
        raise ValueError("trailing data after response")
    return members


def _remote_error(error: Any) -> RemoteError:
    if isinstance(error, str):
        return RemoteError(error or "unspecified error")
    if isinstance(error, dict):
        message = error.get("message")
        code = error.get("code")
        if message is None:
            message = json.dumps(error)
        elif not message:
            message = "unspecified error"
        elif code is not None:
            message = f"{message} (code {code})"
        return RemoteError(str(message), code=code, data=error.get("data"))
    return RemoteError(f"invalid error {json.dumps(error)}")


def decode_response(line: bytes, request_id: Any) -> Reply:
    """Decode one response line for the request with `request_id`.

    Raises:
        InvalidReplyError: The line is not a well-formed JSON object
        RemoteError: The server reported an error
        CallError: The response belongs to a different request
    """
    try:
        members = _scan_object(line.decode("utf-8"))
    except ValueError as e:  # also covers UnicodeDecodeError and JSONDecodeError
        raise InvalidReplyError(line.rstrip(b"\r\n")) from e

    _, response_id = members.get("id", (None, None))
    if response_id != request_id or isinstance(response_id, bool):
        raise CallError(
            f"response id {json.dumps(response_id)} does not match request id {json.dumps(request_id)}"
        )

    _, error = members.get("error", (None, None))
    if error is not None:
        raise _remote_error(error)

    raw, _ = members.get("result", ("null", None))
    return Reply(id=response_id, raw=raw.encode("utf-8"))
