"""
Parameter Builder - turns command-line tokens into one JSON payload

Tokens come in three shapes:

  bar           a single bare value, sent as the JSON string "bar"
  :raw          a single raw value, sent as `raw` unquoted
  key=value     an object member with a string value ("key":"value")
  key:=value    an object member with a raw JSON value ("key":value)

With no tokens the payload is absent, or the verbatim stdin bytes when data is
piped in. Raw fragments are never validated here; a malformed fragment turns
into a malformed request and the server gets to reject it.
"""

import json
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Union

from .errors import ParameterError


def quote(text: str) -> bytes:
    """JSON string literal for text"""
    return json.dumps(text, ensure_ascii=False).encode("utf-8", "surrogateescape")


@dataclass(frozen=True)
class NoParams:
    """No tokens and nothing on stdin"""

    def encode(self) -> Optional[bytes]:
        return None


@dataclass(frozen=True)
class RawPayload:
    """Bytes passed through untouched (stdin, or a single `:`-prefixed token)"""
    data: bytes

    def encode(self) -> Optional[bytes]:
        return self.data


@dataclass(frozen=True)
class BareValue:
    """A single token without `=`, sent as a JSON string"""
    text: str

    def encode(self) -> Optional[bytes]:
        return quote(self.text)


@dataclass(frozen=True)
class Pair:
    key: str
    value: str
    raw: bool = False  # True for key:=value

    def encode(self) -> bytes:
        value = self.value.encode("utf-8", "surrogateescape") if self.raw else quote(self.value)
        return quote(self.key) + b":" + value


@dataclass(frozen=True)
class KeyValueObject:
    """key=value / key:=value tokens joined into one JSON object"""
    pairs: List[Pair] = field(default_factory=list)

    def encode(self) -> Optional[bytes]:
        return b"{" + b",".join(pair.encode() for pair in self.pairs) + b"}"


Params = Union[NoParams, RawPayload, BareValue, KeyValueObject]


def parse_pair(token: str) -> Pair:
    """Split a key=value or key:=value token at its first `=`"""
    eq = token.find("=")
    if eq == -1:
        raise ParameterError(token)
    if token[eq - 1:eq] == ":":
        key, raw = token[:eq - 1], True
    else:
        key, raw = token[:eq], False
    return Pair(key=key, value=token[eq + 1:], raw=raw)


def parse_tokens(tokens: Sequence[str]) -> Params:
    """Classify one or more tokens; stdin is handled by build_params"""
    if not tokens:
        return NoParams()

    if len(tokens) == 1 and "=" not in tokens[0]:
        token = tokens[0]
        if token.startswith(":"):
            return RawPayload(token[1:].encode("utf-8", "surrogateescape"))
        return BareValue(token)

    return KeyValueObject([parse_pair(token) for token in tokens])


def build_params(
    tokens: Sequence[str],
    stdin_piped: bool = False,
    read_stdin: Optional[Callable[[], bytes]] = None,
) -> Params:
    """Build the RPC parameter payload.

    Args:
        tokens: Command-line tokens after ADDRESS and METHOD
        stdin_piped: Whether data is being piped on stdin
        read_stdin: Reads all of stdin; only called when there are no tokens
            and stdin_piped is set

    Returns:
        One of NoParams, RawPayload, BareValue or KeyValueObject

    Raises:
        ParameterError: A token is not a valid key/value pair
    """
    if tokens:
        return parse_tokens(tokens)
    if stdin_piped and read_stdin is not None:
        return RawPayload(read_stdin())
    return NoParams()
