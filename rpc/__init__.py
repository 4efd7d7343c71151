"""
JSON-RPC call pipeline

This package provides the parameter builder, the line-delimited wire codec,
the reply renderer and the TCP client used by the jr command.
"""

__version__ = "0.1.0"

from .client import RpcClient, call
from .codec import Reply, encode_request, decode_response
from .errors import (
    JrError,
    ParameterError,
    StdinError,
    ConnectError,
    CallError,
    RemoteError,
    InvalidReplyError,
)
from .params import (
    NoParams,
    RawPayload,
    BareValue,
    KeyValueObject,
    Pair,
    build_params,
    parse_tokens,
)
from .render import compact, indent, render

__all__ = [
    'RpcClient',
    'call',
    'Reply',
    'encode_request',
    'decode_response',
    'JrError',
    'ParameterError',
    'StdinError',
    'ConnectError',
    'CallError',
    'RemoteError',
    'InvalidReplyError',
    'NoParams',
    'RawPayload',
    'BareValue',
    'KeyValueObject',
    'Pair',
    'build_params',
    'parse_tokens',
    'compact',
    'indent',
    'render',
]
