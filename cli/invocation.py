"""
One jr invocation: build the payload, make the call, render the reply
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from rpc.client import call
from rpc.params import build_params

logger = logging.getLogger("jr.cli")


@dataclass(frozen=True)
class Invocation:
    """Everything needed for a single call, fixed at startup"""
    address: str
    method: str
    raw_arguments: Tuple[str, ...] = ()
    format_output: bool = True
    timeout: Optional[float] = None
    wrap_params: bool = False

    @classmethod
    def from_args(cls, args: Sequence[str], **options) -> "Invocation":
        """ADDRESS METHOD [PARAMETER...] plus keyword options"""
        address, method, *rest = args
        return cls(address=address, method=method, raw_arguments=tuple(rest), **options)


def execute(
    invocation: Invocation,
    stdin_piped: bool = False,
    read_stdin: Optional[Callable[[], bytes]] = None,
) -> bytes:
    """Run the invocation and return the bytes to print.

    Every failure surfaces as a JrError subclass; the payload is built before
    any connection is attempted.
    """
    params = build_params(invocation.raw_arguments, stdin_piped, read_stdin)
    logger.debug(f"Parameters: {type(params).__name__}")

    return call(
        invocation.address,
        invocation.method,
        params.encode(),
        format_output=invocation.format_output,
        timeout=invocation.timeout,
        wrap_params=invocation.wrap_params,
    )
