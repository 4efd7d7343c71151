"""
TCP JSON-RPC client

One connection, one request at a time. The jr command makes exactly one call
per process, but RpcClient keeps a request id counter so it can be reused.
"""

import itertools
import logging
import socket
from typing import Optional, Tuple

from .codec import Reply, decode_response, encode_request
from .errors import CallError, ConnectError
from .render import render

logger = logging.getLogger("jr.rpc")


def parse_address(address: str) -> Tuple[str, int]:
    """Split HOST:PORT (or [V6HOST]:PORT) into a host and an integer port"""
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ConnectError(f"address {address}: missing port in address")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not host:
        # ":4000" dials the local system
        host = "localhost"
    try:
        port_number = int(port)
    except ValueError:
        raise ConnectError(f"address {address}: invalid port {port!r}") from None
    if not 0 <= port_number <= 65535:
        raise ConnectError(f"address {address}: invalid port {port!r}")
    return host, port_number


class RpcClient:
    """Line-delimited JSON-RPC over a single TCP connection"""

    def __init__(self, address: str, timeout: Optional[float] = None, wrap_params: bool = False):
        """Initialize the client.

        Args:
            address: HOST:PORT of the server
            timeout: Seconds to wait for the connection and for each reply;
                None blocks indefinitely
            wrap_params: Send params as a one-element array
        """
        self.address = address
        self.timeout = timeout
        self.wrap_params = wrap_params
        self._sock: Optional[socket.socket] = None
        self._reader = None
        self._ids = itertools.count()

    def connect(self):
        host, port = parse_address(self.address)
        logger.debug(f"Connecting to {host}:{port}")
        try:
            self._sock = socket.create_connection((host, port), timeout=self.timeout)
        except OSError as e:
            raise ConnectError(f"dial tcp {self.address}: {e}") from e
        self._reader = self._sock.makefile("rb")
        return self

    def call(self, method: str, params: Optional[bytes] = None) -> Reply:
        """Send one request and block until its response arrives"""
        if self._sock is None:
            raise CallError("client is not connected")

        request_id = next(self._ids)
        request = encode_request(method, params, request_id, self.wrap_params)
        logger.debug(f"Sending request {request_id}: {request!r}")

        try:
            self._sock.sendall(request)
            line = self._reader.readline()
        except socket.timeout as e:
            raise CallError("timed out waiting for reply") from e
        except OSError as e:
            raise CallError(str(e)) from e

        if not line:
            raise CallError("connection closed by server")
        logger.debug(f"Received response: {line!r}")
        return decode_response(line, request_id)

    def close(self):
        if self._reader is not None:
            self._reader.close()
            self._reader = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self):
        return self.connect()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def call(
    address: str,
    method: str,
    params: Optional[bytes] = None,
    format_output: bool = True,
    timeout: Optional[float] = None,
    wrap_params: bool = False,
) -> bytes:
    """Make one call and return the rendered reply"""
    with RpcClient(address, timeout=timeout, wrap_params=wrap_params) as client:
        reply = client.call(method, params)
    return render(reply.raw, format_output)
