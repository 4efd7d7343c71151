"""
Pytest configuration and fixtures for jr tests
"""
import asyncio
import json
import logging
import socket
import pytest
import pytest_asyncio
from click.testing import CliRunner

# Add project root to path
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))


class EchoServer:
    """Line-delimited JSON-RPC test server.

    Methods:
        Echo        returns its params
        Fail        JSON-RPC 2.0 error object
        FailString  Go net/rpc style string error
        WrongId     replies with a different id
        Verbatim    replies with a fixed, oddly spaced result
        Garbage     replies with a line that is not JSON
        Hangup      closes the connection without replying
    """

    VERBATIM_RESULT = b'{"n":1.50, "s":"caf\\u00e9","e":[],"o":{}}'

    def __init__(self):
        self.requests = []
        self.connections = 0
        self.server = None

    @property
    def address(self) -> str:
        host, port = self.server.sockets[0].getsockname()[:2]
        return f"{host}:{port}"

    async def start(self):
        self.server = await asyncio.start_server(self._handle_connection, '127.0.0.1', 0)
        return self

    async def stop(self):
        self.server.close()
        await self.server.wait_closed()

    async def _handle_connection(self, reader, writer):
        self.connections += 1
        try:
            while True:
                line = await reader.readline()
                if not line:
                    break
                response = self._respond(line)
                if response is None:
                    break
                writer.write(response)
                await writer.drain()
        except ConnectionResetError:
            pass
        finally:
            writer.close()
            await writer.wait_closed()

    def _respond(self, line: bytes):
        self.requests.append(line)
        request = json.loads(line)
        request_id = json.dumps(request.get("id")).encode()
        method = request.get("method")

        if method == "Hangup":
            return None
        if method == "Garbage":
            return b"this is not json\n"
        if method == "WrongId":
            return b'{"id":' + json.dumps(request["id"] + 1).encode() + b',"result":true,"error":null}\n'
        if method == "Fail":
            return b'{"jsonrpc":"2.0","id":' + request_id + b',"error":{"code":-32000,"message":"boom"}}\n'
        if method == "FailString":
            return b'{"id":' + request_id + b',"result":null,"error":"rpc: service/method request ill-formed"}\n'
        if method == "Verbatim":
            result = self.VERBATIM_RESULT
        else:
            result = json.dumps(request.get("params"), separators=(",", ":")).encode()
        return b'{"id":' + request_id + b',"result":' + result + b',"error":null}\n'

    def last_request(self) -> dict:
        return json.loads(self.requests[-1])


@pytest_asyncio.fixture
async def echo_server():
    """A running EchoServer on an ephemeral port"""
    server = await EchoServer().start()
    yield server
    await server.stop()


@pytest.fixture
def cli_runner():
    """Create CLI runner"""
    return CliRunner()


@pytest.fixture
def closed_port():
    """A localhost port with nothing listening on it"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture(autouse=True)
def reset_jr_logger():
    """Drop handlers that main_cli attached to CliRunner's streams"""
    yield
    logger = logging.getLogger("jr")
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clear_jr_env(monkeypatch, tmp_path):
    """Keep user config, JR_* variables and forced colors out of the tests"""
    for name in ["JR_NO_FORMAT", "JR_TIMEOUT", "JR_WRAP_PARAMS", "JR_LOG_LEVEL", "JR_LOG_FILE"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.chdir(tmp_path)
