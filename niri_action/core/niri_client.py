"""niri IPC session over the compositor's Unix socket.

niri listens on the socket named by $NIRI_SOCKET and speaks newline-delimited
JSON: the client writes one request line and reads back one reply line. A
session owns exactly one connection and performs exchanges strictly one at a
time; there is no pipelining, reconnect or retry.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Optional

from ..models.ipc import Reply, Request, UnsupportedVariantError
from .errors import TransportError, UnhandledError


# Get logger for this module
logger = logging.getLogger('niri_action.niri_client')

# A Windows listing easily exceeds asyncio's default 64 KiB line limit
READ_LIMIT = 16 * 1024 * 1024


def get_default_socket_path() -> Path:
    """Get niri socket path from the environment.

    Returns:
        Path taken from $NIRI_SOCKET

    Raises:
        TransportError: If NIRI_SOCKET is not set (niri not running in this session)
    """
    socket_path = os.environ.get("NIRI_SOCKET")
    if not socket_path:
        raise TransportError(
            "NIRI_SOCKET is not set. Is niri running in this session?"
        )
    return Path(socket_path)


class NiriSession:
    """Single connection to niri's IPC socket.

    One request line is written and one reply line read per ``send`` call.
    Callers await exchanges sequentially; the session holds no other state.
    """

    def __init__(
        self,
        socket_path: Optional[Path] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize niri session.

        Args:
            socket_path: Path to niri's socket (default: $NIRI_SOCKET)
            timeout: Per-operation timeout in seconds, None to wait indefinitely
        """
        self.socket_path = socket_path or get_default_socket_path()
        self.timeout = timeout
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None

    @property
    def connected(self) -> bool:
        return self._writer is not None

    async def connect(self) -> None:
        """Connect to niri socket.

        Raises:
            TransportError: If connection fails
        """
        if self.connected:
            return

        try:
            logger.debug(f"Connecting to niri socket at {self.socket_path}")
            self._reader, self._writer = await asyncio.wait_for(
                asyncio.open_unix_connection(str(self.socket_path), limit=READ_LIMIT),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise TransportError(
                f"Connection timeout: niri not responding at {self.socket_path}"
            )
        except FileNotFoundError:
            raise TransportError(f"niri socket not found: {self.socket_path}")
        except ConnectionRefusedError:
            raise TransportError(f"Connection refused by niri socket: {self.socket_path}")
        except OSError as e:
            raise TransportError(f"Failed to connect to niri: {e}")

    async def close(self) -> None:
        """Close connection to niri."""
        if self._writer:
            self._writer.close()
            try:
                await self._writer.wait_closed()
            except OSError as e:
                logger.debug(f"Ignoring error while closing niri socket: {e}")
            self._reader = None
            self._writer = None

    async def send(self, request: Request) -> Reply:
        """Send one request and read its reply.

        Args:
            request: Request to send

        Returns:
            niri's reply, either Ok(Response) or Err(text)

        Raises:
            TransportError: If the exchange fails or the reply cannot be decoded
        """
        if not self.connected:
            await self.connect()

        logger.debug(f"IPC request: {request.describe()}")

        try:
            request_json = json.dumps(request.to_wire()) + "\n"
            self._writer.write(request_json.encode())
            await asyncio.wait_for(self._writer.drain(), timeout=self.timeout)

            response_line = await asyncio.wait_for(
                self._reader.readline(), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            raise TransportError(f"Request timeout: {request.describe()} took too long")
        except OSError as e:
            raise TransportError(f"Communication error: {e}")
        except (ValueError, asyncio.LimitOverrunError) as e:
            raise TransportError(f"Reply from niri could not be read: {e}")

        if not response_line:
            raise TransportError("niri closed the connection without replying")

        try:
            reply = Reply.from_wire(json.loads(response_line.decode()))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TransportError(f"Invalid JSON reply from niri: {e}")
        except UnsupportedVariantError as e:
            raise UnhandledError(f"{request.describe()} returned unexpected payload {e.variant}")
        except ValueError as e:
            raise TransportError(f"Invalid reply from niri: {e}")

        if reply.is_ok:
            logger.debug(f"IPC reply: Ok({reply.response.describe()})")
        else:
            logger.debug(f"IPC reply: Err({reply.error})")
        return reply

    async def __aenter__(self) -> "NiriSession":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
