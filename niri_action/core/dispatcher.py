"""Query/action dispatch on top of a niri session.

niri answers both questions and commands on the same ``Ok`` channel: an
accepted action comes back as ``Handled`` and an answered query comes back
with data. The two helpers here restore the distinction the operations rely
on. ``query`` treats ``Handled`` as "no data". ``run_action`` treats anything
but ``Handled`` as a protocol violation.
"""

import logging
from typing import Optional, Protocol

from ..models.ipc import Reply, Request, Response
from .errors import UnhandledError


logger = logging.getLogger('niri_action.dispatcher')


class Session(Protocol):
    """Anything that can carry one request/reply exchange."""

    async def send(self, request: Request) -> Reply:
        ...


async def query(session: Session, request: Request) -> Optional[Response]:
    """Run a read-only request.

    Args:
        session: Connected session
        request: Query request (Outputs, Windows or Workspaces)

    Returns:
        The response payload, or None if niri answered with a bare ``Handled``

    Raises:
        UnhandledError: If niri replied with an error
    """
    reply = await session.send(request)

    if not reply.is_ok:
        raise UnhandledError(reply.error)

    if reply.response.is_handled:
        logger.debug(f"{request.describe()} answered with Handled, treating as no data")
        return None

    return reply.response


async def run_action(session: Session, request: Request) -> None:
    """Run a mutating request whose only valid success is ``Handled``.

    Args:
        session: Connected session
        request: Action request

    Raises:
        UnhandledError: If niri replied with an error or returned a data payload
    """
    reply = await session.send(request)

    if not reply.is_ok:
        raise UnhandledError(reply.error)

    if not reply.response.is_handled:
        raise UnhandledError(
            f"{request.describe()} returned unexpected payload {reply.response.describe()}"
        )

    logger.info(f"{request.describe()} handled")
