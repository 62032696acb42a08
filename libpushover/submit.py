"""Submit a message to Pushover: validate, encode, transmit."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from libpushover.context import Context
from libpushover.encoding import encode
from libpushover.message import Message
from libpushover.transport import HttpxTransport, Transport
from libpushover.validate import validate_submission

logger = logging.getLogger(__name__)


class SubmitState(str, enum.Enum):
    """Stages a submission moves through after it starts."""
    VALIDATING = "validating"
    ENCODING = "encoding"
    TRANSMITTING = "transmitting"
    DONE = "done"


@dataclass
class SubmitResult:
    """
    Outcome of one submission.

    ``stage`` is where the call ended: DONE on success, otherwise the
    stage that failed.
    """
    ok: bool
    stage: SubmitState
    status_code: Optional[int] = None
    error: Optional[str] = None


class Submitter:
    """Runs submissions through a single transport."""

    def __init__(self, transport: Optional[Transport] = None):
        self.transport = transport or HttpxTransport.from_settings()

    def submit(self, ctx: Context, msg: Message) -> bool:
        return self.submit_detailed(ctx, msg).ok

    def submit_detailed(self, ctx: Context, msg: Message) -> SubmitResult:
        # Validating
        err = validate_submission(ctx, msg)
        if err:
            logger.warning("Pushover message rejected: %s", err)
            return SubmitResult(ok=False, stage=SubmitState.VALIDATING, error=err)

        # Encoding
        body = encode(ctx, msg)
        if body is None:
            return SubmitResult(
                ok=False, stage=SubmitState.ENCODING, error="Failed to encode message"
            )

        # Transmitting
        result = self.transport.post(ctx.uri, body)
        if not result.ok:
            return SubmitResult(
                ok=False,
                stage=SubmitState.TRANSMITTING,
                status_code=result.status_code,
                error=result.error,
            )

        logger.info(
            "Pushover message sent via %s priority=%s status=%s",
            self.transport.transport_type,
            int(msg.priority),
            result.status_code,
        )
        return SubmitResult(ok=True, stage=SubmitState.DONE, status_code=result.status_code)


def submit_message(
    ctx: Context,
    msg: Message,
    transport: Optional[Transport] = None,
) -> bool:
    """Validate, encode and POST *msg*. Returns True only if the transport succeeded."""
    return Submitter(transport).submit(ctx, msg)
