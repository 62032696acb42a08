import pytest

from libpushover.config import PUSHOVER_URI
from libpushover.context import Context
from libpushover.message import Message, Priority
from libpushover.submit import SubmitState, Submitter, submit_message
from libpushover.transport.base import TransportResult


def test_submit_valid_message_reaches_transport(ctx, msg, transport):
    msg.set_priority(Priority.HIGH)

    assert submit_message(ctx, msg, transport) is True
    assert len(transport.calls) == 1
    uri, body = transport.calls[0]
    assert uri == PUSHOVER_URI
    assert body == b"&message=Build%20failed&token=tok123&user=usr456&priority=1"


def test_submit_uses_context_uri(ctx, msg, transport):
    ctx.set_uri("https://push.example.test/1/messages.json")
    submit_message(ctx, msg, transport)
    assert transport.calls[0][0] == "https://push.example.test/1/messages.json"


@pytest.mark.parametrize("missing", ["destination", "body"])
def test_submit_rejects_message_missing_required_field(ctx, transport, missing):
    msg = Message.create()
    if missing != "destination":
        msg.set_destination("usr456")
    if missing != "body":
        msg.set_body("Build failed")

    result = Submitter(transport).submit_detailed(ctx, msg)

    assert result.ok is False
    assert result.stage is SubmitState.VALIDATING
    assert missing in result.error
    assert transport.calls == []


def test_submit_rejects_context_without_token(msg, transport):
    assert submit_message(Context.create(), msg, transport) is False
    assert transport.calls == []


def test_submit_rejects_destroyed_context(ctx, msg, transport):
    ctx.destroy()
    assert submit_message(ctx, msg, transport) is False
    assert transport.calls == []


def test_submit_rejects_insane_priority_set_directly(ctx, msg, transport):
    msg.priority = 7
    assert submit_message(ctx, msg, transport) is False
    assert transport.calls == []


def test_submit_rejects_destroyed_message(ctx, msg, transport):
    msg.destroy()
    assert submit_message(ctx, msg, transport) is False
    assert transport.calls == []


def test_submit_encoding_failure_skips_transport(ctx, transport):
    msg = Message.create()
    msg.set_destination("usr456")
    msg.set_body("bad\ud800")

    result = Submitter(transport).submit_detailed(ctx, msg)

    assert result.ok is False
    assert result.stage is SubmitState.ENCODING
    assert transport.calls == []


def test_submit_transport_failure(ctx, msg, transport):
    transport.result = TransportResult(ok=False, status_code=400, error="HTTP 400")

    result = Submitter(transport).submit_detailed(ctx, msg)

    assert result.ok is False
    assert result.stage is SubmitState.TRANSMITTING
    assert result.status_code == 400
    assert len(transport.calls) == 1


def test_submit_success_result(ctx, msg, transport):
    result = Submitter(transport).submit_detailed(ctx, msg)
    assert result.ok is True
    assert result.stage is SubmitState.DONE
    assert result.status_code == 200
    assert result.error is None


def test_message_can_be_submitted_repeatedly(ctx, msg, transport):
    submitter = Submitter(transport)
    assert submitter.submit(ctx, msg) is True
    msg.set_body("Build fixed")
    assert submitter.submit(ctx, msg) is True
    assert [body for _, body in transport.calls] == [
        b"&message=Build%20failed&token=tok123&user=usr456&priority=0",
        b"&message=Build%20fixed&token=tok123&user=usr456&priority=0",
    ]


def test_submitter_defaults_to_httpx_transport():
    submitter = Submitter()
    assert submitter.transport.transport_type == "httpx"


@pytest.mark.parametrize("field", ["body", "destination", "token"])
def test_submit_treats_empty_string_as_missing(ctx, msg, transport, field):
    if field == "body":
        msg.set_body("")
    elif field == "destination":
        msg.set_destination("")
    else:
        ctx.set_token("")

    assert submit_message(ctx, msg, transport) is False
    assert transport.calls == []
