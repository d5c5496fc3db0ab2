import grpc
import pytest

from hellostream.messages import HelloRequest, HelloResponse
from hellostream.services import (
    METHOD_PATHS,
    SERVER_STREAM_REPLIES,
    ClientStreamingService,
    ServerStreamingService,
    ServiceKind,
    UnaryService,
    create_server,
    main,
)


def test_unary_service_replies_and_logs(capsys):
    reply = UnaryService().server_reply(HelloRequest("ping"), None)
    assert reply == HelloResponse("hello ji")
    out = capsys.readouterr().out
    assert "ping" in out
    assert "hello from server" in out


def test_server_streaming_yields_fixed_replies():
    replies = list(ServerStreamingService().server_reply(HelloRequest("x"), None))
    assert [r.reply for r in replies] == ["Kya hua", "Sorry", "Man jao"]


def test_client_streaming_counts_and_prints(capsys):
    requests = [HelloRequest(f"Request {n}") for n in range(1, 5)]
    reply = ClientStreamingService().server_reply(iter(requests), None)
    assert reply.reply == str(len(requests))
    assert capsys.readouterr().out.splitlines() == [r.some_string for r in requests]


def test_client_streaming_empty_stream():
    assert ClientStreamingService().server_reply(iter([]), None).reply == str(0)


def test_service_kind_from_string():
    assert ServiceKind("client-streaming") is ServiceKind.CLIENT_STREAMING


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        create_server("bidirectional", "localhost:0")


def test_main_rejects_unknown_kind():
    with pytest.raises(SystemExit) as info:
        main(["bogus"])
    assert info.value.code == 2


def _serve(kind):
    server, port = create_server(kind, "localhost:0")
    server.start()
    return server, grpc.insecure_channel(f"localhost:{port}")


def test_unary_over_grpc():
    server, channel = _serve(ServiceKind.UNARY)
    try:
        call = channel.unary_unary(
            METHOD_PATHS[ServiceKind.UNARY],
            request_serializer=HelloRequest.to_bytes,
            response_deserializer=HelloResponse.from_bytes,
        )
        assert call(HelloRequest("hi"), timeout=5).reply == "hello ji"
    finally:
        channel.close()
        server.stop(None)


def test_server_streaming_over_grpc():
    server, channel = _serve("server-streaming")
    try:
        call = channel.unary_stream(
            METHOD_PATHS[ServiceKind.SERVER_STREAMING],
            request_serializer=HelloRequest.to_bytes,
            response_deserializer=HelloResponse.from_bytes,
        )
        replies = [r.reply for r in call(HelloRequest("hi"), timeout=5)]
        assert replies == list(SERVER_STREAM_REPLIES)
    finally:
        channel.close()
        server.stop(None)


def test_client_streaming_over_grpc():
    server, channel = _serve(ServiceKind.CLIENT_STREAMING)
    try:
        call = channel.stream_unary(
            METHOD_PATHS[ServiceKind.CLIENT_STREAMING],
            request_serializer=HelloRequest.to_bytes,
            response_deserializer=HelloResponse.from_bytes,
        )
        requests = [HelloRequest(str(n)) for n in range(7)]
        assert call(iter(requests), timeout=5).reply == str(len(requests))
    finally:
        channel.close()
        server.stop(None)


def test_unary_path_unknown_on_streaming_server():
    server, channel = _serve(ServiceKind.CLIENT_STREAMING)
    try:
        call = channel.unary_unary(
            METHOD_PATHS[ServiceKind.UNARY],
            request_serializer=HelloRequest.to_bytes,
            response_deserializer=HelloResponse.from_bytes,
        )
        with pytest.raises(grpc.RpcError) as info:
            call(HelloRequest("hi"), timeout=5)
        assert info.value.code() == grpc.StatusCode.UNIMPLEMENTED
    finally:
        channel.close()
        server.stop(None)