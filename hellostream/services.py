"""The three ServerReply services and the gRPC server that hosts them."""

from __future__ import annotations

import argparse
import enum
from concurrent import futures
from typing import Iterable, Iterator

import grpc

from hellostream.messages import HelloRequest, HelloResponse


class ServiceKind(enum.Enum):
    """How requests and replies flow for ServerReply."""

    UNARY = "unary"
    SERVER_STREAMING = "server-streaming"
    CLIENT_STREAMING = "client-streaming"


_SERVICE_NAMES = {
    ServiceKind.UNARY: "hello.Emaple",
    ServiceKind.SERVER_STREAMING: "hello.Example",
    ServiceKind.CLIENT_STREAMING: "hello.Example",
}

METHOD_NAME = "ServerReply"

METHOD_PATHS = {
    kind: f"/{service}/{METHOD_NAME}" for kind, service in _SERVICE_NAMES.items()
}

DEFAULT_ADDRESS = "[::]:9000"

SERVER_STREAM_REPLIES = ("Kya hua", "Sorry", "Man jao")


class UnaryService:
    """Answers a single request with a single greeting."""

    def server_reply(self, request: HelloRequest, context) -> HelloResponse:
        print("received reqest from client", request.some_string)
        print("hello from server")
        return HelloResponse(reply="hello ji")


class ServerStreamingService:
    """Answers a single request with a fixed stream of replies."""

    def server_reply(self, request: HelloRequest, context) -> Iterator[HelloResponse]:
        print("received reqest from client", request.some_string)
        print("hello from server")
        for text in SERVER_STREAM_REPLIES:
            yield HelloResponse(reply=text)


class ClientStreamingService:
    """Counts a stream of requests and replies with the count."""

    def server_reply(self, request_iterator: Iterable[HelloRequest], context) -> HelloResponse:
        total = 0
        for request in request_iterator:
            total += 1
            print(request.some_string)
        return HelloResponse(reply=str(total))


def _handler(kind: ServiceKind) -> grpc.RpcMethodHandler:
    codecs = {
        "request_deserializer": HelloRequest.from_bytes,
        "response_serializer": HelloResponse.to_bytes,
    }
    if kind is ServiceKind.UNARY:
        return grpc.unary_unary_rpc_method_handler(UnaryService().server_reply, **codecs)
    if kind is ServiceKind.SERVER_STREAMING:
        return grpc.unary_stream_rpc_method_handler(
            ServerStreamingService().server_reply, **codecs
        )
    return grpc.stream_unary_rpc_method_handler(ClientStreamingService().server_reply, **codecs)


def create_server(kind, address: str = DEFAULT_ADDRESS) -> tuple[grpc.Server, int]:
    """Build an unstarted server for ``kind`` bound to ``address``.

    Returns the server and the port it is bound to.
    """
    kind = ServiceKind(kind)
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=10))
    server.add_generic_rpc_handlers(
        (grpc.method_handlers_generic_handler(_SERVICE_NAMES[kind], {METHOD_NAME: _handler(kind)}),)
    )
    try:
        port = server.add_insecure_port(address)
    except RuntimeError as exc:
        raise OSError(f"failed to listen on {address}: {exc}") from exc
    if port == 0:
        raise OSError(f"failed to listen on {address}")
    return server, port


def main(argv=None) -> int:
    """Serve one kind of ServerReply until terminated."""
    parser = argparse.ArgumentParser(prog="hellostream-server")
    parser.add_argument("kind", choices=[kind.value for kind in ServiceKind])
    parser.add_argument("--address", default=DEFAULT_ADDRESS)
    args = parser.parse_args(argv)
    try:
        server, _ = create_server(args.kind, args.address)
    except OSError as exc:
        parser.exit(1, f"Failed to listen: {exc}\n")
    server.start()
    try:
        server.wait_for_termination()
    except KeyboardInterrupt:
        server.stop(None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())