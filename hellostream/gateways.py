"""HTTP gateways that forward requests to the ServerReply gRPC services."""

from __future__ import annotations

import argparse
import time

import grpc
from flask import Flask, jsonify

from hellostream.messages import HelloRequest, HelloResponse
from hellostream.services import METHOD_PATHS, ServiceKind

DEFAULT_TARGET = "localhost:9000"
DEFAULT_TIMEOUT = 5.0
SENT_MESSAGE = "message sent succesfully to server"
SERVER_STREAM_REQUEST = "Request ker raha hu"
CLIENT_STREAM_REQUESTS = tuple(f"Request {n}" for n in range(1, 7))

_CODECS = {
    "request_serializer": HelloRequest.to_bytes,
    "response_deserializer": HelloResponse.from_bytes,
}


class _Client:
    def __init__(self, target: str):
        self._channel = grpc.insecure_channel(target)

    def close(self) -> None:
        self._channel.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class UnaryClient(_Client):
    """Sends one message and receives one reply."""

    def __init__(self, target: str = DEFAULT_TARGET):
        super().__init__(target)
        self._call = self._channel.unary_unary(METHOD_PATHS[ServiceKind.UNARY], **_CODECS)

    def send(self, message: str, timeout: float = DEFAULT_TIMEOUT) -> dict:
        response = self._call(HelloRequest(message), timeout=timeout)
        return {"message": f"{SENT_MESSAGE} {message}", "reply": response.reply}

    def close(self) -> None:
        super().close()


class ServerStreamingClient(_Client):
    """Sends one request and counts the streamed replies."""

    def __init__(self, target: str = DEFAULT_TARGET, pause: float = 1.0):
        super().__init__(target)
        self.pause = pause
        self._call = self._channel.unary_stream(
            METHOD_PATHS[ServiceKind.SERVER_STREAMING], **_CODECS
        )

    def send(self, timeout: float = DEFAULT_TIMEOUT) -> dict:
        total = 0
        for response in self._call(HelloRequest(SERVER_STREAM_REQUEST), timeout=timeout):
            print("reply msg: " + response.reply)
            time.sleep(self.pause)
            total += 1
        return {"message": SENT_MESSAGE, "totalReply": total}

    def close(self) -> None:
        super().close()


class ClientStreamingClient(_Client):
    """Streams a fixed batch of requests and receives one reply."""

    def __init__(self, target: str = DEFAULT_TARGET):
        super().__init__(target)
        self._call = self._channel.stream_unary(
            METHOD_PATHS[ServiceKind.CLIENT_STREAMING], **_CODECS
        )

    def send(self, timeout: float = DEFAULT_TIMEOUT) -> dict:
        requests = (HelloRequest(text) for text in CLIENT_STREAM_REQUESTS)
        response = self._call(requests, timeout=timeout)
        return {"message": SENT_MESSAGE, "reply": response.reply}

    def close(self) -> None:
        super().close()


def _error_text(exc: grpc.RpcError) -> str:
    if isinstance(exc, grpc.Call):
        return exc.details() or str(exc.code())
    return str(exc)


def create_app(kind, target: str = DEFAULT_TARGET) -> Flask:
    """Build a Flask app that forwards to the ``kind`` service at ``target``."""
    kind = ServiceKind(kind)
    app = Flask(__name__)

    @app.errorhandler(grpc.RpcError)
    def _rpc_failed(exc):
        return jsonify({"error": _error_text(exc)}), 500

    if kind is ServiceKind.UNARY:
        unary = UnaryClient(target)
        app.extensions["hellostream_client"] = unary

        @app.get("/sent-message-to-Server/<message>")
        def sent_message(message):
            return jsonify(unary.send(message))

    elif kind is ServiceKind.SERVER_STREAMING:
        streaming = ServerStreamingClient(target)
        app.extensions["hellostream_client"] = streaming

        @app.get("/sent")
        def sent_server_stream():
            return jsonify(streaming.send())

    else:
        batching = ClientStreamingClient(target)
        app.extensions["hellostream_client"] = batching

        @app.get("/sent")
        def sent_client_stream():
            return jsonify(batching.send())

    return app


def main(argv=None) -> int:
    """Run the HTTP gateway for one kind of ServerReply."""
    parser = argparse.ArgumentParser(prog="hellostream-gateway")
    parser.add_argument("kind", choices=[kind.value for kind in ServiceKind])
    parser.add_argument("--target", default=DEFAULT_TARGET)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    app = create_app(args.kind, args.target)
    try:
        app.run(host=args.host, port=args.port)
    finally:
        app.extensions["hellostream_client"].close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())