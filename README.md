# hellostream

A small gRPC "hello" service offered in three call styles, together with an
HTTP gateway for each style that forwards HTTP requests to the gRPC server
and reports the result as JSON.

The three styles, named by `ServiceKind`, are:

- **`unary`**: one request, one reply. The server prints the text it received
  and answers `"hello ji"`.
- **`server-streaming`**: one request, a stream of replies. The server answers
  with three messages in turn: `"Kya hua"`, `"Sorry"`, `"Man jao"`.
- **`client-streaming`**: a stream of requests, one reply. The server prints
  each text it receives and, once the stream ends, replies with the number of
  messages it counted, as text.

Messages are `HelloRequest` (field `some_string`) and `HelloResponse`
(field `reply`), each holding a single text field in protobuf wire form.

## Installation

```
pip install .
```

## Running

Start a gRPC server for one call style:

```
hellostream-server unary
hellostream-server server-streaming --address "[::]:9000"
```

The server listens on `[::]:9000` unless `--address` says otherwise, and runs
until interrupted. If it cannot bind, it exits with status 1 and a
`Failed to listen` message.

Start the matching HTTP gateway:

```
hellostream-gateway unary
hellostream-gateway client-streaming --target localhost:9000 --host 0.0.0.0 --port 8080
```

By default the gateway serves on `0.0.0.0:8080` and talks to the gRPC server
at `localhost:9000`. Pick the same call style for the server and the gateway.

### Gateway endpoints

- `unary`: `GET /sent-message-to-Server/<message>` sends `<message>` and
  returns `{"message": "message sent succesfully to server <message>",
  "reply": ...}`.
- `server-streaming`: `GET /sent` sends the fixed request `Request ker raha hu`,
  reads every reply (printing each one and pausing a second between them)
  and returns `{"message": ..., "totalReply": <count>}`.
- `client-streaming`: `GET /sent` streams six requests, `Request 1` to
  `Request 6`, and returns `{"message": ..., "reply": <server's count>}`.

Each call has a five-second deadline. If the gRPC call fails, the gateway
answers with status 500 and a JSON body `{"error": <details>}`.

## Using it from Python

```python
from hellostream.services import ServiceKind, create_server
from hellostream.gateways import UnaryClient, create_app
from hellostream.messages import HelloRequest, HelloResponse

server, port = create_server(ServiceKind.UNARY, "localhost:0")
server.start()
with UnaryClient(f"localhost:{port}") as client:
    print(client.send("hi"))   # {'message': '... hi', 'reply': 'hello ji'}
server.stop(None)
```

- `hellostream.services`
  - `create_server(kind, address)` builds an unstarted `grpc.Server` for a
    `ServiceKind` (or its string value) bound to `address`, and returns it
    with the bound port. It raises `OSError` if the address cannot be bound.
  - `UnaryService`, `ServerStreamingService` and `ClientStreamingService`
    hold the `server_reply` handlers the server uses.
  - `main(argv=None)` is the `hellostream-server` command.
- `hellostream.gateways`
  - `UnaryClient(target)`, `ServerStreamingClient(target, pause)` and
    `ClientStreamingClient(target)` make the gRPC calls through `send(...)`,
    which returns the same dictionary the gateway sends as JSON. Each takes an
    optional `timeout` (default 5 seconds), raises `grpc.RpcError` on failure,
    and closes its channel with `close()` or as a context manager.
    `pause` is the delay after each streamed reply (default 1 second).
  - `create_app(kind, target)` builds the Flask gateway application for a
    `ServiceKind`, talking to the gRPC server at `target`.
  - `main(argv=None)` is the `hellostream-gateway` command.
- `hellostream.messages`
  - `HelloRequest` and `HelloResponse` are frozen dataclasses that convert to
    and from their wire form with `to_bytes()` and `from_bytes(data)`.
    Unknown fields are skipped; malformed input raises `MessageDecodeError`
    (a `ValueError`).

## What it does not do

- No `.proto` file is shipped and the server does not offer gRPC server
  reflection, so tools such as `grpcurl` need the message layout given to
  them: service `hello.Emaple` (unary) or `hello.Example` (streaming),
  method `ServerReply`, each message a single string in field 1.
- Connections are plaintext only; there is no TLS or authentication.

## Tests

```
pip install .[test]
pytest
```