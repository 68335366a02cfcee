# subpub

An in-process publish/subscribe event bus, and a small helper that reads a gRPC endpoint address from the environment.

## The event bus (`subpub.bus`)

Each subscriber gets its own bounded queue and its own worker thread. The queue holds 100 messages. Each subscriber receives messages in the order they were published. When a subscriber's queue is full, `publish` waits until there is room in it. Handlers run on the subscriber's thread. An exception raised in a handler is logged through the `subpub.bus` logger, and delivery then goes on.

```python
from subpub.bus import SubPub

bus = SubPub()

sub = bus.subscribe("news", lambda msg: print("got", msg))
bus.publish("news", "hello")

sub.unsubscribe()

# Stops all subscribers and waits for their threads to finish.
# Raises TimeoutError if they are still running after `timeout` seconds.
bus.close(timeout=1.0)
```

- `SubPub.subscribe(subject, handler)` registers `handler`, a callable that takes one message, and returns a `Subscription`.
- `SubPub.publish(subject, msg)` puts `msg` on the queue of every current subscriber of `subject`.
- `Subscription.unsubscribe()` stops delivery to that handler. Messages still waiting in its queue are dropped. Once the bus has been closed, it does nothing.
- `SubPub.close(timeout=None)` marks the bus closed, stops every subscriber, drops the messages they have not yet handled, and waits for their threads to end. With `timeout=None` it waits for as long as that takes. If a handler is still running when the timeout runs out, it raises `TimeoutError`. Calling `close` again waits again for any of those threads that are still running. A call made from inside a handler does not wait for that handler's own thread.

### Errors

Every bus error derives from `SubPubError`.

- `SubPubClosedError`: `subscribe` or `publish` was called after `close`.
- `NotSubscribedError`: `publish` was given a subject that has never had a subscriber. A subject whose subscribers have all unsubscribed does not raise; the message is simply delivered to no one.
- `close` raises the built-in `TimeoutError` when shutdown does not finish within `timeout`.

## Configuration (`subpub.config`)

```python
from subpub.config import load, new_grpc_config

load("local.env")            # raises ConfigError if the file cannot be read
cfg = new_grpc_config()      # reads GRPC_HOST and GRPC_PORT
print(cfg.address())         # "localhost:50051", or "[::1]:50051" for IPv6 hosts
```

- `load(path)` reads a dotenv file into `os.environ`. Variables that are already set keep their values.
- `new_grpc_config()` returns a frozen `GRPCConfig(host, port)`. It raises `ConfigError` when `GRPC_HOST` or `GRPC_PORT` is missing or empty.
- `GRPCConfig.address()` joins host and port as `host:port`. A host that contains `:` is put in square brackets.

## What this package does not do

The bus works only inside a single process. This package has no network server, no network client and no command-line program. `subpub.config` gives you an address string and nothing more; it does not open any connection.

## Running the tests

```
pip install ".[test]"
pytest
```