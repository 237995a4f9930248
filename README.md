# stoutcall

Building blocks for calls to unreliable dependencies:

- lifecycle hooks for observability,
- middleware that composes in a fixed priority order,
- hedged asynchronous requests,
- policies that report their health and the health of the policies they
  depend on,
- a size-bounded cache with a time-to-live for each entry.

## Hooks — `stoutcall.hooks`

`Hooks` is a frozen dataclass of optional callbacks, all `None` by default:

- `on_retry(attempt, err)`
- `on_circuit_open()`, `on_circuit_close()`, `on_circuit_half_open()`
- `on_rate_limited()`
- `on_bulkhead_full()`, `on_bulkhead_acquired()`, `on_bulkhead_released()`
- `on_timeout()`
- `on_hedge_triggered()`, `on_hedge_won()`
- `on_fallback_used(err)`

Each has a matching `emit_*` method, for example `emit_retry(attempt, err)`,
`emit_hedge_won()` or `emit_fallback_used(err)`. An `emit_*` method calls its
callback when one is set and does nothing otherwise. Because instances are
immutable, one `Hooks` can be shared between threads.

```python
from stoutcall.hooks import Hooks

hooks = Hooks(on_retry=lambda attempt, err: print("retry", attempt, err))
hooks.emit_retry(2, RuntimeError("boom"))
hooks.emit_timeout()  # no callback set: ignored
```

## Middleware — `stoutcall.middleware`

A middleware is a callable that takes the next callable and returns a
wrapped one. `chain(*middlewares)` composes them so that the first is the
outermost: `chain(a, b, c)(fn)` is `a(b(c(fn)))`. `chain()` with no
arguments returns `fn` unchanged. Exceptions raised by `fn` propagate
unless a middleware handles them, and a middleware may short-circuit by
never calling the next callable.

```python
from stoutcall.middleware import chain

def prefix(p):
    def middleware(nxt):
        return lambda: p + nxt()
    return middleware

wrapped = chain(prefix("a-"), prefix("b-"))(lambda: "end")
assert wrapped() == "a-b-end"
```

## Ordering — `stoutcall.order`

`Priority` is an `IntEnum` placing each kind of pattern in the chain; lower
values wrap further out:

| Priority | Value |
|---|---|
| `FALLBACK` | 0 |
| `TIMEOUT` | 1 |
| `CIRCUIT_BREAKER` | 2 |
| `RATE_LIMITER` | 3 |
| `BULKHEAD` | 4 |
| `RETRY` | 5 |
| `HEDGE` | 6 |

`PatternEntry(middleware, name, priority)` pairs a middleware with its name
and priority. `sort_patterns(entries)` returns a list of the middlewares
ordered by priority, lowest first, ready to pass to `chain`. The sort is
stable, so entries with equal priority keep their order, and the input is
not modified.

## Hedged requests — `stoutcall.hedge`

`await do_hedge(fn, delay, hooks=None)` runs the zero-argument coroutine
function `fn`. If that attempt has not finished after `delay` seconds, it
calls `hooks.emit_hedge_triggered()` and starts a second attempt alongside
the first.

- If the first attempt finishes before the delay, its result is returned or
  its exception raised, and no second attempt is made.
- After hedging, the first attempt to succeed wins and the other is
  cancelled. When the second attempt is the winner, `hooks.emit_hedge_won()`
  is called.
- If both attempts fail, the exception of the one that finished first is
  raised.
- Cancelling the awaiting task cancels any attempt still running.

```python
import asyncio
from stoutcall.hedge import do_hedge

async def fetch():
    await asyncio.sleep(0.01)
    return "data"

print(asyncio.run(do_hedge(fetch, delay=0.5)))
```

## Health — `stoutcall.health`

`Policy(name, *entries, circuit_breaker=None, rate_limiter=None,
bulkhead=None, depends_on=())` takes `PatternEntry` objects (anything else
raises `TypeError`) and chains their middlewares in priority order.
`await policy.call(fn)` runs `fn` with no arguments through that chain; if
the outcome is awaitable it is awaited.

The `circuit_breaker`, `rate_limiter` and `bulkhead` arguments are used only
for health reporting. They are any objects exposing, respectively, a
`state` string (`"closed"`, `"open"` or `"half_open"`), a `saturated`
boolean and a `full` boolean.

`policy.health_status()` returns a `PolicyStatus` with `name`, `state`,
`criticality`, `healthy` and `dependencies`. The rules are:

- With nothing abnormal, the policy is healthy with state `"healthy"` and
  criticality `NONE`.
- An open circuit breaker makes it unhealthy, with state `"circuit_open"`
  and criticality `CRITICAL`.
- A half-open breaker keeps it healthy, with state `"circuit_half_open"`.
- A saturated rate limiter raises criticality to at least `DEGRADED`. When
  the policy is healthy, the state becomes `"rate_limited"`.
- A full bulkhead raises criticality to at least `DEGRADED`. When the state
  is still `"healthy"`, it becomes `"bulkhead_full"`.
- Each dependency's status is included in `dependencies`. A dependency that
  is unhealthy and `CRITICAL` raises this policy's criticality to at least
  `DEGRADED`.

`Criticality` is an `IntEnum` (`NONE`, `DEGRADED`, `CRITICAL`) whose `str()`
is `"none"`, `"degraded"` or `"critical"`. Unknown integer values map to
`NONE`. `HealthReporter` is a runtime-checkable protocol: anything with a
`name` and a `health_status()` method can be given to `depends_on`.

## Cache — `stoutcall.cache`

`VariableTTLCache(max_size)` is a thread-safe, least-recently-used cache in
which each entry has its own time-to-live. A `max_size` that is not
positive raises `ValueError`.

- `set(key, value, ttl)` stores or overwrites a value for `ttl` seconds.
- `get(key, default=None)` returns the value, or `default` if the key is
  missing or expired.
- `delete(key)` removes the key if it is present.

## What is not included

The package orders and composes middlewares but does not provide the
patterns themselves. There is no timeout, retry, circuit breaker, rate
limiter, bulkhead or fallback implementation here; supply your own as
middlewares wrapped in `PatternEntry`. `Policy` only reads the state of
such components for health reporting. There are no ready-made option
presets, no HTTP client adapter and no command-line tool.

## Running the tests

The tests use pytest and pytest-asyncio, listed under the `test` extra:

```
pip install -e ".[test]"
pytest
```