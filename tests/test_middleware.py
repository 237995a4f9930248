import pytest

from stoutcall.middleware import chain


class SentinelError(Exception):
    pass


def _tracing(name, trace):
    def mw(nxt):
        def wrapped(*args, **kwargs):
            trace.append(f"{name}-before")
            result = nxt(*args, **kwargs)
            trace.append(f"{name}-after")
            return result

        return wrapped

    return mw


def _prefix(p):
    def mw(nxt):
        return lambda *a, **kw: p + nxt(*a, **kw)

    return mw


def test_single_middleware_wraps_correctly():
    def mw(nxt):
        return lambda: "wrapped(" + nxt() + ")"

    fn = chain(mw)(lambda: "hello")
    assert fn() == "wrapped(hello)"


def test_multiple_middlewares_execute_in_order():
    trace = []

    def handler():
        trace.append("handler")
        return "done"

    fn = chain(_tracing("mw1", trace), _tracing("mw2", trace), _tracing("mw3", trace))(handler)

    assert fn() == "done"
    assert trace == [
        "mw1-before",
        "mw2-before",
        "mw3-before",
        "handler",
        "mw3-after",
        "mw2-after",
        "mw1-after",
    ]


def test_empty_chain_passes_through():
    fn = chain()(lambda: "passthrough")
    assert fn() == "passthrough"


def test_error_propagates_through_chain():
    sentinel = SentinelError("sentinel error")

    def failing():
        raise sentinel

    fn = chain(lambda nxt: lambda: nxt())(failing)
    with pytest.raises(SentinelError) as info:
        fn()
    assert info.value is sentinel


def test_middleware_error_propagates():
    mw_error = SentinelError("middleware error")

    def mw(_nxt):
        def wrapped():
            raise mw_error

        return wrapped

    fn = chain(mw)(lambda: "should-not-reach")
    with pytest.raises(SentinelError) as info:
        fn()
    assert info.value is mw_error


def test_result_values_preserved():
    fn = chain(lambda nxt: lambda: nxt() * 2)(lambda: 21)
    assert fn() == 42


def test_multiple_middlewares_transform_result():
    fn = chain(_prefix("a-"), _prefix("b-"), _prefix("c-"))(lambda: "end")
    assert fn() == "a-b-c-end"


def test_empty_chain_preserves_error():
    sentinel = SentinelError("pass-through error")

    def failing():
        raise sentinel

    fn = chain()(failing)
    with pytest.raises(SentinelError) as info:
        fn()
    assert info.value is sentinel


def test_arguments_propagate_through_chain():
    def inject(nxt):
        return lambda **kw: nxt(**{**kw, "key": "injected"})

    fn = chain(inject)(lambda **kw: kw.get("key", ""))
    assert fn() == "injected"


def test_middleware_can_short_circuit():
    called = []

    def handler():
        called.append(True)
        return "handler"

    fn = chain(lambda _nxt: lambda: "short-circuited")(handler)
    assert fn() == "short-circuited"
    assert called == []


def test_chain_is_reusable():
    trace = []

    def mw(nxt):
        def wrapped():
            trace.append("mw")
            return nxt()

        return wrapped

    composed = chain(mw)
    fn1 = composed(lambda: "fn1")
    fn2 = composed(lambda: "fn2")

    assert fn1() == "fn1"
    assert fn2() == "fn2"
    assert trace == ["mw", "mw"]


def test_error_intercepted_by_middleware():
    def recover(nxt):
        def wrapped():
            try:
                return nxt()
            except Exception:
                return "recovered"

        return wrapped

    def failing():
        raise RuntimeError("boom")

    fn = chain(recover)(failing)
    assert fn() == "recovered"


def test_outer_inner_example_order():
    trace = []

    def handler():
        trace.append("handler")
        return "result"

    fn = chain(_tracing("outer", trace), _tracing("inner", trace))(handler)
    assert fn() == "result"
    assert trace == [
        "outer-before",
        "inner-before",
        "handler",
        "inner-after",
        "outer-after",
    ]


def test_chained_middleware_uppercases():
    def upper(nxt):
        return lambda: nxt().upper()

    fn = chain(upper)(lambda: "hello world")
    assert fn() == "HELLO WORLD"