import zmq

from bcprotocol.context import Context


def test_started_by_default():
    context = Context()
    assert context
    assert isinstance(context.handle, zmq.Context)
    assert context.stop()


def test_not_started():
    context = Context(False)
    assert not context
    assert context.handle is None


def test_start_twice_fails_second_time():
    context = Context(False)
    assert context.start()
    assert not context.start()
    assert context.stop()


def test_stop_clears_handle():
    context = Context()
    assert context.stop()
    assert not context
    assert context.handle is None


def test_stop_when_stopped_succeeds():
    context = Context(False)
    assert context.stop()
    assert context.stop()


def test_restart_after_stop():
    context = Context()
    first = context.handle
    assert context.stop()
    assert context.start()
    assert context
    assert context.handle is not first
    assert context.stop()


def test_stop_after_socket_closed():
    context = Context()
    sock = context.handle.socket(zmq.PAIR)
    sock.close()
    assert context.stop()
    assert not context


def test_context_manager_stops_on_exit():
    with Context() as context:
        assert context
    assert not context
    assert context.handle is None