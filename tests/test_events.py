from gridinventory.events import Event


def test_broadcast_passes_arguments():
    received = []
    event = Event()
    event.add(lambda *args: received.append(args))
    event.broadcast("item", 3)
    assert received == [("item", 3)]


def test_handlers_called_in_registration_order():
    order = []
    event = Event()
    event.add(lambda: order.append("first"))
    event.add(lambda: order.append("second"))
    event.broadcast()
    assert order == ["first", "second"]


def test_duplicate_add_is_ignored():
    calls = []

    def handler():
        calls.append(True)

    event = Event()
    event.add(handler)
    event.add(handler)
    event.broadcast()
    assert calls == [True]
    assert len(event) == 1


def test_remove_stops_calls():
    calls = []

    def handler():
        calls.append(True)

    event = Event()
    event.add(handler)
    event.remove(handler)
    event.broadcast()
    assert calls == []
    assert handler not in event


def test_remove_unknown_handler_is_harmless():
    event = Event()
    event.remove(print)
    assert len(event) == 0


def test_handler_may_remove_itself_during_broadcast():
    calls = []
    event = Event()

    def once():
        calls.append("once")
        event.remove(once)

    event.add(once)
    event.add(lambda: calls.append("other"))
    event.broadcast()
    event.broadcast()
    assert calls == ["once", "other", "other"]