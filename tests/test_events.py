from gravdash.events import Event, EventQueue, EventType


def test_poll_returns_pushed_event():
    queue = EventQueue()
    queue.push(Event(EventType.PUSH_MENU, value=3))
    event = queue.poll()
    assert event.type is EventType.PUSH_MENU
    assert event.value == 3


def test_poll_empty_returns_none():
    assert EventQueue().poll() is None


def test_events_come_out_in_order():
    queue = EventQueue()
    queue.push(Event(EventType.PAUSE))
    queue.push(Event(EventType.RESUME))
    queue.push(EventType.GAME_EXIT)
    assert [queue.poll().type for _ in range(3)] == [
        EventType.PAUSE,
        EventType.RESUME,
        EventType.GAME_EXIT,
    ]
    assert queue.poll() is None


def test_bare_type_has_default_data():
    queue = EventQueue()
    queue.push(EventType.UPDATE_WINDOW)
    event = queue.poll()
    assert event == Event(EventType.UPDATE_WINDOW)


def test_push_stores_a_copy():
    queue = EventQueue()
    original = Event(EventType.UPDATE_SETTINGS, value=1, setting=2)
    queue.push(original)
    original.value = 7
    assert queue.poll().value == 1


def test_len_and_clear():
    queue = EventQueue()
    queue.push(EventType.PAUSE)
    queue.push(EventType.PAUSE)
    assert len(queue) == 2
    queue.clear()
    assert len(queue) == 0
    assert queue.poll() is None