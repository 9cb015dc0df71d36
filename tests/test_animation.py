from gravdash.animation import ALWAYS, AnimationHandler


def make_handler():
    return AnimationHandler(num_animations=3, num_frames=4, frame_size=(8, 8))


def test_idle_handler_has_first_frame():
    handler = make_handler()
    assert handler.current is None
    assert (handler.frame_rect.left, handler.frame_rect.top) == (0, 0)
    handler.update(1000)
    assert handler.frame_index == 0


def test_queue_selects_row():
    handler = make_handler()
    handler.queue_animation(2, 100)
    assert handler.frame_rect.top == 2 * handler.frame_rect.width
    assert handler.frame_rect.left == 0
    assert handler.current.index == 2


def test_frames_advance_with_time():
    handler = make_handler()
    handler.queue_animation(1, 100)
    handler.update(99)
    assert handler.frame_index == 0
    handler.update(1)
    assert handler.frame_index == 1
    assert handler.frame_rect.left == handler.frame_rect.height


def test_single_play_finishes():
    handler = make_handler()
    handler.queue_animation(0, 100, loops=0)
    handler.update(4 * 100)
    assert len(handler) == 0
    assert handler.frame_index == 0


def test_hold_delays_start():
    handler = make_handler()
    handler.queue_animation(0, 100, hold=50)
    handler.update(100)
    assert handler.frame_index == 0
    handler.update(50)
    assert handler.frame_index == 1


def test_loops_repeat_before_finishing():
    handler = make_handler()
    handler.queue_animation(0, 10, loops=1)
    handler.update(4 * 10)
    assert len(handler) == 1
    assert handler.current.loops == 0
    handler.update(4 * 10)
    assert len(handler) == 0


def test_always_keeps_looping():
    handler = make_handler()
    handler.queue_animation(1, 10, loops=ALWAYS)
    handler.update(10_000)
    assert len(handler) == 1
    assert handler.current.loops == ALWAYS


def test_next_animation_starts_after_first():
    handler = make_handler()
    handler.queue_animation(0, 10)
    handler.queue_animation(2, 10)
    assert handler.current.index == 0
    handler.update(4 * 10)
    assert handler.current.index == 2
    assert handler.frame_rect.top == 2 * handler.frame_rect.width


def test_clear_empties_queue():
    handler = make_handler()
    handler.queue_animation(0, 10, loops=ALWAYS)
    handler.queue_animation(1, 10)
    handler.clear()
    assert len(handler) == 0
    assert handler.current is None