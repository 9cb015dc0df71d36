from gravdash.clock import Clock


class FakeTime:
    def __init__(self, start=1000):
        self.now = start

    def __call__(self):
        return self.now


def test_elapsed_counts_from_creation():
    fake = FakeTime()
    clock = Clock(fake)
    fake.now += 250
    assert clock.elapsed() == 250


def test_delta_is_time_between_updates():
    fake = FakeTime()
    clock = Clock(fake)
    fake.now += 16
    clock.update()
    assert clock.delta == 16
    fake.now += 33
    clock.update()
    assert clock.delta == 33


def test_delta_zero_without_time_passing():
    fake = FakeTime()
    clock = Clock(fake)
    clock.update()
    assert clock.delta == 0


def test_speed_scales_delta():
    fake = FakeTime()
    clock = Clock(fake)
    clock.set_speed(0.5)
    fake.now += 40
    clock.update()
    assert clock.delta == 20


def test_default_time_source_is_monotonic():
    clock = Clock()
    first = clock.elapsed()
    assert clock.elapsed() >= first >= 0