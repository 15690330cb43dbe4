from sortrace.ticker import ClockTicker, ManualTicker


def test_manual_ticker_fires_only_while_running():
    calls = []
    t = ManualTicker()
    assert t.fire() == 0
    t.start(100, lambda: calls.append(1))
    assert t.running and t.interval_ms == 100
    assert t.fire(3) == 3
    t.stop()
    t.stop()
    assert t.fire() == 0
    assert len(calls) == 3


def test_manual_ticker_callback_can_stop_itself():
    t = ManualTicker()
    calls = []

    def cb():
        calls.append(1)
        if len(calls) == 2: t.stop()

    t.start(10, cb)
    assert t.fire(10) == 2


def test_clock_ticker_waits_for_interval(fake_clock):
    calls = []
    t = ClockTicker(fake_clock)
    t.start(500, lambda: calls.append(fake_clock()))
    assert t.poll() == 0
    fake_clock.advance(0.25)
    assert t.poll() == 0
    fake_clock.advance(0.25)
    assert t.poll() == 1
    assert calls == [0.5]


def test_clock_ticker_catches_up(fake_clock):
    t = ClockTicker(fake_clock)
    t.start(250, lambda: None)
    fake_clock.advance(1.0)
    assert t.poll() == 4
    assert t.poll() == 0


def test_clock_ticker_second_start_ignored(fake_clock):
    first, second = [], []
    t = ClockTicker(fake_clock)
    t.start(250, lambda: first.append(1))
    t.start(250, lambda: second.append(1))
    fake_clock.advance(0.5)
    t.poll()
    assert len(first) == 2 and second == []


def test_clock_ticker_stop_inside_callback(fake_clock):
    t = ClockTicker(fake_clock)
    calls = []

    def cb():
        calls.append(1)
        t.stop()

    t.start(250, cb)
    fake_clock.advance(2.0)
    assert t.poll() == 1
    assert not t.running


def test_clock_ticker_drops_long_backlog(fake_clock):
    t = ClockTicker(fake_clock, max_catchup=3)
    t.start(250, lambda: None)
    fake_clock.advance(60.0)
    assert t.poll() == 3
    assert t.poll() == 0
    fake_clock.advance(0.25)
    assert t.poll() == 1
