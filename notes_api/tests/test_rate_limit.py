from __future__ import annotations

from notes_api.shared.middleware.rate_limit import InMemoryRateLimiter


class TickingClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_limit_applies_per_key() -> None:
    limiter = InMemoryRateLimiter(2, 60, clock=TickingClock())

    assert [limiter.allow("a") for _ in range(3)] == [True, True, False]
    assert limiter.allow("b") is True


def test_window_expiry_frees_the_key() -> None:
    clock = TickingClock()
    limiter = InMemoryRateLimiter(1, 10, clock=clock)

    assert limiter.allow("a") is True
    assert limiter.allow("a") is False
    clock.now += 11
    assert limiter.allow("a") is True


def test_idle_buckets_are_swept() -> None:
    clock = TickingClock()
    limiter = InMemoryRateLimiter(2, 10, clock=clock)
    for i in range(50):
        limiter.allow(f"10.0.0.{i}")
    assert len(limiter) == 50

    clock.now += 11
    limiter.allow("10.0.1.1")

    assert len(limiter) == 1
