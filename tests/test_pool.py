import math

import pytest

from heartfield.constants import MAX_PARTICLES
from heartfield.particle import AMBIENT, BURST
from heartfield.pool import ParticlePool
from heartfield.spawn_governor import burst_count

WIDTH, HEIGHT = 800, 600


def test_pool_never_exceeds_capacity(rng):
    pool = ParticlePool(rng)
    for _ in range(MAX_PARTICLES + 200):
        pool.spawn(AMBIENT, WIDTH, HEIGHT)
        assert len(pool) <= MAX_PARTICLES
    assert len(pool) == MAX_PARTICLES
    assert pool.evicted == 200


def test_overflow_evicts_oldest_first(rng):
    pool = ParticlePool(rng, capacity=5)
    spawned = [pool.spawn(AMBIENT, WIDTH, HEIGHT) for _ in range(7)]
    assert list(pool) == spawned[2:]


def test_burst_overflow_keeps_newest(rng):
    pool = ParticlePool(rng, capacity=10)
    first = pool.spawn(AMBIENT, WIDTH, HEIGHT)
    pool.burst(100, 100, 1.0, WIDTH, HEIGHT)
    assert len(pool) == 10
    assert first not in list(pool)
    assert all(p.mode == BURST for p in pool)


@pytest.mark.parametrize("dpr", [1.0, 2.0])
def test_ambient_ranges(rng, dpr):
    pool = ParticlePool(rng, dpr=dpr)
    for _ in range(400):
        p = pool.spawn(AMBIENT, WIDTH, HEIGHT)
        assert 0.35 <= p.depth <= 1.0
        assert 5 * dpr * p.depth <= p.size <= 16 * dpr * p.depth
        assert 70 * dpr * p.depth <= p.vy <= 200 * dpr * p.depth
        assert -10 * dpr <= p.vx <= 10 * dpr
        assert 4.0 <= p.lifetime <= 7.0
        assert 0 <= p.x <= WIDTH
        assert -0.18 * HEIGHT <= p.y <= 0
        assert p.age == 0.0
        assert 0 <= p.wobble < 2 * math.pi


def test_burst_ranges_and_cluster(rng):
    pool = ParticlePool(rng, dpr=1.5)
    count = pool.burst(300, 200, 1.0, WIDTH, HEIGHT)
    assert count == burst_count(1.0) == 36
    assert len(pool) == count
    for p in pool:
        assert p.mode == BURST
        assert abs(p.x - 300) <= 8 * 1.5
        assert abs(p.y - 200) <= 8 * 1.5
        assert 1.0 <= p.lifetime <= 2.0
        assert 5 * 1.5 * p.depth <= p.size <= 18 * 1.5 * p.depth
        assert 0.5 * 70 * 1.5 * p.depth <= p.vy <= 0.5 * 200 * 1.5 * p.depth
        assert abs(p.vx) <= (10 + 120) * 1.5


def test_burst_spreads_sideways(rng):
    pool = ParticlePool(rng)
    pool.burst(300, 200, 1.6, WIDTH, HEIGHT)
    assert max(p.vx for p in pool) > 30
    assert min(p.vx for p in pool) < -30


def test_advance_drops_expired(rng):
    pool = ParticlePool(rng)
    pool.spawn(AMBIENT, WIDTH, HEIGHT)
    pool.spawn(AMBIENT, WIDTH, HEIGHT)
    doomed, kept = list(pool)
    doomed.lifetime = 0.5

    def step(particle, dt):
        particle.age += dt

    assert pool.advance(step, 0.25, HEIGHT) == 0
    assert pool.advance(step, 0.25, HEIGHT) == 0
    assert doomed in list(pool)
    assert pool.advance(step, 0.25, HEIGHT) == 1
    assert list(pool) == [kept]


def test_clear_empties_pool(rng):
    pool = ParticlePool(rng)
    pool.spawn(AMBIENT, WIDTH, HEIGHT)
    pool.clear()
    assert len(pool) == 0


def test_advance_drops_hearts_below_the_floor(rng):
    pool = ParticlePool(rng)
    falling = pool.spawn(AMBIENT, 100, 100)
    resting = pool.spawn(AMBIENT, 100, 100)
    falling.y, falling.vy = 125.0, 10.0
    resting.y, resting.vy = 125.0, 0.0

    def step(particle, dt):
        particle.y += particle.vy * dt
        particle.age += dt

    assert pool.advance(step, 0.1, 100) == 1
    assert list(pool) == [resting]
