"""Tests for the fixed-capacity particle ring buffer."""

import pytest

from particle_pool import ParticlePool


def make_pool(capacity=5, duration=1.0, effect=-1.0):
    return ParticlePool(capacity, duration, effect)


class TestAdd:

    def test_starts_empty(self):
        pool = make_pool()
        assert pool.is_empty()
        assert len(pool) == 0
        assert pool.capacity == 5

    def test_add_makes_particle_live(self):
        pool = make_pool()
        pool.add(1.0, 2.0, 3.0, 4.0)
        assert len(pool) == 1
        (particle,) = list(pool)
        assert tuple(particle.position) == (1.0, 2.0)
        assert tuple(particle.acceleration) == (-3.0, -4.0)

    def test_live_count_bounded_and_indices_in_range(self):
        pool = make_pool(capacity=7)
        for i in range(50):
            pool.add(float(i), 0.0, 0.0, 0.0)
            assert len(pool) <= pool.capacity
            assert 0 <= pool.first_active < pool.capacity
            assert 0 <= pool.first_free < pool.capacity

    def test_full_pool_keeps_one_slot_free(self):
        pool = make_pool(capacity=5)
        for i in range(4):
            pool.add(float(i), 0.0, 0.0, 0.0)
        assert len(pool) == 4
        assert pool.first_active == 0

    def test_overflow_drops_exactly_the_oldest(self):
        pool = make_pool(capacity=5)
        for i in range(4):
            pool.add(float(i), 0.0, 0.0, 0.0)

        for extra in range(1, 8):
            before = pool.first_active
            pool.add(100.0 + extra, 0.0, 0.0, 0.0)
            assert pool.first_active == (before + 1) % pool.capacity
            assert len(pool) == 4

        xs = [p.position.x for p in pool]
        assert xs == [104.0, 105.0, 106.0, 107.0]

    def test_no_allocation_after_construction(self):
        pool = make_pool(capacity=3)
        slots = list(pool.particles)
        for i in range(10):
            pool.add(float(i), 0.0, 0.0, 0.0)
        assert all(a is b for a, b in zip(slots, pool.particles))
        assert len(pool.particles) == 3


class TestUpdate:

    def test_update_on_empty_pool_is_noop(self):
        pool = make_pool()
        pool.update(0.5)
        assert pool.first_active == pool.first_free == 0

        pool.add(0.0, 0.0, 0.0, 0.0)
        pool.update(2.0)
        assert pool.is_empty()
        index = pool.first_active
        pool.update(2.0)
        assert pool.first_active == pool.first_free == index

    def test_update_advances_live_particles_only(self):
        pool = make_pool(capacity=4)
        pool.add(0.0, 0.0, 1.0, 0.0)
        dead = pool.particles[3]
        pool.update(0.25)
        assert pool.particles[0].age == pytest.approx(0.25)
        assert pool.particles[0].position.x == pytest.approx(0.25)
        assert dead.age == 0.0

    def test_expired_particles_retire(self):
        pool = make_pool(duration=1.0)
        pool.add(0.0, 0.0, 0.0, 0.0)
        pool.update(0.5)
        assert len(pool) == 1
        pool.update(0.5)
        assert pool.is_empty()

    def test_expiry_is_fifo(self):
        """Particles emitted at increasing times leave in emission order."""
        pool = make_pool(capacity=10, duration=1.0)
        retired = []

        def step():
            live_before = [p.position.x for p in pool]
            pool.update(0.3)
            live_after = [p.position.x for p in pool]
            gone = live_before[:len(live_before) - len(live_after)]
            assert live_before[len(gone):] == live_after
            retired.extend(gone)

        for i in range(5):
            pool.add(float(i), 0.0, 0.0, 0.0)
            step()
        while not pool.is_empty():
            step()
        assert retired == [0.0, 1.0, 2.0, 3.0, 4.0]

    def test_wraps_around(self):
        pool = make_pool(capacity=3, duration=1.0)
        for i in range(7):
            pool.add(float(i), 0.0, 0.0, 0.0)
            pool.update(0.6)
        # Every particle expires on its second update, so only the newest is live.
        assert len(pool) == 1
        assert [p.position.x for p in pool] == [6.0]


class TestDraw:

    def test_draws_live_particles_without_changing_state(self, recording_canvas):
        pool = make_pool(capacity=5, duration=2.0)
        pool.add(1.0, 1.0, 0.0, 0.0)
        pool.add(2.0, 2.0, 0.0, 0.0)
        pool.update(1.0)
        indices = (pool.first_active, pool.first_free)

        canvas = recording_canvas
        pool.draw(canvas, (1, 2, 3), 4.0)

        assert [(c[0], c[1]) for c in canvas.circles] == [(1.0, 1.0), (2.0, 2.0)]
        assert all(c[3] == (1, 2, 3) for c in canvas.circles)
        assert all(c[4] == pytest.approx(0.5) for c in canvas.circles)
        assert (pool.first_active, pool.first_free) == indices

    def test_draw_empty_pool(self, recording_canvas):
        canvas = recording_canvas
        make_pool().draw(canvas, (0, 0, 0), 4.0)
        assert canvas.circles == []
