"""Tests for the uniform core: seeding, resets, draws and child streams."""

from __future__ import annotations

import threading
from unittest.mock import patch

import pytest
import variates
from hypothesis import given, settings
from variates import EmptyRangeError, InvalidArgumentError, UniformSource, get_source, set_source
from variates._source import DEFAULT_SEED

from tests.strategies import bounds, seeds


class TestSeeding:
    """Tests for seed() and reset()."""

    def test_default_seed(self) -> None:
        source = UniformSource()
        assert source.seed_value == DEFAULT_SEED == 0

    def test_same_seed_same_sequence(self) -> None:
        first = UniformSource(99)
        second = UniformSource(99)
        assert [first.uniform_float() for _ in range(20)] == [second.uniform_float() for _ in range(20)]

    def test_different_seeds_differ(self) -> None:
        first = UniformSource(1)
        second = UniformSource(2)
        assert [first.uniform_float() for _ in range(5)] != [second.uniform_float() for _ in range(5)]

    def test_reseed_restarts_sequence(self) -> None:
        source = UniformSource(5)
        expected = [source.uniform_int_below(1000) for _ in range(10)]
        source.uniform_float()
        source.seed(5)
        assert [source.uniform_int_below(1000) for _ in range(10)] == expected

    def test_reset_replays_last_seed(self) -> None:
        source = UniformSource(11)
        source.seed(42)
        expected = [source.uniform_float() for _ in range(10)]
        source.reset()
        assert [source.uniform_float() for _ in range(10)] == expected

    def test_reset_without_seed_uses_default(self) -> None:
        source = UniformSource()
        source.uniform_float()
        source.reset()
        assert source.uniform_float() == UniformSource(0).uniform_float()

    def test_seed_none_uses_wall_clock(self) -> None:
        source = UniformSource(1)
        with patch('variates._source.time.time_ns', return_value=123456789):
            source.seed()
        assert source.seed_value == 123456789
        assert source.uniform_float() == UniformSource(123456789).uniform_float()

    def test_wall_clock_seed_can_be_replayed(self) -> None:
        source = UniformSource(None)
        expected = [source.uniform_float() for _ in range(3)]
        source.reset()
        assert [source.uniform_float() for _ in range(3)] == expected

    def test_negative_seed_rejected(self) -> None:
        source = UniformSource(3)
        with pytest.raises(InvalidArgumentError):
            source.seed(-1)
        assert source.seed_value == 3

    def test_state_snapshot_round_trip(self) -> None:
        source = UniformSource(8)
        source.uniform_float()
        state = source.getstate()
        expected = [source.uniform_float() for _ in range(5)]
        source.setstate(state)
        assert [source.uniform_float() for _ in range(5)] == expected

    def test_repr(self) -> None:
        assert repr(UniformSource(17)) == 'UniformSource(seed=17)'


class TestUniformFloat:
    """Tests for uniform_float()."""

    def test_in_half_open_unit_interval(self, rng: UniformSource) -> None:
        for _ in range(10_000):
            value = rng.uniform_float()
            assert isinstance(value, float)
            assert 0.0 <= value < 1.0


class TestUniformIntBelow:
    """Tests for uniform_int_below()."""

    def test_single_value(self, rng: UniformSource) -> None:
        assert all(rng.uniform_int_below(1) == 0 for _ in range(100))

    @pytest.mark.parametrize('n', [0, -1, -100])
    def test_non_positive_rejected(self, rng: UniformSource, n: int) -> None:
        with pytest.raises(EmptyRangeError):
            rng.uniform_int_below(n)

    def test_covers_every_value(self, rng: UniformSource) -> None:
        seen = {rng.uniform_int_below(7) for _ in range(2_000)}
        assert seen == set(range(7))

    @pytest.mark.statistical
    def test_no_modulo_bias(self, rng: UniformSource) -> None:
        # remainder-mapping 64-bit draws onto 3 * 2**61 would put 3/8 of the
        # mass in the low third
        n = 3 * 2**61
        draws = 30_000
        low = sum(rng.uniform_int_below(n) < n // 3 for _ in range(draws))
        assert abs(low / draws - 1 / 3) < 0.02

    @pytest.mark.hypothesis_property
    @given(seed=seeds, n=bounds)
    @settings(max_examples=200)
    def test_always_below_bound(self, seed: int, n: int) -> None:
        source = UniformSource(seed)
        for _ in range(10):
            assert 0 <= source.uniform_int_below(n) < n


class TestProcessWideSource:
    """Tests for the module-level source functions."""

    def test_set_source_returns_previous(self) -> None:
        installed = get_source()
        replacement = UniformSource(1)
        assert set_source(replacement) is installed
        assert get_source() is replacement
        set_source(installed)

    def test_module_seed_and_reset(self) -> None:
        variates.seed(77)
        assert get_source().seed_value == 77
        expected = [variates.random() for _ in range(5)]
        variates.reset()
        assert [variates.random() for _ in range(5)] == expected

    def test_explicit_source_leaves_global_untouched(self, rng: UniformSource) -> None:
        variates.seed(3)
        expected = variates.random()
        variates.seed(3)
        for _ in range(10):
            variates.randint(0, 10, source=rng)
        assert variates.random() == expected


class TestSpawn:
    """Tests for UniformSource.spawn()."""

    def test_children_are_deterministic(self) -> None:
        first = UniformSource(2024).spawn(3)
        second = UniformSource(2024).spawn(3)
        for a, b in zip(first, second, strict=True):
            assert [a.uniform_float() for _ in range(5)] == [b.uniform_float() for _ in range(5)]

    def test_children_independent_of_parent_draws(self) -> None:
        parent = UniformSource(2024)
        before = [child.seed_value for child in parent.spawn(4)]
        parent.uniform_float()
        after = [child.seed_value for child in parent.spawn(4)]
        assert before == after

    def test_children_differ(self) -> None:
        children = UniformSource(5).spawn(8)
        assert len({child.seed_value for child in children}) == 8
        assert all(child.seed_value != 5 for child in children)

    def test_zero_children(self) -> None:
        assert UniformSource(5).spawn(0) == []

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            UniformSource(5).spawn(-1)

    def test_default_count_uses_configured_workers(self) -> None:
        variates.init(seed=1, workers=3)
        assert len(UniformSource(5).spawn()) == 3


class TestThreadSafety:
    """Tests for sharing one source between threads."""

    def test_concurrent_draws_consume_one_sequence(self) -> None:
        shared = UniformSource(31)
        reference = UniformSource(31)
        expected = sorted(reference.uniform_float() for _ in range(4_000))

        results: list[float] = []
        results_lock = threading.Lock()

        def worker() -> None:
            local = [shared.uniform_float() for _ in range(1_000)]
            with results_lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == expected
