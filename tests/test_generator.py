"""
Tests for the no-repeat draw generator.
"""

import pytest

from montyhall.draw.generator import (
    NoRepeatGenerator, ValueNotAvailableError, DrawExhaustedError
)


class TestConstruction:
    """Tests for building the candidate pool."""

    def test_range_is_inclusive(self):
        """Both bounds are candidates."""
        gen = NoRepeatGenerator(1, 5)
        assert gen.remaining == (1, 2, 3, 4, 5)

    def test_explicit_candidates_used_verbatim(self):
        """An explicit list becomes the pool in the given order."""
        gen = NoRepeatGenerator(remaining=[7, 3, 9])
        assert gen.remaining == (7, 3, 9)

    def test_explicit_candidates_not_mutated(self):
        """Drawing does not touch the caller's list."""
        candidates = [4, 5, 6]
        gen = NoRepeatGenerator(remaining=candidates, seed=0)
        gen.draw()
        gen.force_remove(gen.remaining[0])
        assert candidates == [4, 5, 6]

    def test_missing_bounds_rejected(self):
        with pytest.raises(ValueError):
            NoRepeatGenerator(low=1)


class TestDraw:
    """Tests for drawing without replacement."""

    def test_never_repeats(self):
        """N draws return every candidate exactly once."""
        gen = NoRepeatGenerator(0, 49, seed=3)
        drawn = [gen.draw() for _ in range(50)]
        assert sorted(drawn) == list(range(50))
        assert len(gen) == 0

    def test_draw_past_exhaustion_fails(self):
        gen = NoRepeatGenerator(1, 3, seed=1)
        for _ in range(3):
            gen.draw()
        with pytest.raises(DrawExhaustedError):
            gen.draw()

    def test_empty_explicit_pool_fails(self):
        gen = NoRepeatGenerator(remaining=[])
        with pytest.raises(DrawExhaustedError):
            gen.draw()

    def test_same_seed_same_sequence(self):
        """Seeded generators are reproducible."""
        a = NoRepeatGenerator(0, 20, seed=42)
        b = NoRepeatGenerator(0, 20, seed=42)
        assert [a.draw() for _ in range(21)] == [b.draw() for _ in range(21)]

    def test_roughly_uniform_first_draw(self):
        """Each candidate comes first about equally often."""
        import numpy as np

        rng = np.random.default_rng(11)
        counts = [0, 0, 0, 0]
        for _ in range(4000):
            counts[NoRepeatGenerator(0, 3, seed=rng).draw()] += 1
        for c in counts:
            assert 850 < c < 1150


class TestForceRemove:
    """Tests for explicit removal."""

    def test_removal_shrinks_pool(self):
        gen = NoRepeatGenerator(1, 10)
        gen.force_remove(4)
        assert len(gen) == 9
        assert 4 not in gen

    def test_removed_value_never_drawn(self):
        gen = NoRepeatGenerator(1, 10, seed=5)
        gen.force_remove(4)
        drawn = [gen.draw() for _ in range(9)]
        assert 4 not in drawn

    def test_out_of_bounds_fails(self):
        gen = NoRepeatGenerator(1, 3)
        with pytest.raises(ValueNotAvailableError):
            gen.force_remove(0)
        with pytest.raises(ValueNotAvailableError):
            gen.force_remove(4)

    def test_double_removal_fails(self):
        gen = NoRepeatGenerator(1, 3)
        gen.force_remove(2)
        with pytest.raises(ValueNotAvailableError):
            gen.force_remove(2)

    def test_drawn_value_cannot_be_removed(self):
        gen = NoRepeatGenerator(1, 3, seed=0)
        value = gen.draw()
        with pytest.raises(ValueNotAvailableError):
            gen.force_remove(value)

    def test_error_is_value_error(self):
        """Callers catching ValueError also see the removal error."""
        gen = NoRepeatGenerator(1, 3)
        with pytest.raises(ValueError, match="out of bounds"):
            gen.force_remove(99)
