"""
가중치 랜덤 선택 유틸리티 테스트
"""
import random

import pytest

from utils.weighted_random import pick_by_draw, weighted_pick

ENTRIES = [("a", 1.0), ("b", 2.0), ("c", 3.0)]


class TestPickByDraw:
    def test_first_entry(self):
        assert pick_by_draw(ENTRIES, 0.0) == "a"
        assert pick_by_draw(ENTRIES, 0.5) == "a"

    def test_tie_resolves_to_reached_entry(self):
        """누적합과 정확히 같으면 다음 항목이 아니라 도달한 항목"""
        assert pick_by_draw(ENTRIES, 1.0) == "a"
        assert pick_by_draw(ENTRIES, 3.0) == "b"

    def test_middle_and_last(self):
        assert pick_by_draw(ENTRIES, 1.5) == "b"
        assert pick_by_draw(ENTRIES, 5.9) == "c"

    def test_exhaustion_falls_back_to_last(self):
        assert pick_by_draw(ENTRIES, 100.0) == "c"

    def test_empty_entries(self):
        with pytest.raises(ValueError):
            pick_by_draw([], 0.0)


class TestWeightedPick:
    def test_draw_scaled_by_total(self):
        class FixedRandom(random.Random):
            def random(self):
                return 0.5

        # 0.5 * 6 = 3.0 → 누적합 3.0에서 b
        assert weighted_pick(ENTRIES, FixedRandom()) == "b"

    def test_zero_weight_entry_never_picked_in_middle(self):
        entries = [("a", 1.0), ("never", 0.0), ("c", 1.0)]
        rng = random.Random(1234)
        picks = {weighted_pick(entries, rng) for _ in range(200)}
        assert "never" not in picks
        assert picks == {"a", "c"}
