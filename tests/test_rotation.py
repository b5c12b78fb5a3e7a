"""Tests for round-robin assignment."""

import pytest

from scheduling.rotation import assign_round_robin


class TestAssignRoundRobin:
    """Tests for assign_round_robin."""

    def test_remainder_goes_to_first_apartments(self) -> None:
        result = assign_round_robin([301, 302, 201, 202], ["d1", "d2", "d3", "d4", "d5"])

        assert result == {301: ["d1", "d5"], 302: ["d2"], 201: ["d3"], 202: ["d4"]}

    def test_preserves_input_order(self) -> None:
        result = assign_round_robin([202, 101, 301], ["d1"])
        assert list(result) == [202, 101, 301]

    def test_more_apartments_than_dates(self) -> None:
        result = assign_round_robin([101, 102, 103, 104, 105], ["d1", "d2"])

        assert result == {101: ["d1"], 102: ["d2"], 103: [], 104: [], 105: []}

    def test_no_dates(self) -> None:
        assert assign_round_robin([301], []) == {301: []}

    def test_no_apartments(self) -> None:
        assert assign_round_robin([], ["d1", "d2"]) == {}

    def test_is_deterministic(self) -> None:
        dates = [f"d{i}" for i in range(11)]
        assert assign_round_robin([1, 2, 3], dates) == assign_round_robin([1, 2, 3], dates)

    @pytest.mark.parametrize("n_apartments,n_dates", [(1, 0), (1, 7), (3, 10), (4, 4), (6, 52), (7, 3)])
    def test_fairness_bound(self, n_apartments, n_dates) -> None:
        apartments = list(range(100, 100 + n_apartments))
        dates = [f"d{i}" for i in range(n_dates)]

        result = assign_round_robin(apartments, dates)

        low, remainder = divmod(n_dates, n_apartments)
        assert sum(len(v) for v in result.values()) == n_dates
        for index, apartment in enumerate(apartments):
            expected = low + 1 if index < remainder else low
            assert len(result[apartment]) == expected

    def test_dates_are_partitioned(self) -> None:
        dates = [f"d{i}" for i in range(9)]
        result = assign_round_robin(["A", "B"], dates)

        assigned = [d for values in result.values() for d in values]
        assert sorted(assigned) == sorted(dates)
        assert len(set(assigned)) == len(dates)
