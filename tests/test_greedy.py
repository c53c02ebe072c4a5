import pytest

from algosolve.greedy import Item, can_place_flowers, fractional_knapsack, lemonade_change

SOURCE_ITEMS = [
    Item(10, 2),
    Item(5, 3),
    Item(15, 5),
    Item(7, 7),
    Item(6, 1),
    Item(18, 4),
    Item(3, 1),
]


def test_item_ratio():
    assert Item(10, 4).ratio() == 10 / 4


def test_item_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        Item(5, 0)
    with pytest.raises(ValueError):
        Item(5, -2)


def test_fractional_knapsack_source_example():
    assert fractional_knapsack(SOURCE_ITEMS, 15) == pytest.approx(166 / 3)


def test_fractional_knapsack_does_not_reorder_input():
    items = list(SOURCE_ITEMS)
    fractional_knapsack(items, 15)
    assert items == SOURCE_ITEMS


def test_fractional_knapsack_takes_everything_when_it_fits():
    total_weight = sum(i.weight for i in SOURCE_ITEMS)
    total_profit = sum(i.profit for i in SOURCE_ITEMS)
    assert fractional_knapsack(SOURCE_ITEMS, total_weight) == total_profit
    assert fractional_knapsack(SOURCE_ITEMS, total_weight + 10) == total_profit


def test_fractional_knapsack_zero_capacity():
    assert fractional_knapsack(SOURCE_ITEMS, 0) == 0.0
    assert fractional_knapsack([], 10) == 0.0


def test_fractional_knapsack_single_item_scales_linearly():
    item = Item(12, 6)
    for capacity in range(7):
        assert fractional_knapsack([item], capacity) == pytest.approx(
            capacity * item.ratio()
        )


def test_fractional_knapsack_monotonic_and_bounded():
    results = [fractional_knapsack(SOURCE_ITEMS, c) for c in range(30)]
    assert results == sorted(results)
    assert max(results) <= sum(i.profit for i in SOURCE_ITEMS)


def test_fractional_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        fractional_knapsack(SOURCE_ITEMS, -1)


def test_can_place_flowers_source_example():
    assert can_place_flowers([1, 0, 0, 0, 1], 1)
    assert not can_place_flowers([1, 0, 0, 0, 1], 2)


def test_can_place_flowers_zero_always_fits():
    assert can_place_flowers([1, 1, 1], 0)
    assert can_place_flowers([], 0)


def test_can_place_flowers_monotonic():
    bed = [0, 0, 1, 0, 0, 0, 0, 1, 0]
    answers = [can_place_flowers(bed, n) for n in range(len(bed) + 1)]
    assert answers == sorted(answers, reverse=True)
    assert not answers[-1]


def test_can_place_flowers_does_not_modify_input():
    bed = [0, 0, 0, 0, 0]
    can_place_flowers(bed, 3)
    assert bed == [0, 0, 0, 0, 0]


def test_lemonade_change_with_enough_fives():
    assert lemonade_change([5, 5, 5, 10, 20])


def test_lemonade_change_fails_without_change():
    assert not lemonade_change([5, 5, 10, 10, 20])
    assert not lemonade_change([10])
    assert not lemonade_change([20])


def test_lemonade_change_three_fives_for_twenty():
    assert lemonade_change([5, 5, 5, 20])
    assert not lemonade_change([5, 5, 20])


def test_lemonade_change_only_fives_and_empty():
    assert lemonade_change([5] * 10)
    assert lemonade_change([])