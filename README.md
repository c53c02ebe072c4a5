# algosolve

A small collection of classic algorithm solutions, written as plain Python functions. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `algosolve.backtracking`

- `combination_sum(nums, target)` returns every combination of numbers from `nums` that sums to `target`. Each number may be used any number of times. The combinations come in search order: each number is taken as many times as possible before the search moves on to the next number. It raises `ValueError` if any number is zero or negative.
- `generate_parentheses(n)` returns every well-formed string made from `n` pairs of parentheses.
- `subsets(nums)` returns every subset of `nums` as a list of lists. Subsets that include an element come before the subsets that leave it out.
- `knapsack_max_value(values, weights, capacity)` returns the best total value for the 0/1 knapsack problem, found by exhaustive search. It raises `ValueError` if `values` and `weights` differ in length.

```python
from algosolve.backtracking import combination_sum, generate_parentheses, subsets

combination_sum([2, 3, 6, 7], 7)   # [[2, 2, 3], [7]]
generate_parentheses(2)            # ['(())', '()()']
subsets([1, 2])                    # [[1, 2], [1], [2], []]
```

### `algosolve.dynamic`

- `knapsack(profits, weights, capacity)` returns the best total profit for the 0/1 knapsack problem, computed with a dynamic-programming table. It raises `ValueError` if the lists differ in length, if the capacity is negative, or if any weight is negative.

```python
from algosolve.dynamic import knapsack

knapsack([1, 2, 5, 6], [2, 3, 4, 5], 8)   # 8
```

### `algosolve.greedy`

- `Item(profit, weight)` is an immutable item. Its weight must be positive, or `ValueError` is raised. `Item.ratio()` gives its profit per unit of weight.
- `fractional_knapsack(items, capacity)` returns the best total profit, as a float, when items may be split. Items are taken in order of falling ratio, and ties go to the item with the higher profit. It raises `ValueError` if the capacity is negative.
- `can_place_flowers(flowerbed, n)` tells whether `n` more flowers fit into a flowerbed of zeros and ones without any two flowers being next to each other.
- `lemonade_change(bills)` tells whether a lemonade stand can give every customer correct change, serving them in order. Lemonade costs 5. A bill of 5 or 10 is taken at its value, and any other bill is treated as 20.

```python
from algosolve.greedy import Item, fractional_knapsack, can_place_flowers, lemonade_change

fractional_knapsack([Item(10, 2), Item(5, 3), Item(15, 5)], 6)   # 22.0
can_place_flowers([1, 0, 0, 0, 1], 1)                            # True
lemonade_change([5, 5, 10, 20])                                  # True
```

## What it does not do

The package is a library only. It has no command-line tool, and it prints nothing: every function returns its answer to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```