# algosteps

Classic algorithm exercises written as small Python functions with no
dependencies outside the standard library. Every function takes plain Python
values (ints, strings, lists, lists of lists) and returns a new value. Input
sequences are never changed in place.

## Modules

### `algosteps.basics`

- `reverse_number(x)`: reverses the decimal digits and keeps the sign. It
  returns 0 when the result does not fit in a signed 32-bit integer.
- `is_palindrome_number(x)`: a negative number is never a palindrome.
- `is_armstrong(num)`: checks whether a number equals the sum of its digits,
  each raised to the number of digits.
- `is_palindrome_text(s)`: uses only ASCII letters and digits and ignores case.
- `fibonacci(n)`: `fibonacci(0) == 0`. Raises `ValueError` for a negative `n`.
- `max_frequency(nums, k)`: the largest count of equal elements you can reach
  with at most `k` unit increments. Raises `ValueError` for a negative `k`.

### `algosteps.sorting`

`selection_sort`, `bubble_sort`, `insertion_sort` and `merge_sort` each take
any iterable and return a new sorted list. `merge_sort` is stable.

### `algosteps.arrays_easy`

- `largest_element(nums)`
- `second_largest(nums)`: returns the last element that is below the maximum
  and greater than the element before it, or 0 when there is none.
- `is_sorted_rotated(nums)`: checks whether `nums` is a rotation of a
  non-decreasing sequence.
- `remove_duplicates(nums)`: collapses runs of equal adjacent elements.
- `rotate(nums, k)`: rotates right by `k` positions.
- `move_zeros(nums)`
- `linear_search(nums, target)`: raises `ValueError` when `target` is absent.
- `merge_sorted(first, second)`
- `missing_number(nums)`: finds the value in `0..len(nums)` that is missing.
- `single_number(nums)`: the XOR of all elements.
- `subarrays_with_sum(nums, target)`: scans the sorted values and collects the
  windows that sum to `target`.

`largest_element`, `second_largest` and `rotate` raise `ValueError` on an
empty sequence.

### `algosteps.arrays_mid`

- `two_sum(nums, target)`: returns `[i, j]`, or `[]` when no pair sums to
  `target`.
- `sort_colors(nums)`
- `majority_element(nums)`: the most frequent value. On a tie the smallest
  value wins.
- `max_subarray_sum(nums)`
- `max_profit(prices)`
- `alternate_signs(nums)`: interleaves positive and non-positive values,
  starting with a positive one.
- `next_permutation(nums)`: after the last permutation it wraps round to the
  smallest.
- `leaders(nums)`: elements strictly greater than everything to their right.
- `longest_consecutive(nums)`
- `set_zeroes(matrix)`
- `rotate_matrix(matrix)`: rotates a quarter turn clockwise.
- `spiral_order(matrix)`
- `count_subarrays_with_sum(nums, k)`

### `algosteps.arrays_hard`

- `pascal_row(n)` and `pascal_triangle(num_rows)`
- `majority_third(nums)`: elements that occur more than `len(nums) // 3`
  times, listed in the order they cross that threshold.
- `three_sum(nums)`: distinct sorted triplets that sum to zero, as tuples.
- `max_product(nums)`: the largest product of a contiguous subarray.

### `algosteps.searching`

- `binary_search(nums, target)`: raises `ValueError` when `target` is absent.
- `lower_bound`, `upper_bound`, `search_insert`, `count_occurrences`
- `search_rotated(nums, target)`: returns the index of `target`, or -1 when it
  is absent.
- `contains_rotated(nums, target)`: the sequence may contain repeated values.
- `find_min_rotated(nums)` and `find_rotation_index(nums)`
- `single_non_duplicate(nums)`
- `floor_sqrt(n)`
- `nth_root(n, m)`: returns the integer `r` with `r ** m == n`, or -1 when
  there is none.

## Usage

```python
from algosteps.basics import reverse_number, is_palindrome_text
from algosteps.sorting import merge_sort
from algosteps.arrays_mid import spiral_order
from algosteps.searching import lower_bound

reverse_number(2314)                                  # 4132
is_palindrome_text("A man, a plan, a canal: Panama")  # True
merge_sort([1, 2, 9, 5, 4, 6, 3])                     # [1, 2, 3, 4, 5, 6, 9]
spiral_order([[1, 2], [3, 4]])                        # [1, 2, 4, 3]
lower_bound([0, 1, 6, 6, 6], 6)                       # 2
```

## What it does not do

This is a library only. It has no command-line program, and it does not read
numbers from standard input. Call the functions from your own code.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```