# codedrills

Small, self-contained programming exercises written as plain Python
functions. Each one returns its result; none of them prints anything or
reads input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `codedrills.linked_list` | `LinkedList`: a singly linked list built from an iterable, with `append`, `remove` (raises `ValueError` when the value is absent), iteration and `len` |
| `codedrills.sorting` | `exchange_sort` (with `reverse`), `bubble_sort`, `insertion_sort`, `merge_sort`, `alternative_sort`, `frequency_sort`, `odd_even_place_sort`, `split_odd_even`, `reverse_in_groups` |
| `codedrills.combinatorics` | Generators: `permutations`, `string_permutations`, `decode_number_words`, `subset_sums` |
| `codedrills.grids` | `find_path`, `flood_fill`, `multiply_matrices`, `set_matrix_zeros`, `transpose`, `unique_paths_with_obstacles`, `word_exists` |
| `codedrills.patterns` | Text patterns returned as lists of lines: `binary_triangle`, `toggled_binary_triangle`, `butterfly`, `star_butterfly`, `hourglass`, `letter_triangle`, `hollow_diamond`, `number_rhombus`, `concentric_square`, `pascal_triangle`, `inverted_right_triangle`, `right_triangle`, `pyramid`, `reverse_pyramid`, `x_pattern`, `middle_out`, `padded_char`; number grids returned as lists of lists: `snake_grid`, `spiral_matrix`; and `pascal_row` |
| `codedrills.expressions` | `infix_to_postfix`, `compact_postfix`, `evaluate_postfix`, `calculate`, `count_valid_pairs`, `min_insertions`, `remove_unbalanced` |
| `codedrills.arrays` | `missing_numbers`, `daily_temperatures`, `equilibrium_index`, `next_greatest`, `longest_harmonious_subsequence`, `sliding_window_max`, `move_zeros`, `merge_adjacent`, `unique_elements` |
| `codedrills.dynamic` | `rob`, `rob_circular`, `min_book_cost` |
| `codedrills.strings` | `split_words`, `first_occurrence_span`, `expand_runs`, `letter_frequencies`, `reverse_alphanumeric`, `longest_palindrome`, `is_palindrome`, `remove_duplicate_letters`, `remove_palindrome_words`, `reverse_words`, `replace_duplicates`, `column_number` |
| `codedrills.numbers` | `count_eleven_ten_one`, `digital_root`, `is_kaprekar`, `kaprekar_numbers`, `count_digits`, `digits`, `first_last_digit_sum`, `swap_first_last_digits`, `first_n_primes`, `number_to_words`, `look_and_say`, `max_concatenation`, `greedy_concatenation` |

Invalid input raises the usual Python exceptions. For example, negative
numbers passed to the digit functions raise `ValueError`, an unbalanced
parenthesis in `compact_postfix` raises `ValueError`, and division by zero in
`evaluate_postfix` raises `ZeroDivisionError`.

## Examples

```python
from codedrills.sorting import alternative_sort
from codedrills.expressions import calculate, infix_to_postfix
from codedrills.numbers import number_to_words
from codedrills.patterns import pyramid

alternative_sort([1, 334, 34, 45, 56])   # [334, 1, 56, 34, 45]
infix_to_postfix("3*4+3")                # ['3', '4', '*', '3', '+']
calculate("3*4+3")                       # 15
number_to_words(1234)                    # 'One Thousand Two Hundred Thirty Four'
print("\n".join(pyramid(3)))
```

## What it does not do

The package is a library only. It has no command-line program and no
interactive prompts; to see a pattern or a result, call the function and
print what it returns.