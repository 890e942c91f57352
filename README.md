# rustdrill

Worked solutions to a set of small Rust exercises, written as plain Python
modules, together with two helpers for working on the exercises themselves:
a generator for a rust-analyzer `rust-project.json` file and a few functions
that print coloured status lines.

## Installing

```
pip install rustdrill
```

The package has no runtime dependencies beyond the standard library.

## The worked solutions

`rustdrill.drills` holds one module per topic:

| Module | What it has |
| --- | --- |
| `conditionals` | `bigger`, `foo_if_fizz`, `animal_habitat` |
| `checks` | `is_even`, `Rectangle` (rejects non-positive sides with `ValueError`) |
| `functions` | `sale_price`, `is_even`, `square` |
| `vectors` | `array_and_vec`, `vec_loop` (doubles in place), `vec_map` |
| `strings` | `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Package` |
| `messages` | `Point`, `ChangeColor`, `Echo`, `Move`, `Quit` and `State.process` |
| `hashmaps` | `fruit_basket`, `Fruit`, `complete_basket`, `Team`, `build_scores_table` |
| `options` | `maybe_icecream` (returns `None` for an invalid hour) |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `CreationError`, `ParsePosNonzeroError`, `parse_pos_nonzero` |
| `traits` | `append_bar` for strings and lists, `Licensed`, `compare_license_types`, `some_func` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` and its errors, `result_with_list`, `list_of_results`, `factorial`, `Progress` and the counting functions |
| `cons_list` | `Nil`, `Cons`, `create_empty_list`, `create_non_empty_list` |
| `concurrency` | `sum_with_offset`, `offset_sums` (one thread per offset) |
| `person` | `Person`, `person_from` (falls back to the default person), `parse_person` (raises a `ParsePersonError` subclass) |
| `colors` | `Color`, `color_from_tuple`, `color_from_slice`, `BadLenError`, `IntConversionError` |
| `quizzes` | `calculate_price_of_apples`, `Command`, `transformer`, `ReportCard` |

Failures are reported with exceptions:

```python
from rustdrill.drills.person import BadLenError, parse_person

parse_person("Mark,20")          # Person(name='Mark', age=20)
try:
    parse_person("Mark,20,extra")
except BadLenError as err:
    print(err)                   # expected exactly two comma separated fields
```

```python
from rustdrill.drills.iterators import NotDivisibleError, divide

divide(81, 9)                    # 9
divide(81, 6)                    # raises NotDivisibleError(81, 6)
```

## rust-analyzer project file

`rustdrill.project.RustAnalyzerProject` collects a crate for every `.rs`
file under a directory and writes them out as `rust-project.json`:

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()        # uses RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

Each crate uses edition 2021 and the `test` cfg, so the language server also
looks inside test blocks. `get_sysroot_src` needs `rustc` on the `PATH` unless
`RUST_SRC_PATH` is set.

## Status lines

`rustdrill.ui.warn(message)` and `rustdrill.ui.success(message)` print a red or
green line with a marker and return it; `rustdrill.ui.bold(text)` returns bold
text. Colour is only added when standard output is a terminal. Setting
`NO_EMOJI` in the environment replaces the emoji markers with `!` and `✓`.

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile, run, test or lint exercise files, keep track of which exercises are
done, watch files for changes, or reset exercises. It only provides the worked
solutions and the helpers described above.

## Running the tests

```
pip install rustdrill[test]
pytest
```