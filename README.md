# rustlings

Helpers for a set of small Rust learning exercises: coloured status lines for
the terminal, a builder for the `rust-project.json` file that rust-analyzer
reads, and solved versions of the exercises' logic written in Python.

## Installing

```
pip install .
```

The package has no third-party dependencies. Tests need `pytest`
(`pip install .[test]`).

## Terminal output: `rustlings.ui`

- `style(text, color=None, bold=False)` wraps text in ANSI escape codes. The
  colour is one of `black`, `red`, `green`, `yellow`, `blue`, `magenta`,
  `cyan`, `white`; any other name raises `ValueError`.
- `warn(message)` prints a red line with a warning marker.
- `success(message)` prints a green line with a check mark.
- `no_emoji()` is true when `NO_EMOJI` is set in the environment; the markers
  are then plain text (`!` and `✓`) instead of emoji.

## rust-analyzer project file: `rustlings.project`

`RustAnalyzerProject` holds a `sysroot_src` path and a list of `Crate`
entries (edition 2021, no dependencies, `cfg` set to `test`).

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.find_sysroot_src()           # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("exercises")  # one crate per .rs file below the directory
project.write_to_disk("rust-project.json")
```

`add_path(path)` adds a single crate when the path ends in `.rs`, and
`to_json()` returns the compact JSON document.

## Lessons: `rustlings.lessons`

Each module holds the solved logic of one group of exercises:

- `basics`: `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz`,
  `array_and_vec`, `vec_loop`, `vec_map`, `Wrapper`, `Rectangle`
- `pricing`: `calculate_price_of_apples`
- `text_basics`: `current_favorite_color`, `is_a_color_word`, `trim_me`,
  `compose_me`, `replace_me`, `longest`
- `colors`: `Color.from_rgb` and `Color.from_sequence`, raising
  `IntoColorError` with a `ColorErrorKind`
- `errors`: `generate_nametag_text`, `total_cost`, `purchase`,
  `PositiveNonzeroInteger`, `parse_pos_nonzero`, with `CreationError` and
  `ParsePosNonzeroError`
- `messages`: `MessageState.process` driven by `Move`, `Echo`, `ChangeColor`
  and `Quit`
- `commands`: `transformer` applying `Uppercase`, `Trim` and `Append`
- `fruit`: `fruit_basket`, `fill_basket` and the `Fruit` enum
- `scores`: `build_scores_table` returning `Team` entries
- `iteration`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`,
  `factorial`, and counting of `Progress` values
- `report`: `ReportCard.render`
- `icecream`: `maybe_icecream`
- `shipping`: `Package` with `is_international` and `fees`
- `licensing`: `append_bar`, `Licensed`, `compare_license_types`, `some_func`
- `pointers`: the `Cons`/`Nil` list and a clone-on-write `Cow` with `abs_all`

## What this package does not do

There is no command-line program. The package does not read an `info.toml`
exercise list, compile or test exercises with `rustc` or `cargo`, track which
exercises are done, watch files for changes, show hints or reset exercises.