# dxdemos

The state and data logic behind a handful of small interactive apps, as plain
Python objects you can drive from your own interface, scripts or tests.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `dxdemos.calculator`
  - `calc_val(val)` evaluates a flat expression such as `"12+3*2"` strictly
    left to right, with no operator precedence. A leading `-` belongs to the
    first operand. A malformed or empty expression raises `ValueError`;
    division by zero gives `inf`, `-inf` or `NaN`.
  - `ExpressionPad` keeps the display as an expression string (starting at
    `"0"`). It has `input_digit`, `input_operator`, `backspace`, `clear`,
    `clear_label` (`"C"` when empty, otherwise `"AC"`), `display`,
    `toggle_sign`, `percent`, `evaluate` and `handle_key`, which accepts
    `"Backspace"`, an operator or a digit and ignores any other key.
- `dxdemos.calculator_mutable`
  - `Calculator`, an operand/operator calculator with `display_value`,
    `operator`, `waiting_for_operand` and `cur_val`. Operations are
    `input_digit`, `input_dot`, `set_operator`, `perform_operation`,
    `toggle_sign`, `toggle_percent`, `backspace`, `clear_display`,
    `formatted_display` and `handle_key` (operator keys there only select the
    pending `Operator`).
  - `Operator` (`ADD`, `SUB`, `MUL`, `DIV`).
  - `separated_string(value)` formats a number with commas between thousands.
- `dxdemos.clock`: `format_elapsed(millis)` turns elapsed milliseconds into
  `MM:SS:mmm`, wrapping minutes every hour.
- `dxdemos.theme`: the `Theme` enum (`LIGHT`, `DARK`) with `stylesheet()`
  giving its CSS class; `ContextScope`, which stores one value per exact type
  via `provide` and finds the nearest one up its parent chain via `consume`;
  and `use_theme_context(scope)`, which raises `LookupError` when no theme is
  in reach.
- `dxdemos.shop`: store records `Product`, `Rating` (whose `str()` renders
  stars, the rate and the rating count), `User`, `FullName`, `Cart` and
  `ProductInCart`, each with `from_dict` validating a decoded JSON object
  (`ValueError` on missing or mistyped fields); the `Sort` and `Size` enums
  (`Size.parse` ignores case); and `StoreClient`, a `requests`-based client
  with `fetch_products`, `fetch_product`, `fetch_user`, `fetch_user_carts`,
  `most_recent_cart`, `update_cart` and `product_for`. The base URL, session
  and timeout can be passed to its constructor.
- `dxdemos.explorer`: `Files`, a directory browser state (`current_path`,
  `path_names`, `err`) with `reload_path_list`, `go_up`, `enter_dir`,
  `current` and `clear_err`. A directory that cannot be read, or going up
  from the root, sets `err` instead of raising; `enter_dir` with a bad index
  raises `IndexError`. `entry_label(path)` gives the name shown for an entry.
- `dxdemos.hackernews`: `StoryItem`, `CommentData` and `StoryPageData`
  records with `from_dict`; `PreviewState` with `parse` and `str()`;
  `summarize_story(item)` returning a `StorySummary` with hostname, score,
  comment count and time texts; and `HackerNewsClient` with `top_stories`,
  `get_story` and `get_comment`.
- `dxdemos.auth`: `User` (with `guest()`, `has(perm)` and the
  authenticated/active/anonymous checks), `SqlUser`, `UserStore` over a
  `sqlite3` connection (`create_user_tables` seeds a guest user 1 and a test
  user 2; `get_user` returns `None` for an unknown id, `load_user` raises
  `LookupError`), `connect_to_database()` for an in-memory store,
  `AuthSession` with `login_user`, `current_user` and `user_name`, and
  `permission_report(user)`.

## Example

```python
from dxdemos.calculator import calc_val, ExpressionPad
from dxdemos.clock import format_elapsed

assert calc_val("2+3*4") == 20.0

pad = ExpressionPad()
pad.input_digit("7")
pad.input_operator("*")
pad.input_digit("6")
pad.evaluate()
print(pad.display())   # 42

print(format_elapsed(83_456))  # 01:23:456
```

```python
from dxdemos.auth import connect_to_database, AuthSession, permission_report

with connect_to_database() as store:
    store.create_user_tables()
    session = AuthSession(store)
    session.login_user(2)
    print(session.user_name())  # Test
    print(permission_report(session.current_user()))
```

## What this package does not do

There is no user interface, no command-line program and no web server here:
the package holds state objects, data records and HTTP clients only, and
something else has to render them and route events to them. Sessions live in
memory inside an `AuthSession` object; nothing issues or reads cookies. The
HTTP clients do not cache responses or retry, and they decode the response
body without checking the status code.