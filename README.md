# digitcode

A model of an input widget for codes with a fixed number of cells and a fixed
alphabet, such as the six digits of a TOTP code. Each cell holds one character
(one grapheme). The widget validates what is typed, moves the focus between
cells through a document object you supply, and hands the completed code to a
callback.

## Installation

```
pip install digitcode
```

## Profiles

A profile says how long a code is and which characters it may contain.
`TotpCodeProfile` (in `digitcode.profile`) accepts the digits `0`–`9`, has six
cells unless given another length, and asks for numeric input:

```python
from digitcode.profile import TotpCodeProfile

profile = TotpCodeProfile(6)
profile.is_str_code_valid("123456")      # True
profile.is_str_code_valid("12a456")      # False
profile.valid_char_code(list("000111"))  # "000111"
profile.input_mode(0)                    # "numeric"
```

A negative length raises `ValueError`.

Write your own profile by subclassing `DigitCodeProfile` and implementing
`__len__` and `char_matches_alphabet`. Override `input_mode` to choose the
input mode of each cell (the default is `"text"`). `is_valid_char` accepts
exactly one grapheme from the alphabet; strings are split with
`split_graphemes`, so alphabets may contain characters made of several code
points.

## The code state

`DigitCode` (in `digitcode.digit_code`) holds one optional value per cell:

```python
from digitcode.digit_code import DigitCode
from digitcode.profile import TotpCodeProfile

code = DigitCode(TotpCodeProfile(4))
code.set(0, "1")
code.joined()        # None: the code is not complete
for index, digit in enumerate("1234"):
    code.set(index, digit)
code.joined()        # "1234"
```

`set` raises `IndexError` for a cell outside the code and `ValueError` for a
value the profile rejects; `None` empties a cell. `get` returns `None` for an
empty or out-of-range cell. `with_set` and `as_empty` return changed copies,
and `iter_some` yields the filled cells in order.

## The widget

`CodeDigitInput` (in `digitcode.widget`) connects a profile, a code state and
an optional document. `totp_input` builds one with a TOTP profile:

```python
from digitcode.widget import totp_input

received = []
widget = totp_input(6, submit_code=received.append)
for index, digit in enumerate("123456"):
    widget.handle_input(index, digit)
# received == ["123456"]
```

- `handle_input(index, value)` stores the value if the profile accepts it (or
  empties the cell otherwise) and, on a valid value, moves the focus on.
- Filling the last cell so that the code is complete submits it.
- `handle_keydown(index, key)`: `"Enter"` submits a complete code,
  `"Backspace"` empties the cell, moves back one cell and returns `True` (the
  default action is prevented), `"ArrowLeft"` and `"ArrowRight"` move the
  focus, and any valid character empties the cell ready for new input.
- `render()` processes pending flags and returns the HTML of the widget as a
  string, with one `<input>` per cell carrying a `data-index` attribute.

Without a `submit_code` callback, submitted codes are only logged.

### Focus

Focus moves go through `digitcode.focus.focus_offset`. The document you pass
as `document=` needs a `query_selector(selector)` method; the widget asks for
`#<id> input[data-index="<n>"]` and calls `focus()` on what comes back.
`focus_next` and `focus_prev` return a `FocusResult`: `OK`, `TOO_BIG` or
`TOO_LOW` at the ends, or `NO_DOCUMENT` when there is no document or nothing
matches.

## Control flags

`ControlFlags` (in `digitcode.control_flags`) sends commands to the widget.
Build them with the builder:

```python
from digitcode.control_flags import ControlFlags

widget.flags = ControlFlags().change().focus_first().clear().apply()
```

`process_flags` (also run by `render`) does nothing until a document is set.
The first time one is present it calls `oninit` with the widget's id; then it
focuses the first cell if asked, empties every cell if asked, and resets the
flags.

## Ids

Every widget needs an id that is unique in its document. If you do not pass
`element_id`, `generate_id` creates a random one starting with
`digit-code-edit-`. An id that starts with a digit is prefixed with `d-` by
`normalize_id`.

## What this package does not do

It does not run in a browser or listen to real events. You deliver input and
key presses by calling the handlers, supply your own document object for
focusing, and use the HTML returned by `render` as you see fit.