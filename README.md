# tmuxfastcopy

Building blocks for selecting text out of a tmux pane with short keyboard
hints, in the style of vimium/vimperator hints.

Every distinct piece of matched text gets a short, prefix-free label.
Typing a label selects that text, and the selection is handed to an
action: a shell command that either receives the text as an argument
(`{}`) or reads it from standard input.

## What is inside

- `tmuxfastcopy.huffman.label(alphabet_size, freqs)` builds prefix-free
  labels with an n-ary Huffman code. Items that occur more often get
  shorter labels. Each label is a list of indexes into the alphabet. An
  alphabet of fewer than two letters raises `ValueError`.

  ```python
  from tmuxfastcopy.huffman import label

  label(2, [1, 1, 1, 1, 1])
  # [[0, 0], [1, 1, 1], [1, 0], [1, 1, 0], [0, 1]]
  # i.e. "aa", "bbb", "ba", "bba", "ab" for the alphabet "ab"
  ```

- `tmuxfastcopy.matches` holds the value types: `Range` (a `[start, end)`
  slice, with `len()`), `Match` (a matcher name and a range), `Selection`
  (the text, the sorted names of the matchers that found it, and whether
  shift was held) and `Style` (the styles used for normal text, matches,
  skipped matches, labels and typed label input; any objects you like).

- `tmuxfastcopy.hints.generate_hints(alphabet, text, matches)` groups
  matches by the text they cover, sorts the groups by text and labels each
  one. `Hint.annotations(input_text, style)` returns the
  `OverlayTextAnnotation`s and `StyleTextAnnotation`s that draw a hint for
  the input typed so far.

- `tmuxfastcopy.widget.Widget` holds the text, the hints and the typed
  input (`Widget.input`), and keeps the current annotations in
  `Widget.annotations`. `handle_event` takes `KeyEvent`s: runes extend the
  input, `Key.BACKSPACE`/`Key.BACKSPACE2` remove the last character, and
  anything else is left unhandled. Once the input equals a label, the
  handler is called with a `Selection` and the input is cleared. Typing an
  upper-case letter counts as a shift-selection.

  ```python
  from tmuxfastcopy.matches import Match, Range
  from tmuxfastcopy.widget import Key, KeyEvent, Widget

  chosen = []
  w = Widget("foo bar", [Match("word", Range(4, 7))], "ab", handler=chosen.append)
  w.handle_event(KeyEvent(Key.RUNE, "a"))
  chosen  # [Selection(text='bar', matchers=['word'], shift=False)]
  ```

- `tmuxfastcopy.action.ActionFactory.new(ActionRequest(...))` turns an
  action string such as `"tmux load-buffer -"` or
  `"tmux set-buffer -- {}"` into a `StdinAction` or an `ArgAction`. The
  string is split with shell-like quoting; an empty string or bad quoting
  raises `ValueError`. Actions run in the request's directory (the current
  one if none is given), see `FASTCOPY_REGEX_NAME` and
  `FASTCOPY_TARGET_PANE_ID` in their environment, and send their output to
  the log, one entry per line. A failing command raises
  `subprocess.CalledProcessError`.

- `tmuxfastcopy.config` holds `Config`, `Regexes`, `DEFAULT_REGEXES`,
  `default_config` and `parse_flags`. Flags are `-pane`, `-action`,
  `-shift-action`, `-alphabet`, `-regex NAME:REGEX` (repeatable),
  `-verbose`, `-log` and `-tmux` (default `tmux`), with one or two dashes
  and the value after `=` or as the next argument. `Config.flags()` turns a
  configuration back into arguments that parse to the same configuration,
  and `Config.fill_from` fills unset values from another configuration
  without overwriting set ones. A regex given with an empty body marks the
  regex of that name as disabled.

- `tmuxfastcopy.alphabet.validate_alphabet` rejects alphabets shorter than
  two bytes of UTF-8 text or with repeated characters; `DEFAULT_ALPHABET`
  is `a` to `z`.

- `tmuxfastcopy.logger` provides a small levelled `Logger` (debug, info,
  error) with optional names, and `LogWriter`, a file-like context manager
  that turns each written line into a log entry.

- Smaller helpers: `must.not_errorf` raises `InvariantError` for an
  unexpected error; `paniclog.handle` and `paniclog.recover` log a failure
  with its stack to a stream; `stringobj.Builder` builds `{name: value}`
  strings that skip empty values; `iotest.LineLogWriter` forwards each
  write to a callable; `envtest.pairs` builds a fake environment `Env`.

## Example

```python
from tmuxfastcopy.config import default_config, parse_flags

cfg = parse_flags(["-pane", "%3", "-regex", "ticket:T\\d+"])
cfg.fill_from(default_config(cfg))
print(cfg.action)  # "tmux load-buffer -"
```

## What it does not do

This package has no command to run and does not talk to tmux itself: it
does not read tmux options, capture a pane's contents, or swap, zoom or
resize panes. It does not draw on a terminal screen or read keys from one;
the widget only keeps its annotations and takes `KeyEvent`s you give it.
Nor does it scan text with the regexes in the configuration: the `Match`
objects handed to `generate_hints` and `Widget` come from the caller.

## Running the tests

The test suite uses pytest and hypothesis, available through the `test`
extra:

```
pip install -e ".[test]"
pytest
```