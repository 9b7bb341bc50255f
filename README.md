# nusort

Tools for typing and analysing Japanese text: kana classification and
hiragana-to-katakana conversion, formatting of kana usage statistics,
radical/stroke sort keys read from Unihan data, a right-aligned wrapped
dictionary guide, and an input engine that turns keystrokes into text
through a code mapping you supply.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

`nusort-h2k` reads UTF-8 bytes on standard input and writes them to standard
output with every hiragana character converted to its katakana counterpart.
Everything else, including multi-byte characters outside the kana ranges,
passes through unchanged; an incomplete UTF-8 sequence at the very end of
the input is dropped. It takes no arguments: given any, it prints an error
and exits with status 92.

```
echo "ひらがなとカタカナ" | nusort-h2k
```

The same converter runs as `python -m nusort.h2k`.

## Library

### Characters — `nusort.chars`

- `codepoint_range(c)` classifies a character as a `CodepointRange`:
  `HIRAGANA` (ぁ–ゖ), `KATAKANA` (ァ–ヶ), `KATAKANA_SPECIAL` (katakana-block
  characters after ヶ up to the long-vowel mark ー) or `OTHER`.
- `is_complete_utf8(first_byte, size)` tells whether `size` bytes starting
  with `first_byte` make up a whole UTF-8 sequence; a size outside 1–4
  raises `ValueError`.
- `hiragana_to_katakana(text)` converts every hiragana in `text` to katakana.

### Conversion — `nusort.h2k`

- `h2k_text(text)` returns `text` with hiragana turned into katakana.
- `h2k(instream, outstream)` does the same from one binary stream to another.
- `main(argv=None)` is the entry point of `nusort-h2k` and returns the exit
  status.

```python
from nusort.h2k import h2k_text

h2k_text("ïゖààが")  # "ïヶààガ"
```

### Kana statistics tables — `nusort.kana_stats_util`

- `format_header()` returns the header line of a statistics table.
- `format_line(left_column, left_column_width, hira_count, kata_count,
  all_kana_count)` returns one row: the hiragana and katakana counts with
  their percentages of `all_kana_count`, and their combined share scaled to
  75. `left_column_width` is the display width of `left_column`, which is
  padded to seven columns. If the two counts add up to more than
  `all_kana_count`, `ValueError` is raised.

### Radical/stroke sort keys — `nusort.unihan`

Reads lines of Unihan radical-stroke data (the `kRSAdobe_Japan1_6` field)
and builds, per character, a `SortInfo` holding its sorted, de-duplicated
`SortKey`s (radical number and residual stroke count). Radical numbers are
normalized by `normalize_radical(rad)`: one-stroke radicals are merged, a few
look-alike radicals share a number, and radicals from 口 on are shifted up by
one.

- `parse_rsc_line(line)` parses one data line. Comments, blank lines, lines
  of other fields and lines without a `U+` prefix give `None` (the last with
  a logged warning); a malformed key list, more than 15 keys, or a code
  point below U+0800 raises `UnihanFormatError`.
- `load_sort_infos(lines)` parses every line, adds a built-in set of
  characters missing from the data, and returns the list sorted by
  character.
- `decode_codepoint(codepoint_str)` turns a hexadecimal code point into its
  character.
- `SortInfo.add_key(rad, strokes)` and `SortInfo.sort_and_dedup()` manage a
  character's keys.
- `figure_cutoff_type(prev_info, info)`, `format_char_line(kanji, info)` and
  `format_db_line(kanji, ranking, cutoff_type, prev_info, info)` produce the
  report lines used when checking a kanji ordering.

### Dictionary guide — `nusort.dict_guide`

A `DictGuide` collects `GuideElement`s — radicals, stroke counts, kanji,
ellipses, radical stroke counts, key separators, spaces and wrap points (see
`GuideElementType`) — with `add(element)` and `clear()`.
`render(include_second_line=False)` lays them out right to left in lines at
most 60 columns wide, breaking only at wrap points, with ANSI colours for
radicals, stroke counts and keys. With `include_second_line`, each line is
followed by one showing the input key beneath each kanji.

### Input engine — `nusort.input_engine`

The mapping is any mapping (or iterable of pairs) from key codes such as
`"ka"` to their conversions such as `"か"`.

- `InputSession(mapping, flags=None, outstream=None)` holds the pending
  keystrokes and converted text. `feed(ch)` processes one input byte (or
  `None` at end of input) and returns `False` when the session ends at end
  of input or Ctrl-D. A completed code is converted; a prefix that no code
  starts with leaks out one character at a time. Backspace (`\b` or DEL)
  removes a pending key, otherwise the last converted character; Enter
  clears the converted text. `render()` returns what is shown to the user:
  the converted text and the pending keys in angle brackets.
- `InputFlags` selects whether pending and converted text is shown
  (`show_pending_and_converted`), whether Enter copies the converted text to
  the clipboard with OSC 52 (`save_with_osc52`), and whether the RPC packet
  protocol is used (`rpc_mode`). In RPC mode `\x01` asks for the next byte,
  `\x02` + size + data carries converted data (backspace, newline and
  escape sequences are passed on), and `\x04` + size + data carries display
  text.
- `run_input(mapping, flags=None, instream=None, outstream=None)` drives a
  session from a stream of keystrokes, defaulting to standard input and
  output.
- `encode_osc52(data)` builds the OSC 52 escape sequence that copies `data`
  to the terminal's clipboard.

```python
import io
from nusort.input_engine import InputFlags, run_input

out = io.BytesIO()
run_input({"ki": "き"}, InputFlags(show_pending_and_converted=True),
          io.BytesIO(b"ki"), out)
out.getvalue().decode()  # "<k>\nき\n"
```

## What the package does not do

- It ships no kanji database and no romaji code tables: the input engine
  converts only through the mapping it is given, and there is no
  interactive input command. It does not put the terminal into raw mode and
  draws no keyboard layout, cutoff guide or radical list of its own.
- `nusort.unihan` parses the data you pass it; it does not read a Unihan file
  from a fixed location or check a kanji ordering by itself.
- `nusort.kana_stats_util` formats statistics rows; counting kana in a text
  is left to the caller, and there is no statistics command.