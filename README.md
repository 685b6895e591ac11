# labtools

`labtools` is a set of small utilities. Each one does a single job:

- `labtools.pangram` counts letters and tells you whether a text uses every letter of the English alphabet.
- `labtools.slug` turns text into URL-friendly slugs.
- `labtools.complex_number` is a minimal complex-number type.
- `labtools.circular_buffer` is a fixed-capacity ring buffer.
- `labtools.editor` is a line-oriented text editor with regular-expression search.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Pangram checker

From the command line:

```
labtools-pangram some_text.txt
```

The command reads the file as UTF-8 and prints `Il testo è un pangramma!` if it is a pangram, or `Il testo NON è un pangramma!` if it is not.

From Python:

```python
from labtools.pangram import stats, is_pangram, count_file

counts = stats("The quick brown fox jumps over the lazy dog")
is_pangram(counts)                       # True
is_pangram(count_file("some_text.txt"))
```

`stats` returns a list of 26 counts, one per letter from `a` to `z`. Case is ignored and anything that is not an ASCII letter is skipped. `is_pangram` is true only for a sequence of exactly 26 counts that are all greater than zero. `count_file` returns the summed counts for a whole file. `main(argv=None)` is the function behind the command.

## Slugs

```python
from labtools.slug import conv, slugify, is_slug, to_slug

to_slug("Hello String")     # "hello-string"
is_slug("hello-slice")      # True
conv("è")                   # "e"
```

`slugify` lower-cases the text and converts each character with `conv`: common accented letters become their plain ASCII form, ASCII letters and digits are kept, and every other character becomes `-`. Runs of consecutive dashes collapse into one. `to_slug` is the same as `slugify`, and `is_slug` tells whether a string is already equal to its slug.

## Complex numbers

```python
from labtools.complex_number import ComplexNumber, ComplexNumberError

a = ComplexNumber(1.0, 2.0)
b = a + ComplexNumber(1.0, 2.0)   # 2 + 4i
c = a + 10.0                      # 11 + 2i
a += ComplexNumber(2.0, 4.0)      # a is now 3 + 6i
str(ComplexNumber(4.2, 4.2))      # "4.2 + 4.2i"
str(ComplexNumber(4.0, 2.0))      # "4 + 2i"
ComplexNumber().to_tuple()        # (0.0, 0.0)
float(ComplexNumber.from_real(3.0))  # 3.0
```

`ComplexNumber` is a dataclass with float fields `real` and `imag`, both defaulting to `0.0`. Real numbers can be added on either side. `float()` raises `ComplexNumberError` (a `ValueError`) when the imaginary part is not zero.

## Circular buffer

```python
from labtools.circular_buffer import CircularBuffer, BufferFullError

buf = CircularBuffer(3)
buf.write(1)
buf.write(2)
buf.read()        # 1
len(buf)          # 1
buf.overwrite(9)  # writes, or replaces the oldest item when the buffer is full
```

Each slot holds an item or `None`; `head` is the next slot read and `tail` the next slot written. `write` raises `BufferFullError` when the buffer is full, and `read` returns `None` when it is empty. `len()` is the distance from head to tail, so it is 0 both when the buffer is empty and when it is full. `clear` empties every slot.

Indexing with `buf[i]` counts from the head and raises `IndexError` outside `0 <= i < capacity`; assignment works the same way. `make_contiguous` rotates the storage so that it starts at the head when the items wrap around. `as_list` returns a copy of the storage and raises `NonContiguousError` if it wraps.

## Line editor

```python
from labtools.editor import LineEditor, find_matches

editor = LineEditor("Hello World.\nA second line full of text.")
for m in find_matches(editor.all_lines(), "ll"):
    print(m.line, m.start, m.end, m.text)
editor.replace(0, 2, 4, "LL")     # line 0 becomes "HeLLo World."
```

`LineEditor` splits text on `\n`; `LineEditor.from_file` loads a UTF-8 file, dropping line terminators. `replace` substitutes a span of one line and leaves the text unchanged if the line index or span is out of range. `find_matches` returns `Match` objects (`line`, `start`, `end`, `text` and an optional `repl`, initially `None`) in line and then position order.

## What is not included

The line editor does not apply replacements by itself: setting `repl` on a `Match` has no effect until you pass its span to `LineEditor.replace`. Searching is eager only: `find_matches` builds the full list of matches at once. There is no interactive find-and-replace and no command for the editor; the only command is `labtools-pangram`.