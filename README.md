# vlcarchiver

A small archiver for English text. It encodes text with a fixed
variable-length prefix code, in which frequent letters get short codes, and
writes the result as space-separated upper-case hexadecimal bytes.

Each upper-case character is stored as the marker `!` followed by its lower-case
form. Unpacking turns them back into capitals. The code table covers the space,
the lower-case letters `a`–`z` and `!`. Any other character, including a newline
or a digit, makes packing fail.

## Installation

```
pip install .
```

## Command line

Pack a text file. `notes.txt` becomes `notes.vlc` in the current directory:

```
vlcarchiver pack notes.txt
```

Unpack it again. `notes.vlc` becomes `notes.txt` in the current directory:

```
vlcarchiver unpack notes.vlc
```

The output file is named after the input file, with its last extension replaced,
and is always written to the current directory, overwriting any file of that
name. Files are read and written as UTF-8.

If something goes wrong, the command prints the error to standard error and
exits with status 1. This happens when the file cannot be read or written, when
the text holds a character that has no code, or when the packed file is not
well-formed hex bytes. Run without a command, it prints its help and exits
with status 0.

The same commands are available as `python -m vlcarchiver.cli`.

## Library

```python
from vlcarchiver.vlc import encode, decode

packed = encode("My name is Ted")
# '20 30 3C 18 77 4A E4 4D 28'
assert decode(packed) == "My name is Ted"
```

The lower-level building blocks are also available:

- `vlcarchiver.vlc`: `encoding_table()` returns a copy of the code table;
  `prepare_text`, `export_text` and `encode_bin` do the single steps of
  encoding and decoding. Encoding a character outside the table raises
  `UnknownSymbolError` (a `ValueError`), whose `symbol` attribute holds the
  character.
- `vlcarchiver.chunks`: `split_by_chunks`, `binary_chunk_to_hex`,
  `hex_chunk_to_binary`, `binary_chunks_to_hex`, `hex_chunks_to_binary`,
  `join_binary_chunks`, `parse_hex_chunks` and `format_hex_chunks`. A chunk
  that is not a valid 8-bit binary or hex value raises `ChunkError` (a
  `ValueError`).
- `vlcarchiver.decoding_tree`: `DecodingTree`, a prefix tree built with
  `DecodingTree.from_table(encoding_table())`. Its `decode` drops an unfinished
  code at the end of the bits and raises `ValueError` on bits that match no
  code.
- `vlcarchiver.cli`: `pack(path)` and `unpack(path)` do the same work as the
  commands and return the `Path` of the written file; `packed_file_name` and
  `unpacked_file_name` give the output names; `main(argv)` runs the command
  line and returns the exit status.

## Limitations

- The code table gives `k` and `j` the same code, and `q` and `x` the same
  code. After a round trip every `k` comes back as `j` and every `q` as `x`.
- A `!` in the input is packed as the capital marker, so on unpacking it
  disappears and the character after it is upper-cased.
- Packing an empty file writes an empty packed file, but unpacking an empty
  file fails.
- Only the fixed table is used; the package does not build codes from the
  input, and it handles one file at a time with no archive of several files.

## Running the tests

```
pip install .[test]
pytest
```