# eachfile

Building blocks for data-driven tests that read their inputs from a
directory. `eachfile` scans a directory of test inputs into a tree. It also
turns file and directory names into valid, unique identifiers that can serve
as test names.

## Installation

```
pip install eachfile
```

The package has no runtime dependencies.

## Scanning a directory: `eachfile.tree`

`build_tree(base, extensions=())` walks `base` recursively. It returns a
`FileTree`, a dataclass with two fields:

- `here`: a set of `pathlib.Path` objects for the files directly in the
  directory;
- `children`: a dict that maps each subdirectory's `Path` to its own
  `FileTree`.

The paths are the directory entries joined to `base` as given. They are not
made absolute.

```python
from eachfile.tree import build_tree

tree = build_tree("tests/resources_simple")
for path in sorted(tree.here):
    print(path)
for subdir, subtree in tree.children.items():
    print(subdir, len(subtree.here))
```

### Filtering by extension

When `extensions` is given, a file is kept only if its last extension is one
of the listed names, written without the dot. The extension is then removed
from the path. Files that share a stem therefore collapse into one entry. For
a directory holding `a.in`, `a.out`, `b.in` and `notes.txt`:

```python
tree = build_tree("tests/resources_complex", ["in", "out"])
# tree.here == {Path("tests/resources_complex/a"), Path("tests/resources_complex/b")}
```

`build_tree` does not check that every stem has a file for every extension.
In the example above, `b` is present even though `b.out` is missing.

Without `extensions`, every file is kept with its full name.

### Errors

If an entry is neither a regular file nor a directory, `build_tree` raises
`UnsupportedPathError`. A broken symbolic link is one such entry. Errors
from the file system, such as a missing `base`, propagate as the usual
`OSError` subclasses.

## Naming: `eachfile.naming`

`sanitize_ident(name)` makes a string usable as an identifier. Every
character that cannot continue an identifier becomes `_`. If the result
does not begin with an identifier-start character, it gets the prefix
`test_`. The underscore counts as not being such a character. An empty
`name` raises `ValueError`.

```python
from eachfile.naming import sanitize_ident

sanitize_ident("my file.txt")   # "my_file_txt"
sanitize_ident("1.txt")         # "test_1_txt"
sanitize_ident("_hidden")       # "test__hidden"
```

`generate_name(starting_name, taken)` returns `starting_name` if it is not
in the mutable set `taken`. Otherwise it returns the first free name of the
form `starting_name_2`, `starting_name_3`, and so on. The chosen name is
added to `taken`.

```python
from eachfile.naming import generate_name

taken: set[str] = set()
generate_name("a", taken)   # "a"
generate_name("a", taken)   # "a_2"
generate_name("a", taken)   # "a_3"
```

Used together, these two functions give distinct names to files whose names
only differ in characters that get replaced, such as `a-b` and `a.b`.

## What this package does not do

`eachfile` does not create or register tests by itself. It has no function
that takes a checking function and produces one test per file. It does not
read file contents for you, apply decorators, await coroutines or hook into
pytest collection. You do that yourself from the `FileTree` and the names
described above.