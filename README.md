# cliconf

`cliconf` gives a command-line application somewhere other than the command
line to take flag values from: a plain mapping, a JSON document, a YAML file
or a TOML file. It also carries two small helpers used when building
command-line tools: `Args`, a read-only view of positional arguments, and
`CommandCategories`, which groups commands by category for help output.

## Installation

```
pip install cliconf
```

The only runtime dependency is PyYAML; TOML is read with the standard
library's `tomllib`.

## Input sources

Every source implements `cliconf.source.InputSource` and offers the same
lookups: `int`, `float`, `string`, `bool`, `duration`, `string_slice`,
`int_slice` and `generic`, plus `is_set` and `source` (the path the data came
from, or an empty string). Keys may be dotted to reach into nested tables, so
`"top.test"` finds `test` inside `top`.

### Mapping sources

`cliconf.map_source.MapInputSource(file, value_map)` serves values from a
dictionary. A key that is absent yields the zero value (`0`, `0.0`, `""`,
`False`, `timedelta(0)`, or `None` for lists and generic values). A value of
the wrong type raises `IncorrectTypeError`, for example:

```
Mismatched type for flag 'port'. Expected 'int' but actual is 'string'
```

Durations may be stored as `timedelta` objects or as strings such as `"1m"`,
`"300ms"` or `"1h30m"`, which are read with `cliconf.map_source.parse_duration`.
A generic value is any object with a callable `set` method.

`cliconf.map_source.default_input_source()` returns an empty mapping source.

YAML and TOML files are loaded into mapping sources:

```python
from cliconf.yaml_source import new_yaml_source_from_file
from cliconf.toml_source import new_toml_source_from_file

yaml_src = new_yaml_source_from_file("config.yaml")
toml_src = new_toml_source_from_file("config.toml")
yaml_src.int("top.test")
```

If the file cannot be read or parsed, these raise `ValueError` with a message
beginning `Unable to load Yaml file '...'` or `Unable to load TOML file '...'`.

### JSON sources

```python
from cliconf.json_source import new_json_source

src = new_json_source(b'{"top": {"test": 15}, "names": ["a", "b"]}')
src.int("top.test")        # 15
src.string_slice("names")  # ["a", "b"]
src.is_set("missing")      # False
```

`new_json_source_from_file(path)` and `new_json_source_from_reader(stream)`
build the same kind of source from a file or a readable stream. Unlike the
mapping source, a JSON source raises `KeyError` for a missing key and
`TypeError` for a value of the wrong type; `int` accepts a JSON number with a
fractional part and truncates it, and `float` accepts an integer.

### Where data is loaded from

A path may be a local file or an `http`/`https` URL;
`cliconf.loader.load_data_from` does the reading. A missing local file raises
`FileNotFoundError`, and a URL with another scheme raises `ValueError`.

### Factories keyed on a flag

`new_yaml_source_from_flag_func(name)`, `new_toml_source_from_flag_func(name)`
and `new_json_source_from_flag_func(name)` each return a function taking a
context. If `context.is_set(name)` is true it loads the file named by
`context.string(name)`; otherwise it returns an empty source.

## Filling flags before a command runs

`cliconf.flag` connects a source to flags:

- `apply_input_source_values(context, source, flags)` calls
  `flag.apply_input_source_value(context, source)` on every flag that has
  such a method and skips the rest.
- `init_input_source(flags, factory)` returns a hook that builds a source with
  `factory()` and applies it to `flags`.
- `init_input_source_with_context(flags, factory)` does the same with
  `factory(context)`.

```python
from cliconf.flag import init_input_source_with_context
from cliconf.yaml_source import new_yaml_source_from_flag_func

before = init_input_source_with_context(flags, new_yaml_source_from_flag_func("load"))
before(context)
```

An exception from the factory is raised again as `InputSourceError`.

Two helpers are there for flag implementations: `is_env_var_set(names)` tells
whether any of the named environment variables exists (even if empty), and
`float_to_string(value)` formats a float with the shortest digits, switching
to exponent form for very large or very small values (`1.3` → `"1.3"`,
`1e21` → `"1e+21"`).

## Positional arguments and categories

```python
from cliconf.args import Args

args = Args(["build", "--fast", "target"])
args.first()    # "build"
args.tail()     # ["--fast", "target"]
args.get(10)    # ""
args.present()  # True
len(args)       # 3
```

`CommandCategories.add_command(category, command)` collects commands under
their category names in the order the categories were first seen;
`categories()` returns the groups, and each `CommandCategory.visible_commands()`
leaves out commands whose `hidden` attribute is true.

## What this package does not do

`cliconf` has no command-line parser, no flag classes, no application or
command runner and no help printer. The `context` and the flags passed to
`cliconf.flag` come from your own code: a context needs `is_set(name)` and
`string(name)` for the flag-keyed factories, and a flag takes part only if it
defines `apply_input_source_value(context, source)`. Deciding whether a
command-line or environment value should win over the source is up to that
method.

## Running the tests

```
pip install -e ".[test]"
pytest
```