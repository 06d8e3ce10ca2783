# jsonnetstd

Functions of the Jsonnet standard library (`std.*`) and its manifest formats
(JSON, YAML, TOML, INI, Python, XML), working on ordinary Python values.

Jsonnet values map onto Python like this:

| Jsonnet  | Python                         |
|----------|--------------------------------|
| null     | `None`                         |
| boolean  | `bool`                         |
| number   | `float` (or `int`)             |
| string   | `str`                          |
| array    | `list` (tuples are accepted)   |
| object   | `jsonnetstd.values.Obj`        |
| function | any callable                   |

An `Obj` keeps hidden fields apart from visible ones, and lists its fields in
sorted order, as a Jsonnet object does:

```python
from jsonnetstd.values import Obj

o = Obj({"b": 1, "a": 2, "secret": "x"}, hidden={"secret"})
o.fields()                 # ["a", "b"]
o.fields(True)             # ["a", "b", "secret"]
o.has_field("secret")      # False
o.has_field("secret", True)  # True
```

Functions that Jsonnet passes lazily (such as an `onEmpty` default) are given
as zero-argument callables; key functions are one-argument callables.

## Installing

```
pip install jsonnetstd
```

## Modules

- `jsonnetstd.values` - `Obj`, `JsonnetError`, `ValType`, `ComplexValType`,
  `type_name`, the `is_*` predicates, `equals`, `primitive_equals`, `compare`,
  the `array_less`/`array_greater`/... helpers, `std_mod` (numeric modulo and
  `%` string formatting), `xor`, `xnor`, `escape_string_json`,
  `manifest_json_ex`, `to_string`.
- `jsonnetstd.mathfuncs` - `abs_`, `sign`, `max_`, `min_`, `clamp`, `sum_`,
  `modulo`, `floor`, `ceil`, `log`, `pow_`, `sqrt`, trigonometry, `exp`,
  `mantissa`, `exponent`, `round_`, `is_even`, `is_odd`, `is_integer`,
  `is_decimal`.
- `jsonnetstd.encoding` - `encode_utf8`, `decode_utf8`, `base64_encode`,
  `base64_decode`, `base64_decode_bytes`, `md5`, `sha1`, `sha256`, `sha512`,
  `sha3` (SHA3-512).
- `jsonnetstd.parse` - `parse_json`, `parse_yaml` (a multi-document stream
  gives an array, an empty one gives `None`).
- `jsonnetstd.arrays` - `make_array`, `repeat`, `slice_`, `map_`,
  `map_with_index`, `map_with_key`, `flat_map`, `filter_`, `filter_map`,
  `foldl`, `foldr`, `range_`, `join`, `lines`, `resolve_path`, `deep_join`,
  `reverse`, `any_`, `all_`, `member`, `find`, `contains`, `count`, `avg`,
  `remove_at`, `remove`, `flatten_arrays`, `flatten_deep_array`, `prune`.
- `jsonnetstd.strings` - `codepoint`, `char`, `substr`, `str_replace`,
  `escape_string_bash`, `escape_string_dollars`, `is_empty`,
  `equals_ignore_case`, `split`, `split_limit`, `split_limit_r`,
  `ascii_upper`, `ascii_lower`, `find_substr`, `parse_int`, `parse_octal`,
  `parse_hex`, `parse_nat`, `string_chars`, `lstrip_chars`, `rstrip_chars`,
  `strip_chars`.
- `jsonnetstd.sorting` - `sort`, `uniq`, `set_`, `min_array`, `max_array`,
  `set_member`, `set_inter`, `set_diff`, `set_union`.
- `jsonnetstd.objects` - `object_fields`, `object_fields_all`,
  `object_fields_ex`, `object_values`, `object_values_all`,
  `object_keys_values`, `object_keys_values_all`, `object_has`,
  `object_has_all`, `object_has_ex`, `object_remove_key`.
- `jsonnetstd.manifest` - `manifest_json`, `manifest_json_minified`,
  `escape_string_python`.
- `jsonnetstd.yaml_format` - `YamlFormat`, `yaml_needs_quotes`,
  `manifest_yaml_doc`, `manifest_yaml_stream`.
- `jsonnetstd.toml_format` - `TomlFormat`, `manifest_toml`,
  `manifest_toml_ex`.
- `jsonnetstd.ini_format` - `IniFormat`, `manifest_ini`.
- `jsonnetstd.python_format` - `manifest_python`, `manifest_python_vars`.
- `jsonnetstd.xml_format` - `XmlJsonmlFormat`, `escape_string_xml`,
  `manifest_xml_jsonml`.

## Using it

```python
from jsonnetstd.values import Obj, manifest_json_ex
from jsonnetstd.arrays import join, range_
from jsonnetstd.strings import split_limit, parse_hex
from jsonnetstd.sorting import sort, set_union
from jsonnetstd.yaml_format import manifest_yaml_doc
from jsonnetstd.toml_format import manifest_toml

join(",", ["a", "b", None, "c"])          # "a,b,c"
range_(1, 4)                              # [1, 2, 3, 4]
split_limit("a.b.c", ".", 1)              # ["a", "b.c"]
parse_hex("BbC")                          # 3004.0
sort([3, 1, 2])                           # [1, 2, 3]
set_union([1, 3], [2, 3])                 # [1, 2, 3]

config = Obj({"name": "demo", "replicas": 3, "secret": "x"}, hidden={"secret"})

print(manifest_yaml_doc(config, False, False))
# name: demo
# replicas: 3

print(manifest_toml(config))
# name = "demo"
# replicas = 3

print(manifest_json_ex(config, "  ", "\n", ": "))
# {
#   "name": "demo",
#   "replicas": 3
# }
```

Hidden fields are left out of every manifest format. Failures, such as
comparing values of different types or manifesting a function, raise
`jsonnetstd.values.JsonnetError`.

## What it does not do

This package holds the library functions only. It does not parse or evaluate
Jsonnet code, and it has no command line. There is no assembled `std` object,
and nothing for external variables, native functions, `std.trace`,
`std.thisFile`, `std.length`, `std.get`, `std.startsWith`/`std.endsWith`,
`std.assertEqual`, `std.mergePatch` or the `std.regex*` functions.

## Running the tests

```
pip install -e .[test]
pytest
```