"""Jsonnet standard library functions and manifest formats for Python values."""

__version__ = "0.5.0"

__all__ = [
    "arrays",
    "encoding",
    "ini_format",
    "manifest",
    "mathfuncs",
    "objects",
    "parse",
    "python_format",
    "sorting",
    "strings",
    "toml_format",
    "values",
    "xml_format",
    "yaml_format",
]