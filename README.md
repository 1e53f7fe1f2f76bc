# tinydom

`tinydom` is a small XML document object model. You build a tree of nodes in
code, walk and edit it, and write it out either pretty-printed or as compact
XML. It also has the scanning helpers that markup parsing is built from, and a
parser for an updater's command-line options.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `tinydom.nodes`: `NodeType`, `Node`, `Element`, `Comment`, `Text`,
  `Declaration`, `Unknown`.
- `tinydom.attribute`: `Attribute`, a name/value pair.
- `tinydom.text`: escaping and low-level scanning helpers.
- `tinydom.options`: `Options`, `split_command_line`, `parse_command_line`.

## The node tree

Every node has a `value`, a `parent` and ordered children. What the value
means depends on the kind of node: an element's tag name, a comment's body, a
text node's string, an unknown tag's raw contents.

```python
import io
from tinydom.nodes import Element, Text

item = Element("item")
item.set_attribute("count", 3)
item.link_end_child(Text("hello & goodbye"))
print(item.query_int_attribute("count"))   # 3
print(item.to_xml())   # <item count="3">hello &amp; goodbye</item>

root = Element("root")
root.link_end_child(Element("child"))
out = io.StringIO()
root.write(out)
print(out.getvalue())
# <root>
#     <child />
# </root>
```

`to_xml()` (also `str(node)`) gives compact markup; `write(stream, depth)`
gives indented output, four spaces per level.

### Walking and editing

`Node` offers `children`, `first_child`, `last_child`, `next_sibling`,
`previous_sibling`, `first_child_element` and `next_sibling_element`; each
takes an optional value to match. Iterating over a node yields its children.

Trees are edited with `link_end_child` (appends the node itself),
`insert_end_child`, `insert_before_child`, `insert_after_child` and
`replace_child` (these insert a clone of the node given), `remove_child` and
`clear`. Naming a node that is not a child raises `ValueError`. `clone`
copies a whole subtree; `no_children` tells whether a node is a leaf;
`get_document` returns the nearest ancestor whose type is
`NodeType.DOCUMENT`, or `None`.

### Elements and attributes

`Element.attribute(name)` returns the value or `None`. `set_attribute`
creates or changes an attribute, `remove_attribute` deletes one, and
`attributes()` lists them in the order they were added.
`query_int_attribute` and `query_double_attribute` raise `KeyError` when the
attribute is missing and `ValueError` when its value does not start with a
number.

An `Attribute` also has `int_value` and `double_value` (0 when the value is
not a number), `set_int_value`, `set_double_value`, `write` and `to_xml`.
When the value contains `"` it is written in single quotes.

### Other nodes

`Comment`, `Text`, `Unknown` and `Declaration(version, encoding, standalone)`
write themselves as `<!--...-->`, escaped text, `<...>` and
`<?xml version="..." ?>`. `Text.blank()` is true for empty or all-whitespace
text.

## Text helpers

`tinydom.text.escape` replaces `& < > " '` with entity references and other
non-printable or non-ASCII characters with `&#xNNNN;`, passing existing
`&#x` references through. Scanning helpers work on a string and a position:
`skip_whitespace`, `read_name`, `get_entity`, `get_char`, `string_equal` and
`read_text`. `ParsingData` tracks rows and columns (with tab stops) as a scan
advances.

By default `read_text` condenses runs of whitespace to one space. Use
`set_condense_whitespace(False)` to keep text as written, and
`is_whitespace_condensed()` to ask which mode is on.

## Command-line options

```python
from tinydom.options import parse_command_line

opts = parse_command_line('-w "My Window" -e app.exe -a actions.xml')
print(opts.window_name, opts.exe_name, opts.actions_file)
# My Window app.exe actions.xml
```

The flags are `-w` (window name), `-e` (program), `-a` (actions file), `-c`
and `-t` (copy source and destination) and `-M` (already running with
administrator rights). `split_command_line` splits on spaces and honours
double-quoted arguments.

## What this package does not do

It does not turn XML text or files into a node tree: there is no document
parser and no loading or saving of files, only the scanning helpers above.
There is no error-reporting document object and no handle type for chained
lookups. The command-line options are parsed, but no updater command comes
with the package to act on them.