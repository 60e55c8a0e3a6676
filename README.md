# contextescape

Escapers and filters that make untrusted values safe to put into HTML
documents. Each function targets one output context: HTML text, quoted
and unquoted attribute values, CSS values and strings, JavaScript values,
strings and regular expressions, and URLs. The package has no
dependencies outside the standard library.

## Installation

```
pip install contextescape
```

To run the tests, install the `test` extra:

```
pip install "contextescape[test]"
pytest
```

## Usage

Every escaper takes one value; a value that is not a `str` is converted
with `str()` first.

### HTML (`contextescape.htmlesc`)

```python
from contextescape.htmlesc import html_escaper, attr_escaper, html_nospace_escaper

html_escaper("<b>O'Reilly</b>")       # '&lt;b&gt;O&#39;Reilly&lt;/b&gt;'
attr_escaper('say "hi"')              # 'say &#34;hi&#34;'
html_nospace_escaper("a b=c")         # 'a&#32;b&#61;c'
```

- `html_escaper`, `attr_escaper` and `rcdata_escaper` escape `"`, `&`,
  `'`, `+`, `<` and `>` as character references and turn NUL into U+FFFD.
- `html_nospace_escaper` is for unquoted attribute values: it also escapes
  whitespace, `=` and `` ` ``, and writes the non-characters
  U+FDD0..U+FDEF and U+FFF0..U+FFFF as hex references.
- `comment_escaper` returns the empty string whatever it is given.
- `html_replacer(s, table, bad_runes)` applies a replacement mapping of
  characters to strings; `HTML_REPLACEMENT_TABLE` and
  `HTML_NOSPACE_REPLACEMENT_TABLE` are the two tables used above.

### Plain helpers (`contextescape.funcs`)

Context-free helpers: `html_escape_string`, `html_escape(out, data)`
(writes to any object with a `write` method), `html_escaper(*args)`,
`js_escape_string`, `js_escaper(*args)` and `url_query_escaper(*args)`.
The `*args` forms join their arguments into one string first. These
HTML helpers escape only `"`, `'`, `&`, `<` and `>`.

### CSS (`contextescape.css`)

```python
from contextescape.css import css_escaper, css_value_filter, decode_css

css_escaper("a<b")                           # 'a\\3c b'
css_value_filter("12.5%")                    # '12.5%'
css_value_filter("expression(alert(1))")     # 'ZgotmplZ'
decode_css(r"\3c i\3e")                      # '<i>'
```

Also available: `ends_with_css_keyword`, `is_css_nmchar`, `is_hex`,
`hex_decode` (raises `ValueError` on a bad digit), `skip_css_space` and
`is_css_space`.

### JavaScript (`contextescape.jsesc`)

```python
from contextescape.jsesc import js_val_escaper, js_str_escaper, js_regexp_escaper

js_val_escaper(42)             # ' 42 '
js_val_escaper("</script")     # '"\\u003c/script"'
js_str_escaper("</script>")    # '\\x3c\\/script\\x3e'
js_regexp_escaper("")          # '(?:)'
```

`js_val_escaper` renders `None`, booleans, numbers, strings, bytes,
lists, tuples, string-keyed mappings and dataclass instances as JSON.
Values it cannot render (other types, non-finite floats, cycles) come out
as a `/* ... */null` comment rather than raising.

`next_js_ctx(s, preceding)` decides whether a `/` after a run of
JavaScript tokens starts a regular expression or a division operator and
returns a `JSContext` member (`REGEXP`, `DIV_OP` or `UNKNOWN`).
`replace(s, table)` is the table-driven replacer behind the string and
regexp escapers.

### URLs (`contextescape.url`)

```python
from contextescape.url import url_filter, url_escaper, url_normalizer

url_filter("javascript:alert(1)")   # '#ZgotmplZ'
url_escaper("a b&c")                # 'a%20b%26c'
url_normalizer("/foo|bar")          # '/foo%7cbar'
```

`url_filter` allows only the `http`, `https` and `mailto` protocols.
`url_processor(norm, value)` is the shared implementation of the escaper
and the normalizer.

### The failsafe value

Filters that reject a value return `ZgotmplZ` (or `#ZgotmplZ` for URLs),
a harmless marker that is easy to search for.

### Errors (`contextescape.errors`)

`ErrorCode` names each kind of escaping problem (`AMBIG_CONTEXT`,
`BAD_HTML`, `BRANCH_END`, and so on). `EscapeError(code, description,
name="", line=0)` is an exception carrying a code, a description and,
where known, a template name and line number, all shown in its message.

## What this package does not do

It provides the escaping and filtering functions only. It does not parse
or execute templates, and it does not track HTML/CSS/JavaScript parsing
context to choose an escaper automatically: the caller picks the function
that matches where the value will appear. There is no notion of
pre-trusted content types; every value is treated as plain text.