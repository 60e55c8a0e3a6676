import dataclasses

import pytest

from contextescape.jsesc import (
    JS_STR_REPLACEMENT_TABLE,
    JSContext,
    is_js_ident_part,
    js_regexp_escaper,
    js_str_escaper,
    js_val_escaper,
    next_js_ctx,
    replace,
)

NEXT_CTX_CASES = [
    (JSContext.REGEXP, ";"),
    (JSContext.REGEXP, "}"),
    (JSContext.DIV_OP, ")"),
    (JSContext.DIV_OP, "]"),
    (JSContext.REGEXP, "("),
    (JSContext.REGEXP, "["),
    (JSContext.REGEXP, "{"),
    (JSContext.REGEXP, "="),
    (JSContext.REGEXP, "+="),
    (JSContext.REGEXP, "*="),
    (JSContext.REGEXP, "*"),
    (JSContext.REGEXP, "!"),
    (JSContext.REGEXP, "+"),
    (JSContext.REGEXP, "-"),
    (JSContext.DIV_OP, "--"),
    (JSContext.DIV_OP, "++"),
    (JSContext.DIV_OP, "x--"),
    (JSContext.REGEXP, "x---"),
    (JSContext.REGEXP, "return"),
    (JSContext.REGEXP, "return "),
    (JSContext.REGEXP, "return\t"),
    (JSContext.REGEXP, "return\n"),
    (JSContext.REGEXP, "return\u2028"),
    (JSContext.DIV_OP, "x"),
    (JSContext.DIV_OP, "x "),
    (JSContext.DIV_OP, "x\t"),
    (JSContext.DIV_OP, "x\n"),
    (JSContext.DIV_OP, "x\u2028"),
    (JSContext.DIV_OP, "preturn"),
    (JSContext.DIV_OP, "0"),
    (JSContext.DIV_OP, "0."),
]


@pytest.mark.parametrize("want, s", NEXT_CTX_CASES)
@pytest.mark.parametrize("preceding", [JSContext.REGEXP, JSContext.DIV_OP])
def test_next_js_ctx(want, s, preceding):
    assert next_js_ctx(s, preceding) is want


def test_next_js_ctx_blank_keeps_preceding():
    assert next_js_ctx("   ", JSContext.REGEXP) is JSContext.REGEXP
    assert next_js_ctx("   ", JSContext.DIV_OP) is JSContext.DIV_OP


@pytest.mark.parametrize(
    "r, want",
    [("$", True), ("_", True), ("0", True), ("z", True), ("Q", True),
     ("-", False), (" ", False), (0xE9, False), (ord("a"), True)],
)
def test_is_js_ident_part(r, want):
    assert is_js_ident_part(r) is want


@dataclasses.dataclass
class Pair:
    X: int
    Y: int


JS_VAL_CASES = [
    (42, " 42 "),
    (-42, " -42 "),
    (1 << 53, " 9007199254740992 "),
    ((1 << 53) + 1, " 9007199254740993 "),
    (1.0, " 1 "),
    (-1.0, " -1 "),
    (0.5, " 0.5 "),
    (-0.5, " -0.5 "),
    (1.0 / 256, " 0.00390625 "),
    (0.0, " 0 "),
    (-0.0, " -0 "),
    ("", '""'),
    ("foo", '"foo"'),
    ("\r\n\u2028\u2029", r'"\r\n\u2028\u2029"'),
    ("\t\x0b", r'"\u0009\u000b"'),
    (Pair(1, 2), '{"X":1,"Y":2}'),
    ([], "[]"),
    ([42, "foo", None], '[42,"foo",null]'),
    (["<!--", "</script>", "-->"], r'["\u003c!--","\u003c/script\u003e","--\u003e"]'),
    ("<!--", r'"\u003c!--"'),
    ("-->", r'"--\u003e"'),
    ("<![CDATA[", r'"\u003c![CDATA["'),
    ("]]>", r'"]]\u003e"'),
    ("</script", r'"\u003c/script"'),
    ("\U0001d11e", '"\U0001d11e"'),
]


@pytest.mark.parametrize("value, want", JS_VAL_CASES)
def test_js_val_escaper(value, want):
    assert js_val_escaper(value) == want


@pytest.mark.parametrize("value, want", JS_VAL_CASES)
def test_js_val_escaper_nested(value, want):
    assert js_val_escaper([value]) == "[" + want.strip() + "]"


def test_js_val_escaper_mapping_sorted():
    assert js_val_escaper({"b": 1, "a": True}) == '{"a":true,"b":1}'


def test_js_val_escaper_multiple_args():
    assert js_val_escaper(1, 2) == '"1 2"'
    assert js_val_escaper("a", "b") == '"ab"'
    assert js_val_escaper() == '""'


def test_js_val_escaper_unsupported_type():
    assert js_val_escaper(object()) == " /* json: unsupported type: object */null "


def test_js_val_escaper_nan():
    out = js_val_escaper(float("nan"))
    assert out.startswith(" /* json: unsupported value")
    assert out.endswith(" */null ")


def test_js_val_escaper_cycle():
    items = []
    items.append(items)
    assert js_val_escaper(items) == (
        " /* json: unsupported value: encountered a cycle */null "
    )


JS_STR_CASES = [
    ("", ""),
    ("foo", "foo"),
    ("\0", r"\0"),
    ("\t", r"\t"),
    ("\n", r"\n"),
    ("\r", r"\r"),
    ("\u2028", r"\u2028"),
    ("\u2029", r"\u2029"),
    ("\\", "\\\\"),
    ("\\n", r"\\n"),
    ("foo\r\nbar", r"foo\r\nbar"),
    ('"', r"\x22"),
    ("'", r"\x27"),
    ("&amp;", r"\x26amp;"),
    ("</script>", r"\x3c\/script\x3e"),
    ("<![CDATA[", r"\x3c![CDATA["),
    ("]]>", r"]]\x3e"),
    ("<!--", r"\x3c!--"),
    ("-->", r"--\x3e"),
    (
        "+ADw-script+AD4-alert(1)+ADw-/script+AD4-",
        r"\x2bADw-script\x2bAD4-alert(1)\x2bADw-\/script\x2bAD4-",
    ),
]


@pytest.mark.parametrize("value, want", JS_STR_CASES)
def test_js_str_escaper(value, want):
    assert js_str_escaper(value) == want


JS_REGEXP_CASES = [
    ("", "(?:)"),
    ("foo", "foo"),
    ("\0", r"\0"),
    ("\t", r"\t"),
    ("\n", r"\n"),
    ("\r", r"\r"),
    ("\u2028", r"\u2028"),
    ("\u2029", r"\u2029"),
    ("\\", "\\\\"),
    ("\\n", r"\\n"),
    ("foo\r\nbar", r"foo\r\nbar"),
    ('"', r"\x22"),
    ("'", r"\x27"),
    ("&amp;", r"\x26amp;"),
    ("</script>", r"\x3c\/script\x3e"),
    ("<![CDATA[", r"\x3c!\[CDATA\["),
    ("]]>", r"\]\]\x3e"),
    ("<!--", r"\x3c!\-\-"),
    ("-->", r"\-\-\x3e"),
    ("*", r"\*"),
    ("+", r"\x2b"),
    ("?", r"\?"),
    ("[](){}", r"\[\]\(\)\{\}"),
    ("$foo|x.y", r"\$foo\|x\.y"),
    ("x^y", r"x\^y"),
]


@pytest.mark.parametrize("value, want", JS_REGEXP_CASES)
def test_js_regexp_escaper(value, want):
    assert js_regexp_escaper(value) == want


INPUT = "".join(map(chr, range(0x80))) + "\u00a0\u0100\u2028\u2029\ufeff\U0001d11e"
LOW_CONTROLS = "".join(map(chr, range(0x10, 0x20)))

JS_STR_ESCAPED = (
    "\\0\x01\x02\x03\x04\x05\x06\x07"
    "\x08\\t\\n\\x0b\\f\\r\x0e\x0f"
    + LOW_CONTROLS
    + r" !\x22#$%\x26\x27()*\x2b,-.\/"
    + r"0123456789:;\x3c=\x3e?"
    + r"@ABCDEFGHIJKLMNO"
    + r"PQRSTUVWXYZ[\\]^_"
    + "`abcdefghijklmno"
    + "pqrstuvwxyz{|}~\x7f"
    + "\u00a0\u0100\\u2028\\u2029\ufeff\U0001d11e"
)

JS_REGEXP_ESCAPED = (
    "\\0\x01\x02\x03\x04\x05\x06\x07"
    "\x08\\t\\n\\x0b\\f\\r\x0e\x0f"
    + LOW_CONTROLS
    + r" !\x22#\$%\x26\x27\(\)\*\x2b,\-\.\/"
    + r"0123456789:;\x3c=\x3e\?"
    + r"@ABCDEFGHIJKLMNO"
    + r"PQRSTUVWXYZ\[\\\]\^_"
    + "`abcdefghijklmno"
    + r"pqrstuvwxyz\{\|\}~"
    + "\x7f"
    + "\u00a0\u0100\\u2028\\u2029\ufeff\U0001d11e"
)


@pytest.mark.parametrize(
    "escaper, escaped",
    [(js_str_escaper, JS_STR_ESCAPED), (js_regexp_escaper, JS_REGEXP_ESCAPED)],
)
def test_escapers_on_lower7_and_select_high_codepoints(escaper, escaped):
    assert escaper(INPUT) == escaped
    # Character by character must give the same result.
    assert "".join(escaper(ch) for ch in INPUT) == escaped


def test_replace_uses_table_and_line_separators():
    assert replace("a\u2028<b", {"<": "LT"}) == "a\\u2028LTb"
    assert replace("x/y", JS_STR_REPLACEMENT_TABLE) == r"x\/y"