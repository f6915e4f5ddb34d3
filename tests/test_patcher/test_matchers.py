"""Tests for structural matchers (flutter_scaffold.patcher.matchers)."""

from __future__ import annotations

import pytest

from flutter_scaffold.errors import MalformedAnchor
from flutter_scaffold.patcher.matchers import (
    AfterFirst,
    AfterLast,
    AfterLine,
    BeforeMatch,
    BlockTail,
    Location,
    compile_pattern,
    indent_at,
)

pytestmark = pytest.mark.unit

ROUTES = """\
    return MaterialApp(
      routes: {
        RouteConstants.home: (context) => const HomeScreen(),
        '/about': (context) => const AboutScreen(),
      },
    );
"""


class TestHelpers:
    def test_indent_at(self):
        text = "a\n    b\n"
        assert indent_at(text, text.index("b")) == "    "
        assert indent_at(text, 0) == ""

    def test_compile_pattern_error(self):
        with pytest.raises(MalformedAnchor, match="invalid pattern"):
            compile_pattern("(unclosed", "rule")


class TestAfterLast:
    def test_last_import(self):
        text = "import 'a.dart';\nimport 'b.dart';\n\nvoid main() {}\n"
        loc = AfterLast(r"^import .*;$").locate(text)
        assert loc == Location(text.index("\n\nvoid"), "")

    def test_no_match(self):
        assert AfterLast(r"^import .*;$").locate("void main() {}\n") is None


class TestAfterFirst:
    def test_indent_of_matched_line(self):
        text = "void main() async {\n  WidgetsFlutterBinding.ensureInitialized();\n}\n"
        loc = AfterFirst(r"WidgetsFlutterBinding\.ensureInitialized\(\);").locate(text)
        assert loc.indent == "  "
        assert text[loc.offset:].startswith("\n}")


class TestAfterLine:
    def test_start_of_next_line(self):
        text = "dependencies:\n  flutter:\n"
        loc = AfterLine(r"^dependencies:[ \t]*$").locate(text)
        assert loc == Location(len("dependencies:\n"), "")

    def test_last_line_without_newline(self):
        assert AfterLine(r"^dependencies:$").locate("dependencies:") is None


class TestBeforeMatch:
    def test_scoped_by_after(self):
        text = (
            "switch (a) {\n  default:\n    break;\n}\n"
            "onGenerateRoute: (s) {\n  switch (s.name) {\n    default:\n      return null;\n  }\n}\n"
        )
        loc = BeforeMatch(r"^\s*default:", after=r"onGenerateRoute:").locate(text)
        assert loc.indent == "    "
        assert text[loc.offset:].startswith("    default:\n      return null;")

    def test_missing_scope(self):
        assert BeforeMatch(r"default:", after=r"onGenerateRoute:").locate("default:") is None


class TestBlockTail:
    def test_after_last_entry(self):
        loc = BlockTail(r"\broutes:\s*\{").locate(ROUTES)
        comma = ROUTES.index("AboutScreen(),") + len("AboutScreen(),")
        assert loc == Location(comma, "        ")

    def test_empty_block(self):
        text = "    routes: {},\n"
        loc = BlockTail(r"\broutes:\s*\{").locate(text)
        assert loc == Location(text.index("{") + 1, "      ")

    def test_list_block(self):
        text = "getPages: [\n  GetPage(name: '/', page: () => const A()),\n],\n"
        loc = BlockTail(r"\bgetPages:\s*\[", "[]").locate(text)
        assert text[loc.offset:].startswith("\n],")

    def test_missing_trailing_comma_gives_up(self):
        text = "routes: {\n  '/': (c) => const A()\n},\n"
        assert BlockTail(r"\broutes:\s*\{").locate(text) is None

    def test_two_candidate_blocks_give_up(self):
        text = "routes: {\n  'a': x,\n},\nroutes: {\n  'b': y,\n},\n"
        assert BlockTail(r"\broutes:\s*\{").locate(text) is None

    def test_block_comment_gives_up(self):
        text = "routes: {\n  /* '/': x, */\n  'a': y,\n},\n"
        assert BlockTail(r"\broutes:\s*\{").locate(text) is None

    def test_interpolation_gives_up(self):
        text = "routes: {\n  '/${name}': (c) => const A(),\n},\n"
        assert BlockTail(r"\broutes:\s*\{").locate(text) is None

    def test_braces_inside_strings_and_comments_ignored(self):
        text = (
            "routes: {\n"
            "  // } not the end\n"
            "  '/a}': (c) => const A(),\n"
            "  '/b': (c) { return const B(); },\n"
            "},\n"
        )
        loc = BlockTail(r"\broutes:\s*\{").locate(text)
        assert loc is not None
        assert text[:loc.offset].endswith("return const B(); },")

    def test_unbalanced_gives_up(self):
        assert BlockTail(r"\broutes:\s*\{").locate("routes: {\n  'a': [x,\n},\n") is None
        assert BlockTail(r"\broutes:\s*\{").locate("routes: {\n  'a': x,\n") is None

    def test_unsupported_delimiters(self):
        with pytest.raises(MalformedAnchor):
            BlockTail(r"\bargs:\s*\(", "()")
