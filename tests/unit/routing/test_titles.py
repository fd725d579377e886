"""
Title resolver tests: literal, template and constant-indirection titles.
"""

from codegraph_routes.routing import TitleResolver
from tests.helpers.tree_sitter_helpers import make_index


def resolve(files: dict[str, str], class_name: str, decorator: str = "FunselPage"):
    return TitleResolver(make_index(files), decorator=decorator).resolve(class_name)


class TestLiteralTitles:
    def test_string_literal(self):
        files = {"home.component.ts": "@FunselPage({ title: 'Home' })\nexport class HomeComponent {}"}

        assert resolve(files, "HomeComponent") == "Home"

    def test_double_quoted_with_apostrophe(self):
        files = {"a.ts": '@FunselPage({ title: "Don\'t panic" })\nexport class A {}'}

        assert resolve(files, "A") == "Don't panic"

    def test_template_without_substitutions(self):
        files = {"a.ts": "@FunselPage({ title: `Settings` })\nclass A {}"}

        assert resolve(files, "A") == "Settings"

    def test_template_with_substitutions_returns_raw_text(self):
        files = {"a.ts": "@FunselPage({ title: `Orders ${SUFFIX}` })\nclass A {}"}

        assert resolve(files, "A") == "Orders ${SUFFIX}"

    def test_other_decorators_are_ignored(self):
        files = {
            "a.ts": (
                "@Component({ selector: 'x', title: 'Wrong' })\n"
                "@FunselPage({ icon: 'star', title: 'Right' })\n"
                "export class A {}"
            )
        }

        assert resolve(files, "A") == "Right"

    def test_custom_decorator_name(self):
        files = {"a.ts": "@Page({ title: 'Custom' })\nexport class A {}"}

        assert resolve(files, "A", decorator="Page") == "Custom"
        assert resolve(files, "A") is None


class TestConstantIndirection:
    def test_identifier_resolves_to_string_constant(self):
        files = {
            "titles.ts": "export const DASHBOARD_TITLE = 'Dashboard';",
            "dash.component.ts": "@FunselPage({ title: DASHBOARD_TITLE })\nexport class DashComponent {}",
        }

        assert resolve(files, "DashComponent") == "Dashboard"

    def test_unresolved_identifier_returns_its_name(self):
        files = {"a.ts": "@FunselPage({ title: MISSING_TITLE })\nexport class A {}"}

        assert resolve(files, "A") == "MISSING_TITLE"

    def test_non_string_constant_is_not_used(self):
        files = {
            "consts.ts": "export const TITLE = buildTitle();",
            "a.ts": "@FunselPage({ title: TITLE })\nexport class A {}",
        }

        assert resolve(files, "A") == "TITLE"


class TestTitleNotFound:
    def test_class_missing(self):
        assert resolve({"a.ts": "export class A {}"}, "Nope") is None

    def test_decorator_missing(self):
        assert resolve({"a.ts": "@Component({})\nexport class A {}"}, "A") is None

    def test_title_member_missing(self):
        assert resolve({"a.ts": "@FunselPage({ icon: 'x' })\nexport class A {}"}, "A") is None

    def test_decorator_argument_not_object(self):
        assert resolve({"a.ts": "@FunselPage(PAGE_META)\nexport class A {}"}, "A") is None

    def test_unsupported_initializer(self):
        assert resolve({"a.ts": "@FunselPage({ title: 'A' + 'B' })\nexport class A {}"}, "A") is None

    def test_first_declaring_unit_wins(self):
        """A later duplicate class with metadata is not consulted"""
        files = {
            "a/a.ts": "export class A {}",
            "b/a.ts": "@FunselPage({ title: 'Later' })\nexport class A {}",
        }

        assert resolve(files, "A") is None
