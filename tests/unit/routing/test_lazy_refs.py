"""
Lazy reference extraction tests.
"""

from codegraph_routes.routing import (
    LazyDestinationReference,
    LazyModuleReference,
    extract_destination_reference,
    extract_module_reference,
)


class TestModuleReference:
    def test_relative_import(self):
        ref = extract_module_reference("() => import('./admin/admin.module').then(m => m.AdminModule)")

        assert ref == LazyModuleReference(specifier="./admin/admin.module")

    def test_alias_import_spanning_lines(self):
        ref = extract_module_reference(
            """() =>
              import(
                "@funsel/settings"
              ).then((m) => m.SettingsModule)"""
        )

        assert ref.specifier == "@funsel/settings"

    def test_legacy_string_form_is_not_recognized(self):
        assert extract_module_reference("'./admin/admin.module#AdminModule'") is None


class TestDestinationReference:
    def test_import_with_then_access(self):
        ref = extract_destination_reference("() => import('./home/home.component').then(m => m.HomeComponent)")

        assert ref == LazyDestinationReference(specifier="./home/home.component", export_name="HomeComponent")

    def test_parenthesized_arrow_parameter(self):
        ref = extract_destination_reference("() => import(`@funsel/shop`).then((mod) => mod.ShopPage)")

        assert ref.specifier == "@funsel/shop"
        assert ref.export_name == "ShopPage"

    def test_missing_then_access_fails(self):
        """Default-export style imports name no export"""
        assert extract_destination_reference("() => import('./home/home.component')") is None

    def test_missing_import_fails(self):
        assert extract_destination_reference("() => Promise.resolve(HomeComponent)") is None
