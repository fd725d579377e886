"""
Declaration extractor and route decoder tests.
"""

import pytest

from codegraph_routes.routing import DeclarationExtractor, LoadingStrategy, RouteDecoder
from codegraph_routes.routing.decoder import segment_from_dotted_access
from tests.helpers.tree_sitter_helpers import make_index

ROUTES_FILE = "apps/funsel/src/app/app-routing.module.ts"


def decode_all(code: str):
    index = make_index({ROUTES_FILE: code})
    decoder = RouteDecoder()
    return [decoder.decode(literal) for literal in DeclarationExtractor(index).extract(ROUTES_FILE)]


class TestDeclarationExtractor:
    def test_missing_unit_returns_empty(self):
        index = make_index({})

        assert DeclarationExtractor(index).extract("nope.ts") == []

    def test_only_top_level_arrays_are_scanned(self):
        code = """
            const routes: Routes = [{ path: 'a' }, { path: 'b' }];
            export const more = [{ path: 'c' }] satisfies Routes;
            const notArray = { path: 'x' };
            function build() { const inner = [{ path: 'hidden' }]; return inner; }
            @NgModule({ imports: [RouterModule.forChild([{ path: 'decorated' }])] })
            export class AppRoutingModule {}
        """

        routes = decode_all(code)

        assert [r.path_segment for r in routes] == ["a", "b", "c"]

    def test_non_object_elements_are_skipped(self):
        routes = decode_all("const routes = [homeRoute, { path: 'a' }, ...extra];")

        assert [r.path_segment for r in routes] == ["a"]


class TestRouteDecoder:
    @pytest.mark.parametrize(
        "member, strategy, attribute",
        [
            ("component: HomeComponent", LoadingStrategy.EAGER, "handler_reference"),
            (
                "loadChildren: () => import('./admin/admin.module').then(m => m.AdminModule)",
                LoadingStrategy.LAZY_MODULE,
                "module_reference",
            ),
            (
                "loadComponent: () => import('./x.component').then(m => m.XComponent)",
                LoadingStrategy.LAZY_DESTINATION,
                "destination_reference",
            ),
        ],
    )
    def test_classification_matches_loading_member(self, member, strategy, attribute):
        (route,) = decode_all(f"const routes = [{{ path: 'p', {member} }}];")

        assert route.loading_strategy == strategy
        assert getattr(route, attribute) == member.split(": ", 1)[1]
        others = {"handler_reference", "module_reference", "destination_reference"} - {attribute}
        assert all(getattr(route, other) is None for other in others)

    def test_no_loading_member_is_unknown(self):
        (route,) = decode_all("const routes = [{ path: '', redirectTo: 'home', pathMatch: 'full' }];")

        assert route.loading_strategy == LoadingStrategy.UNKNOWN
        assert route.path_segment == ""

    def test_last_loading_member_wins(self):
        (route,) = decode_all(
            "const routes = [{ path: 'p', component: A, loadChildren: () => import('./m').then(m => m.M) }];"
        )

        assert route.loading_strategy == LoadingStrategy.LAZY_MODULE
        assert route.handler_reference is None

    def test_quoted_keys_and_quote_styles(self):
        (route,) = decode_all("const routes = [{ 'path': \"home\", \"component\": HomeComponent }];")

        assert route.path_segment == "home"
        assert route.handler_reference == "HomeComponent"

    def test_template_path(self):
        (route,) = decode_all("const routes = [{ path: `reports`, component: R }];")

        assert route.path_segment == "reports"

    def test_enum_like_path_constant(self):
        (route,) = decode_all("const routes = [{ path: AppRoute.USER_PROFILE, component: P }];")

        assert route.path_segment == "user-profile"

    def test_missing_path_is_empty_segment(self):
        (route,) = decode_all("const routes = [{ component: Shell }];")

        assert route.path_segment == ""

    def test_children_decoded_in_order(self):
        (route,) = decode_all(
            """
            const routes = [{
              path: 'admin',
              component: AdminShell,
              children: [
                { path: 'users', component: Users, children: [{ path: ':id', component: User }] },
                { path: 'roles', loadComponent: () => import('./roles').then(m => m.Roles) },
              ],
            }];
            """
        )

        assert [c.path_segment for c in route.children] == ["users", "roles"]
        assert route.children[0].children[0].path_segment == ":id"
        assert route.children[1].loading_strategy == LoadingStrategy.LAZY_DESTINATION


class TestSegmentFromDottedAccess:
    def test_second_component(self):
        assert segment_from_dotted_access("Paths.ORDER_HISTORY") == "order-history"

    def test_only_second_component_is_used(self):
        assert segment_from_dotted_access("Paths.ADMIN.USERS") == "admin"

    def test_identifier_without_dot(self):
        assert segment_from_dotted_access("HOME") == "HOME"
