"""
Alias table tests.
"""

from codegraph_routes.routing import AliasTable, load_alias_table
from codegraph_routes.routing.aliases import strip_jsonc


class TestAliasTable:
    def test_first_candidate_only(self):
        table = AliasTable.from_compiler_options(
            {"paths": {"@funsel/admin": ["libs/admin/src/index.ts", "libs/legacy/admin.ts"]}}
        )

        assert table.first_candidate("@funsel/admin") == "libs/admin/src/index.ts"
        assert table.base_directory("@funsel/admin") == "libs/admin/src"

    def test_base_url_is_applied(self):
        table = AliasTable.from_compiler_options({"baseUrl": "./src", "paths": {"@app/*": ["app/*"]}})

        assert table.first_candidate("@app/*") == "src/app/*"

    def test_string_candidate_normalized_to_list(self):
        table = AliasTable.from_compiler_options({"paths": {"@a": "libs/a/index.ts"}})

        assert table.paths["@a"] == ("libs/a/index.ts",)

    def test_unknown_alias(self):
        table = AliasTable()

        assert "@x" not in table
        assert table.first_candidate("@x") is None
        assert table.base_directory("@x") is None


class TestLoadAliasTable:
    def test_missing_file_gives_empty_table(self, tmp_path):
        assert len(load_alias_table(tmp_path / "tsconfig.base.json")) == 0

    def test_malformed_file_gives_empty_table(self, tmp_path):
        path = tmp_path / "tsconfig.base.json"
        path.write_text("{ not json", encoding="utf-8")

        assert len(load_alias_table(path)) == 0

    def test_comments_and_trailing_commas(self, tmp_path):
        path = tmp_path / "tsconfig.base.json"
        path.write_text(
            """{
              // workspace aliases
              "compilerOptions": {
                /* resolved from the repo root */
                "baseUrl": ".",
                "paths": {
                  "@funsel/shop": ["libs/shop/src/index.ts"],
                  "@funsel/url": ["libs/url//src/index.ts"],
                },
              },
            }""",
            encoding="utf-8",
        )

        table = load_alias_table(path)

        assert table.base_directory("@funsel/shop") == "libs/shop/src"
        assert table.paths["@funsel/url"] == ("libs/url//src/index.ts",)


class TestStripJsonc:
    def test_comment_markers_inside_strings_survive(self):
        assert strip_jsonc('{"a": "http://x/*y*/"} // c') == '{"a": "http://x/*y*/"} '
