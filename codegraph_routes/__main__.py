from codegraph_routes.cli import app

app(prog_name="codegraph-routes")
