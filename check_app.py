import sys

try:
    from recipe_publisher.main import app
    print("App imported successfully")

    # Check routes
    expected = {"/api/save-recipe", "/api/ready"}
    found = {route.path for route in app.routes if hasattr(route, "path")}

    missing = expected - found
    if missing:
        print(f"ERROR: Routes NOT FOUND: {', '.join(sorted(missing))}")
        sys.exit(1)

    for path in sorted(expected):
        print(f"Found route: {path}")

except Exception as e:
    print(f"App import failed: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)
