from recipe_publisher.core.slug import collation_key, derive_id, slugify


def test_slugify_basic():
    assert slugify("Old Fashioned") == "old-fashioned"
    assert slugify("  A & B!! ") == "a-b"


def test_slugify_collapses_and_strips():
    assert slugify("--Gin---Tonic--") == "gin-tonic"
    assert slugify("Dry, Martini!") == "dry-martini"
    assert slugify("!!!") == ""
    assert slugify(None) == ""
    assert slugify(42) == "42"


def test_derive_id_prefers_stored_id():
    assert derive_id({"id": "custom", "name": "Negroni"}) == "custom"
    assert derive_id({"id": "", "name": "Negroni"}) == "negroni"
    assert derive_id({"name": None}) == ""
    assert derive_id("not a record") == ""


def test_collation_orders_like_a_locale():
    names = ["Zombie", "apple", "Éclair", "banana", "Martini", "martini"]
    assert sorted(names, key=collation_key) == ["apple", "banana", "Éclair", "martini", "Martini", "Zombie"]
