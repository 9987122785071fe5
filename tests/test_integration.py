"""End-to-end tests over a realistic document."""

from tomlette import ValueKind, loads, lookup, walk


DOCUMENT = """
# Application settings
name = "inventory"
version = 3
debug = false
ratio = 0.75

[database]
host = "db.internal"
ports = [5432, 5433]
replica.lag = 1.5

[database.pool]
size = 10
labels = ["primary", "fallback"]

[logging]
levels = [["info", "warn"], ["error"]]
path = "C:\\\\logs\\\\app.log"
"""


def test_document_to_dict():
    assert loads(DOCUMENT).to_dict() == {
        "name": "inventory",
        "version": 3,
        "debug": False,
        "ratio": 0.75,
        "database": {
            "host": "db.internal",
            "ports": [5432, 5433],
            "replica.lag": 1.5,
            "pool": {"size": 10, "labels": ["primary", "fallback"]},
        },
        "logging": {
            "levels": [["info", "warn"], ["error"]],
            "path": "C:\\logs\\app.log",
        },
    }


def test_document_kinds():
    kinds = {".".join(path): value.kind for path, value in walk(loads(DOCUMENT))}
    assert kinds["database"] is ValueKind.Table
    assert kinds["database.pool"] is ValueKind.Table
    assert kinds["database.pool.size"] is ValueKind.Integer
    assert kinds["ratio"] is ValueKind.Float
    assert kinds["debug"] is ValueKind.Boolean
    assert kinds["logging.levels"] is ValueKind.Array


def test_document_lookup():
    root = loads(DOCUMENT)
    assert lookup(root, "database.replica.lag").value == 1.5
    assert lookup(root, "database.pool.labels").items[1].value == "fallback"
