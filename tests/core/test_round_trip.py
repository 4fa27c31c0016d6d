import pytest

from dbdsn.core import ConnectionSpec, build_dsn, fingerprint, parse_dsn

SPECS = [
    ConnectionSpec(
        driver="postgres",
        user="testuser",
        password="testpass",
        host="localhost",
        port=5432,
        name="testdb",
        params={"sslmode": "require"},
    ),
    ConnectionSpec(driver="mysql", user="root", password="secret", host="127.0.0.1", port=3306, name="myapp"),
    ConnectionSpec(
        driver="sqlserver",
        user="sa",
        password="P@ssw0rd",
        host="sqlserver.example.com",
        port=1433,
        name="master",
        params={"trustServerCertificate": "false", "encrypt": "true"},
    ),
    ConnectionSpec(driver="postgres", user="reader", host="db.internal", port=6432, name="analytics"),
    ConnectionSpec(driver="redshift", host="cluster.example.com", port=5439, name="dev", params={"a": "1", "b": "2"}),
    ConnectionSpec(
        driver="postgres",
        user="svc account",
        password="p:a/s?s#1",
        host="localhost",
        port=5432,
        name="reports 2024",
        params={"application_name": "nightly job", "options": "-c search_path=app"},
    ),
]


@pytest.mark.parametrize("spec", SPECS)
def test_parse_inverts_build(spec):
    built = build_dsn(spec)
    parsed = parse_dsn(built.dsn)
    assert parsed.spec == spec
    assert parsed.fingerprint == built.fingerprint == fingerprint(built.dsn)


def test_password_without_user_does_not_survive_round_trip():
    spec = ConnectionSpec(driver="postgres", password="secret", host="localhost", port=5432, name="db")
    parsed = parse_dsn(build_dsn(spec).dsn).spec
    assert parsed.user is None
    assert parsed.password is None


def test_empty_params_parse_back_as_absent():
    spec = ConnectionSpec(driver="postgres", host="localhost", port=5432, name="db", params={})
    assert parse_dsn(build_dsn(spec).dsn).spec.params is None
