import pytest

from vertica_dbal.config import ConnectionParameters, DriverOptions
from vertica_dbal.db.dsn import (
    build_dsn,
    connection_settings_fragment,
    driver_options_fragment,
    escape_connection_settings,
    mask_dsn,
)


def test_end_to_end_example():
    params = {
        "host": "db1",
        "port": 5433,
        "dbname": "analytics",
        "driverOptions": {"schema": "reporting"},
    }
    assert build_dsn(params) == (
        "Servername=db1;Port=5433;Database=analytics;"
        "Driver=Vertica;ConnSettings=SET+search_path='reporting';"
    )


def test_raw_dsn_overrides_everything():
    params = {
        "dsn": "DSN=warehouse;UID=ro",
        "host": "db1",
        "port": 5433,
        "dbname": "analytics",
        "driverOptions": {"odbc_driver": "Other", "schema": "x"},
    }
    assert build_dsn(params) == "DSN=warehouse;UID=ro"


def test_empty_dsn_is_ignored():
    assert build_dsn({"dsn": "", "host": "db1"}) == "Servername=db1;"


@pytest.mark.parametrize(
    "params, expected",
    [
        ({"host": "db1", "port": "5433", "dbname": "a"}, "Servername=db1;Port=5433;Database=a;"),
        ({"host": "db1", "dbname": "a"}, "Servername=db1;Database=a;"),
        ({"port": 5433}, "Port=5433;"),
        ({"dbname": "a"}, "Database=a;"),
        ({}, ""),
    ],
)
def test_coordinates_are_ordered_and_optional(params, expected):
    assert build_dsn(params) == expected


def test_none_values_count_as_absent():
    assert build_dsn({"host": None, "port": None, "dbname": "a", "driverOptions": None}) == "Database=a;"


def test_coordinates_are_not_validated():
    assert build_dsn({"host": "not a host;", "port": "abc"}) == "Servername=not a host;;Port=abc;"


def test_missing_driver_options_add_nothing():
    assert build_dsn({"host": "db1"}) == "Servername=db1;"


def test_empty_driver_options_use_default_driver():
    assert build_dsn({"host": "db1", "driverOptions": {}}) == "Servername=db1;Driver=Vertica;ConnSettings=;"


def test_empty_odbc_driver_falls_back_to_default():
    assert build_dsn({"driverOptions": {"odbc_driver": ""}}) == "Driver=Vertica;ConnSettings=;"


def test_custom_odbc_driver():
    dsn = build_dsn({"driverOptions": {"odbc_driver": "/opt/vertica/lib64/libverticaodbc.so"}})
    assert dsn == "Driver=/opt/vertica/lib64/libverticaodbc.so;ConnSettings=;"


def test_dsn_settings_trailing_semicolons_are_collapsed():
    dsn = build_dsn({"driverOptions": {"dsn_settings": "a;b;;"}})
    assert dsn == "Driver=Vertica;a;b;ConnSettings=;"


def test_dsn_settings_without_semicolon():
    dsn = build_dsn({"driverOptions": {"dsn_settings": "Locale=en_US"}})
    assert dsn == "Driver=Vertica;Locale=en_US;ConnSettings=;"


def test_schema_and_connection_settings_are_joined_and_escaped():
    options = {"schema": "rep orts", "connection_settings": "x;y"}
    assert build_dsn({"driverOptions": options}).endswith(
        "ConnSettings=SET+search_path='rep+orts'%3Bx%3By;"
    )


def test_connection_settings_only():
    options = DriverOptions(connection_settings="SET TIMEZONE TO 'UTC'")
    assert connection_settings_fragment(options) == "ConnSettings=SET+TIMEZONE+TO+'UTC';"


def test_connection_settings_fragment_empty():
    assert connection_settings_fragment(DriverOptions()) == "ConnSettings=;"


def test_driver_options_fragment_none():
    assert driver_options_fragment(None) == ""


def test_escape_leaves_other_characters():
    assert escape_connection_settings("a b;c%'d") == "a+b%3Bc%'d"


def test_accepts_model_instances():
    params = ConnectionParameters(host="db1", driver_options=DriverOptions(schema="s"))
    assert build_dsn(params) == "Servername=db1;Driver=Vertica;ConnSettings=SET+search_path='s';"


def test_unknown_keys_are_ignored():
    params = {"host": "db1", "charset": "utf8", "driverOptions": {"bogus": 1}}
    assert build_dsn(params) == "Servername=db1;Driver=Vertica;ConnSettings=;"


def test_build_is_idempotent():
    params = {"host": "db1", "port": 5433, "driverOptions": {"schema": "s", "dsn_settings": "a;"}}
    assert build_dsn(params) == build_dsn(params)


def test_mask_dsn_hides_password():
    assert mask_dsn("Servername=db1;PWD=secret;UID=u") == "Servername=db1;PWD=***;UID=u"
