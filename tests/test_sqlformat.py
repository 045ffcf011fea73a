import pytest

from buup.base import TransformerCategory
from buup.sqlformat import SqlFormatter, format_sql


@pytest.fixture
def formatter():
    return SqlFormatter()


def test_metadata(formatter):
    assert formatter.id == "sqlformatter"
    assert formatter.name == "SQL Formatter"
    assert formatter.category is TransformerCategory.FORMATTER


@pytest.mark.parametrize("text", ["", "  "])
def test_empty(formatter, text):
    assert formatter.transform(text) == ""


def test_simple_select(formatter):
    text = "SELECT id, name, email FROM users WHERE active = true ORDER BY name"
    expected = (
        "SELECT  id,\nname,\nemail\nFROM  users\nWHERE  active =  true ORDER  BY  name"
    )
    assert formatter.transform(text) == expected


def test_joins(formatter):
    text = (
        "SELECT u.id, u.name, o.order_date FROM users u JOIN orders o "
        "ON u.id = o.user_id WHERE o.total > 100"
    )
    expected = (
        "SELECT  u.id,\nu.name,\no.order_date\nFROM  users u\n"
        "JOIN  orders o ON  u.id =  o.user_id\nWHERE  o.total >  100"
    )
    assert formatter.transform(text) == expected


def test_nested_queries(formatter):
    text = (
        "SELECT * FROM (SELECT id, COUNT(*) as count FROM orders GROUP BY id) "
        "AS subquery WHERE count > 5"
    )
    expected = (
        "SELECT  * \nFROM  (\n    SELECT  id,\n    COUNT(\n        * \n    ) AS  count\n"
        "    FROM  orders GROUP  BY  id\n) AS  subquery\nWHERE  count >  5"
    )
    assert formatter.transform(text) == expected


def test_string_literals(formatter):
    text = "SELECT * FROM users WHERE name = 'John''s' AND department = \"Sales\""
    expected = (
        "SELECT  * \nFROM  users\nWHERE  name = 'John''s' AND  department = \"Sales\""
    )
    assert formatter.transform(text) == expected


def test_string_contents_kept_verbatim():
    assert "'a   b'" in format_sql("SELECT 'a   b'")


def test_function_matches_transformer(formatter):
    text = formatter.default_test_input
    assert format_sql(text) == formatter.transform(text)
    assert formatter.transform(text).startswith("SELECT  id,\n")