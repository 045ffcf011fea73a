import pytest

from buup.base import TransformerCategory
from buup.sqlminify import SqlMinifier, minify_sql


@pytest.fixture
def transformer():
    return SqlMinifier()


def test_metadata(transformer):
    assert transformer.id == "sqlminifier"
    assert transformer.name == "SQL Minifier"
    assert transformer.category is TransformerCategory.FORMATTER


@pytest.mark.parametrize("text", ["", "  ", "\n\t "])
def test_empty(transformer, text):
    assert transformer.transform(text) == ""


def test_simple_select(transformer):
    assert transformer.transform(transformer.default_test_input) == (
        "SELECT id,username,email FROM users WHERE status='active' "
        "AND created_at>'2023-01-01' ORDER BY created_at DESC LIMIT10"
    )


def test_complex_query(transformer):
    text = """
        SELECT 
            u.id, 
            u.name, 
            COUNT(o.id) AS order_count
        FROM 
            users u
        LEFT JOIN 
            orders o ON u.id = o.user_id
        WHERE 
            u.status = 'active'
            AND u.created_at > '2023-01-01'
        GROUP BY 
            u.id, 
            u.name
        HAVING 
            COUNT(o.id) > 0
        ORDER BY 
            order_count DESC
        LIMIT 20
        """
    assert transformer.transform(text) == (
        "SELECT u.id,u.name,COUNT(o.id)AS order_count FROM usersu LEFT JOIN orderso "
        "ON u.id=o.user_id WHERE u.status='active' AND u.created_at>'2023-01-01' "
        "GROUP BY u.id,u.name HAVING COUNT(o.id)>0 ORDER BY order_count DESC LIMIT20"
    )


def test_preserves_string_literals(transformer):
    text = (
        "SELECT * FROM users WHERE name = 'John''s   Data' "
        'AND department = "Sales & Marketing"'
    )
    assert transformer.transform(text) == (
        "SELECT*FROM users WHERE name='John''s   Data' "
        'AND department="Sales & Marketing"'
    )


def test_strips_comments(transformer):
    text = """
        SELECT id, name -- This is the user ID and name
        FROM users 
        /* This is a multi-line comment
         * that spans multiple lines
         */
        WHERE active = 1
        """
    assert transformer.transform(text) == "SELECT id,name FROM users WHERE active=1"


def test_keywords_are_uppercased():
    assert minify_sql("select a from b") == "SELECT a FROM b"


def test_compound_operator_kept_together():
    assert minify_sql("a >= b") == "a>=b"


def test_unterminated_line_comment_runs_to_end():
    assert minify_sql("SELECT 1 -- trailing") == "SELECT1"