from hql_linter.models import LintContext, Severity
from hql_linter.rules import MissingCommaRule
from hql_tokens import HQLTokenizer, SourcePosition, split_lines


def check(text):
    context = LintContext(text=text, lines=split_lines(text), tokens=HQLTokenizer().tokenize(text))
    return MissingCommaRule().check(context)


def test_flags_missing_comma_across_lines():
    issues = check("SELECT\n  id\n  name\nFROM users")

    assert len(issues) == 1
    issue = issues[0]
    assert issue.message == "Possible missing comma between columns in SELECT list"
    assert issue.severity == Severity.WARNING
    assert issue.code == "missing-comma"
    assert issue.span.start == SourcePosition(1, 4)
    assert issue.span.end == SourcePosition(1, 4)


def test_comma_present():
    assert check("SELECT\n  id,\n  name\nFROM users") == []


def test_single_line_alias_is_not_flagged():
    assert check("SELECT id name FROM users;") == []


def test_clause_keywords_suppress():
    text = """SELECT *
FROM orders
WHERE status = 'completed'
  AND order_date >= '2024-01-01'
  AND total_amount > 100;"""
    assert check(text) == []


def test_join_conditions():
    text = """SELECT u.id, o.order_id
FROM users u
LEFT JOIN orders o ON u.id = o.user_id
  AND o.status = 'active';"""
    assert check(text) == []


def test_case_expression_lines():
    text = """SELECT
  product_id,
  CASE
    WHEN price < 10 THEN 'cheap'
    ELSE 'expensive'
  END AS price_category
FROM products;"""
    assert check(text) == []


def test_trailing_alias_before_from():
    assert check("SELECT\n  department,\n  COUNT(*) AS cnt\nFROM employees;") == []


def test_dotted_columns():
    issues = check("SELECT\n  u.id\n  u.name\nFROM users u;")

    assert len(issues) == 1
    assert issues[0].span.start == SourcePosition(1, 6)


def test_consecutive_statements_are_not_columns():
    assert check("SELECT a FROM t\nSELECT b FROM u;") == []
