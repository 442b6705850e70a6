from hql_linter.models import LintContext, Severity
from hql_linter.rules import KeywordCasingRule, ParenthesesRule
from hql_tokens import HQLTokenizer, SourcePosition, split_lines


def make_context(text, severity=Severity.WARNING):
    return LintContext(
        text=text,
        lines=split_lines(text),
        tokens=HQLTokenizer().tokenize(text),
        severity=severity,
    )


def test_keyword_casing_flags_lowercase_keywords():
    issues = KeywordCasingRule().check(make_context("select * from users"))

    messages = [i.message for i in issues]
    assert messages == [
        "Keyword 'select' should be uppercase",
        "Keyword 'from' should be uppercase",
    ]
    assert all(i.code == "keyword-casing" for i in issues)
    assert issues[1].span.start == SourcePosition(0, 9)
    assert issues[1].span.end == SourcePosition(0, 13)


def test_keyword_casing_clean_query():
    assert KeywordCasingRule().check(make_context("SELECT * FROM users;")) == []


def test_keyword_casing_mixed_case():
    issues = KeywordCasingRule().check(make_context("Select id From users;"))
    assert [i.message for i in issues] == [
        "Keyword 'Select' should be uppercase",
        "Keyword 'From' should be uppercase",
    ]


def test_keyword_casing_ignores_quoted_identifiers():
    issues = KeywordCasingRule().check(make_context("SELECT `from`, `select` FROM `table`;"))
    assert issues == []


def test_keyword_casing_ignores_dotted_config_keys():
    diagnostics = KeywordCasingRule().check(make_context("SET hive.exec.dynamic.partition=true;"))
    assert diagnostics == []


def test_keyword_casing_still_flags_keyword_after_dotted_name():
    diagnostics = KeywordCasingRule().check(make_context("SELECT t.id from t;"))
    assert [d.message for d in diagnostics] == ["Keyword 'from' should be uppercase"]


def test_keyword_casing_ignores_non_keywords_and_strings():
    issues = KeywordCasingRule().check(make_context("SELECT user_id, 'select' FROM users;"))
    assert issues == []


def test_keyword_casing_severity_follows_config():
    issues = KeywordCasingRule().check(make_context("select 1;", severity=Severity.HINT))
    assert issues[0].severity == Severity.HINT


def test_parentheses_unclosed():
    issues = ParenthesesRule().check(make_context("SELECT * FROM users WHERE (id = 1"))

    assert len(issues) == 1
    assert issues[0].severity == Severity.ERROR
    assert issues[0].message == "Unbalanced parentheses: 1 unclosed '('"
    assert issues[0].span.start == SourcePosition(0, 0)


def test_parentheses_extra_close_at_first_offender():
    issues = ParenthesesRule().check(make_context("SELECT 1;\nSELECT (2));\nSELECT 3);"))

    assert len(issues) == 1
    assert issues[0].message == "Unbalanced parentheses: extra ')'"
    assert issues[0].span.start == SourcePosition(1, 10)
    assert issues[0].span.end == SourcePosition(1, 11)


def test_parentheses_deeply_nested_balanced():
    text = "SELECT ((((a + (b * (c - d))))) FROM t WHERE x IN (SELECT y FROM (SELECT 1 AS y) s);"
    assert ParenthesesRule().check(make_context(text)) == []


def test_parentheses_balanced_after_excursion():
    # Goes negative, then recovers: only the final balance matters
    assert ParenthesesRule().check(make_context("SELECT a) FROM (t")) == []
