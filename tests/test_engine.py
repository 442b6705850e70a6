from concurrent.futures import ThreadPoolExecutor

import pytest
from hql_linter.config import ConfigStore, HqlConfig
from hql_linter.engine import LinterEngine
from hql_linter.models import Diagnostic, LintContext, Severity
from hql_linter.registry import RuleRegistry
from hql_linter.rules.base import BaseRule
from hql_tokens import SourcePosition


def config_with(**linting):
    return HqlConfig.from_mapping({"linting": linting})


ALL_RULES = {
    "keywordCasing": True,
    "semicolon": True,
    "stringLiteral": True,
    "parentheses": True,
    "trailingWhitespace": True,
    "missingComma": True,
    "hiveVariable": True,
}


@pytest.fixture
def engine():
    return LinterEngine()


def test_clean_query_has_no_diagnostics(engine):
    assert engine.lint("SELECT * FROM users;\n") == []


def test_default_rules_skip_keyword_casing_and_missing_comma(engine):
    diagnostics = engine.lint("select\n  id\n  name\nfrom users;")
    assert diagnostics == []


def test_keyword_casing_when_enabled(engine):
    diagnostics = engine.lint("select * from users", config=config_with(rules=ALL_RULES))

    messages = [d.message for d in diagnostics]
    assert any("'select'" in m for m in messages)
    assert any("'from'" in m for m in messages)


def test_disabled_linting_returns_nothing(engine):
    config = config_with(enabled=False)
    assert engine.lint("select * from users WHERE (", config=config) == []


def test_oversize_input_returns_nothing(engine):
    config = config_with(maxFileSize=10)
    assert engine.lint("SELECT * FROM users WHERE (id = 1", config=config) == []


def test_size_limit_counts_bytes(engine):
    text = "SELECT 'é'"  # 10 characters, 11 bytes
    assert engine.lint(text, config=config_with(maxFileSize=11)) != []
    assert engine.lint(text, config=config_with(maxFileSize=10)) == []


def test_tokenizer_failure_single_error(engine):
    diagnostics = engine.lint("SELECT 'abc FROM users")

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.severity == Severity.ERROR
    assert diagnostic.code == "tokenizer-error"
    assert diagnostic.span.start == SourcePosition(0, 0)
    assert diagnostic.message


def test_tokenizer_failure_keeps_text_rule_results(engine):
    diagnostics = engine.lint("SELECT ${}  \nSELECT 'abc")

    codes = [d.code for d in diagnostics]
    assert codes == ["trailing-whitespace", "hive-variable", "tokenizer-error"]


def test_tokenizer_failure_hidden_when_string_rule_off(engine):
    rules = dict(ALL_RULES, stringLiteral=False)
    assert engine.lint("SELECT 'abc", config=config_with(rules=rules)) == []


def test_rule_order_in_output(engine):
    text = "select 1 \nselect (2"
    diagnostics = engine.lint(text, config=config_with(rules=ALL_RULES))

    assert [d.code for d in diagnostics] == [
        "trailing-whitespace",
        "keyword-casing",
        "keyword-casing",
        "missing-semicolon",
        "unbalanced-parentheses",
    ]


def test_hive_variables_through_engine(engine):
    assert [d.message for d in engine.lint("SET x = ${hiveconf:my_var};") if d.code == "hive-variable"] == []

    invalid = [d.message for d in engine.lint("SET x = ${invalid:var};") if d.code == "hive-variable"]
    assert len(invalid) == 1
    assert invalid[0].startswith("Invalid namespace")

    empty = [d.message for d in engine.lint("SET x = ${};") if d.code == "hive-variable"]
    assert empty == ["Empty Hive variable"]


def test_severity_override_only_touches_style_rules(engine):
    config = config_with(severity="Error", rules=ALL_RULES)
    diagnostics = engine.lint("select 1\nSELECT 2;", config=config)

    by_code = {d.code: d.severity for d in diagnostics}
    assert by_code["keyword-casing"] == Severity.ERROR
    assert by_code["missing-semicolon"] == Severity.INFORMATION


def test_config_store_snapshot_is_used(engine):
    engine.config_store.replace(config_with(enabled=False))
    assert engine.lint("SELECT (") == []

    engine.config_store.replace(HqlConfig())
    assert engine.lint("SELECT (") != []


def test_lint_is_idempotent(engine):
    text = "select a\n  b\nfrom t  \nSELECT ${x} FROM (u"
    config = config_with(rules=ALL_RULES)

    assert engine.lint(text, config=config) == engine.lint(text, config=config)


def test_concurrent_lints_are_independent():
    engine = LinterEngine(ConfigStore())
    texts = ["SELECT 1\nSELECT 2;", "SELECT (1;", "SELECT 1;"] * 10

    expected = [engine.lint(t) for t in texts]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(engine.lint, texts))

    assert results == expected


def test_lint_file(tmp_path, engine):
    file_path = tmp_path / "query.hql"
    file_path.write_text("SELECT 1\nSELECT 2;", encoding="utf-8")

    diagnostics = engine.lint_file(file_path)
    assert [d.code for d in diagnostics] == ["missing-semicolon"]


class BrokenRule(BaseRule):
    @property
    def rule_id(self):
        return "broken"

    @property
    def name(self):
        return "Broken"

    @property
    def severity(self):
        return Severity.ERROR

    @property
    def config_key(self):
        return "semicolon"

    def check(self, context: LintContext) -> list[Diagnostic]:
        raise RuntimeError("boom")


def test_failing_rule_does_not_stop_others(caplog):
    registry = RuleRegistry()
    registry.register(BrokenRule())
    engine = LinterEngine(registry=registry)

    diagnostics = engine.lint("SELECT (1")

    assert [d.code for d in diagnostics] == ["unbalanced-parentheses"]
    assert "broken" in caplog.text
