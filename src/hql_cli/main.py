import json
from pathlib import Path

import typer
from hql_formatter.engine import FormatterEngine
from hql_formatter.models import FormatOptions
from hql_linter.config import ConfigError, HqlConfig
from hql_linter.engine import LinterEngine
from hql_linter.models import Severity
from hql_linter.registry import registry

from .config import DEFAULT_CONFIG_FILE, load_config
from .converters import diagnostic_to_lint_issue
from .logging_config import setup_logging

app = typer.Typer(help="HQL Linter - Check and format Hive query language files")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
):
    """HQL Linter command line"""
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"expected one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    setup_logging(log_level)


def _load_config_or_exit(config_file: Path) -> HqlConfig:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


@app.command()
def lint(
    files: list[Path] = typer.Argument(None, help="Files to lint"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    severity: str = typer.Option("HINT", help="Minimum severity to show"),
    output: str = typer.Option("text", help="Output format: text or json"),
):
    """Run linter on HQL files"""
    if not files:
        typer.echo("Error: Provide at least one file to lint")
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_file)
    engine = LinterEngine()
    min_rank = Severity.parse(severity).rank

    all_issues = []
    read_errors = 0
    for file_path in files:
        try:
            diagnostics = engine.lint_file(file_path, config=config)
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"Error: cannot read {file_path}: {e}", err=True)
            read_errors += 1
            continue
        all_issues.extend(diagnostic_to_lint_issue(d, file_path) for d in diagnostics)

    reported = [
        issue
        for issue in sorted(all_issues, key=lambda x: (x.file_path, x.line_number, x.column))
        if issue.severity.rank >= min_rank
    ]

    if output == "json":
        typer.echo(json.dumps([issue.model_dump(mode="json") for issue in reported], indent=2))
    else:
        for issue in reported:
            typer.echo(
                f"{issue.severity.value.upper()}: {issue.file_path}:{issue.line_number}:{issue.column} "
                f"[{issue.rule_id or 'hql'}] - {issue.message}"
            )
        typer.echo(f"\nTotal issues found: {len(all_issues)} ({len(reported)} reported)")

    errors = sum(1 for i in all_issues if i.severity == Severity.ERROR)
    if errors > 0 or read_errors > 0:
        raise typer.Exit(code=1)


@app.command("format")
def format_files(
    files: list[Path] = typer.Argument(..., help="Files to format"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    check: bool = typer.Option(False, help="Only report files that would change"),
    tabs: bool = typer.Option(False, help="Indent with tabs instead of spaces"),
    tab_size: int = typer.Option(2, help="Spaces per indentation level"),
):
    """Reformat HQL files in place"""
    config = _load_config_or_exit(config_file)
    if not config.formatting.enabled:
        typer.echo("Formatting is disabled in configuration")
        return

    engine = FormatterEngine(config.formatting)
    options = FormatOptions(insert_spaces=not tabs, tab_size=tab_size)
    results = engine.format_files(files, options, write=not check)

    for file_path, result in zip(files, results.results):
        if result.errors:
            typer.echo(f"Error: {file_path}: {result.errors[0]}", err=True)
        elif result.modified:
            verb = "Would reformat" if check else "Reformatted"
            typer.echo(f"{verb} {file_path}")

    typer.echo(
        f"\n{results.modified_files} of {results.total_files} files "
        f"{'would be ' if check else ''}reformatted"
    )
    if results.error_files or (check and results.modified_files):
        raise typer.Exit(code=1)


@app.command()
def rules():
    """List available lint rules"""
    defaults = HqlConfig().linting.rules
    for rule in registry.get_all_rules():
        state = "on " if defaults.is_enabled(rule.config_key) else "off"
        typer.echo(f"{rule.rule_id:<24} {state} {rule.severity.value:<12} {rule.description}")


if __name__ == "__main__":
    app()
