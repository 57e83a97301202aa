# === FILE: webfont_audit/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска аудита font-display через командную строку.

Команды:
  audit ARTIFACTS   Провести аудит по сохранённым артефактам и вывести/сохранить отчёт
  config            Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда audit опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --strict            Код выхода 2, если аудит не пройден

Пример:
  webfont-audit audit artifacts.json --json reports/font-display.json --pretty
"""
import sys
import asyncio
import json
from pathlib import Path

import click

from webfont_audit import __version__
from webfont_audit.artifacts import load_artifacts
from webfont_audit.config import load_config
from webfont_audit.engine import run_audit
from webfont_audit.logger import init_logging, logger
from webfont_audit.report import build_product, render_html, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
FAILED_AUDIT_EXIT_CODE = 2


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='webfont_audit, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд webfont_audit CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('audit', context_settings=CONTEXT_SETTINGS)
@click.argument(
    'artifacts_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию шаблоны пакета)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--strict', is_flag=True,
    help='Вернуть код 2, если найдены шрифты без font-display'
)
@click.pass_context
def audit_cmd(ctx, artifacts_path, json_output, html_output, template_dir, pretty, strict):
    """Провести аудит font-display и сгенерировать отчёты."""
    cfg = ctx.obj['config']
    try:
        artifacts = load_artifacts(artifacts_path)
    except Exception as e:
        print_error(f'Ошибка загрузки артефактов: {e}')

    try:
        result = asyncio.run(run_audit(artifacts, cfg))
    except Exception as e:
        logger.error("Audit failed: %s", e)
        print_error(f'Ошибка при аудите: {e}')

    product = build_product(result)

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(product, ensure_ascii=False, indent=indent))

    # JSON-отчёт
    if json_output:
        try:
            saved_json = render_json(product, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    # HTML-отчёт
    if html_output:
        try:
            saved_html = render_html(product, template_dir or cfg.template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    if strict and not result.passed:
        ctx.exit(FAILED_AUDIT_EXIT_CODE)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
