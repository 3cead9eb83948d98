# === FILE: seo_robots/cli.py ===
#!/usr/bin/env python3
"""
Точка входа командной строки seo-robots.

Команды:
  render    Вычислить значение meta robots или X-Robots-Tag
  validate  Проверить набор директив (значения и конфликты)
  check     Полный отчёт по набору директив (stdout, JSON или HTML)
  legacy    Показать директивы для старого целочисленного кода
  migrate   Перевести сохранённую конфигурацию со старых кодов на директивы
  catalog   Показать справочник директив
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  seo-robots render noindex nofollow max-snippet:50
  seo-robots render --target x-robots noindex googlebot:nofollow
  seo-robots validate --scoped googlebot:index googlebot:noindex
"""
import json
import sys
from pathlib import Path

import click

from seo_robots import __version__
from seo_robots.aggregator import aggregate_report
from seo_robots.builder import (
    build_from_flat,
    build_from_structured,
    build_x_robots_from_structured,
    convert_legacy_flat_to_structured,
)
from seo_robots.config import load_config, read_config_file, write_config_file
from seo_robots.legacy import code_to_directives
from seo_robots.logger import init_logging
from seo_robots.migration import migrate_config
from seo_robots.presentation import get_directive_catalog
from seo_robots.report.html_report import render_html
from seo_robots.report.json_report import render_json
from seo_robots.validator import validate_flat, validate_structured

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _dump(data, pretty: bool) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2 if pretty else None)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='seo-robots, version %(version)s')
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
    """Группа команд seo-robots CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('render', context_settings=CONTEXT_SETTINGS)
@click.argument('tokens', nargs=-1, required=True)
@click.option(
    '--target', '-t', 'target',
    default='meta', show_default=True,
    type=click.Choice(['meta', 'x-robots']),
    help='Формат результата: meta robots или X-Robots-Tag'
)
@click.option(
    '--structured', is_flag=True,
    help='Разобрать токены в записи {value, bot, modification} перед рендерингом meta'
)
def render(tokens, target, structured):
    """Вычислить строку директив из токенов вида [bot:]name[:value]."""
    tokens = list(tokens)
    if target == 'x-robots':
        click.echo(build_x_robots_from_structured(convert_legacy_flat_to_structured(tokens)))
    elif structured:
        click.echo(build_from_structured(convert_legacy_flat_to_structured(tokens)))
    else:
        click.echo(build_from_flat(tokens))


@cli.command('validate', context_settings=CONTEXT_SETTINGS)
@click.argument('tokens', nargs=-1, required=True)
@click.option(
    '--scoped', is_flag=True,
    help='Проверять конфликты отдельно для каждого бота'
)
def validate_command(tokens, scoped):
    """Проверить директивы; код выхода 1 при ошибках."""
    tokens = list(tokens)
    if scoped:
        result = validate_structured(convert_legacy_flat_to_structured(tokens))
    else:
        result = validate_flat(tokens)
    if not result.valid:
        print_error('\n'.join(result.errors))
    click.echo('OK')


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('tokens', nargs=-1, required=True)
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
    '--template', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
def check(tokens, json_output, html_output, template_dir, pretty):
    """Разобрать, проверить и отрендерить директивы, сформировать отчёт."""
    report = aggregate_report(list(tokens))

    # Без файлов отчёта печатаем JSON в stdout
    if not json_output and not html_output:
        click.echo(report.json(pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('legacy', context_settings=CONTEXT_SETTINGS)
@click.argument('code', type=int)
def legacy(code):
    """Показать директивы для старого кода meta robots (1–8)."""
    click.echo(', '.join(code_to_directives(code)))


@cli.command('migrate', context_settings=CONTEXT_SETTINGS)
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Куда сохранить результат (YAML/JSON по расширению); иначе stdout'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
def migrate(source, output, pretty):
    """Перевести конфигурацию со старых целочисленных кодов на списки директив."""
    try:
        data = read_config_file(source)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    result = migrate_config(data)

    if output is None:
        click.echo(_dump(result.data, pretty))
        return

    try:
        saved = write_config_file(result.data, output, pretty=pretty)
    except (OSError, ValueError) as e:
        print_error(f'Ошибка при сохранении конфигурации: {e}')
    migrated = ', '.join(result.migrated) if result.changed else 'nothing to migrate'
    click.echo(f'Migrated ({migrated}): {saved}')


@cli.command('catalog', context_settings=CONTEXT_SETTINGS)
@click.option('--category', default=None, help='Показать только одну категорию')
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
def catalog(category, pretty):
    """Показать справочник директив в JSON."""
    data = get_directive_catalog()
    if category is not None:
        if category not in data:
            print_error(f'Неизвестная категория: {category}. Доступны: {", ".join(data)}')
        data = {category: data[category]}
    click.echo(_dump(data, pretty))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию и вычисленные значения в JSON."""
    try:
        cfg = load_config(ctx.obj['config_path'])
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    click.echo(_dump(cfg.summary(), True))


if __name__ == "__main__":
    cli()
