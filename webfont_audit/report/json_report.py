# webfont_audit/report/json_report.py

"""
Генерация JSON-отчёта аудита font-display.

Сериализация словаря отчёта (build_product) в файл.
"""
import json
from pathlib import Path
from typing import Any, Mapping


def render_json(product: Mapping[str, Any], output_path: Path | str, pretty: bool = False) -> Path:
    """
    Сохраняет отчёт product в формате JSON по указанному пути.

    :param product: словарь, построенный build_product
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо компактной записи
    :return: Path сохранённого файла

    Пример:
    ```python
    from webfont_audit.report.json_report import render_json
    report_path = render_json(build_product(result), 'reports/font-display.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(dict(product), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
