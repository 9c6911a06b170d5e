"""
studystats - статистика персонального дашборда учебных сессий.

Пакеты:
- core/              : числовое ядро, модели сессий, JSON-контракты
- analytics/         : сводки дашборда и недельной истории
- report/            : таблицы экспортируемого отчёта
- recommendations/   : построение промпта для AI-рекомендаций
"""

__version__ = "0.1.0"
