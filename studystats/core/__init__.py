"""
Core numeric primitives, session domain models, and JSON contracts.

Этот пакет не зависит от внешних систем (хранилище, UI, AI API):
вызывающие стороны передают сюда обычные списки чисел и записи сессий.
"""
