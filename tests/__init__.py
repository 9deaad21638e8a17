"""
Тесты geo-uri

Содержит:
- tests/unit/          : Unit тесты отдельных модулей
"""
