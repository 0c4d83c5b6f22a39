"""
Демонстрационные сниппеты порождающих паттернов.

Каждый модуль самодостаточен и содержит функцию demo(), печатающую
фиксированные строки в stdout. Модули не делят между собой состояние.
"""
