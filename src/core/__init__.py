"""
Core: контейнер цифр, арифметика произвольной точности и текстовый I/O.

Не зависит от внешних систем; единственная внешняя зависимость — pydantic
для модели диапазона нативного целого.
"""
