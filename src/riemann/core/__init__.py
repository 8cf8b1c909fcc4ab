"""
Core: численное ядро, классификация полюсов, контракты и модель значения.

Модули ядра не имеют внешнего состояния: все операции — чистые функции
над парами (re, im) или над неизменяемыми значениями Complex.
"""
