"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los generadores dependen de una fuente de
  azar abstracta, no de `random` directamente.
"""
