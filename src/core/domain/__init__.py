"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los valores puros y estrictos (Pydantic v2): RUT, patente, empresa.
- El dominio no conoce CLI, archivos ni fuentes de azar: solo conceptos del problema.
"""
