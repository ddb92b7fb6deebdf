"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los tipos puros del problema: el tipo de documento y los
  resultados de validación (Pydantic v2).
- El dominio no conoce archivos, CLI ni configuración.
"""
