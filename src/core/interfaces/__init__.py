"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite sustituir transporte, rate gate y token supplier en tests.
"""
