"""Camada api: validação, construção de payload e conectores HTTP."""
