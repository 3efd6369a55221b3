"""Camada app: constantes, serviços, observabilidade e bootstrap."""
