"""Conectores de borda (IO externo)."""
