"""Configuração (settings e logging) do cliente WhatsApp Business."""
