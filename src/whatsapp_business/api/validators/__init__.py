"""Validators por canal: validação de dados antes de sair do processo.

Estrutura:
- whatsapp/: WhatsApp Business API
"""

__all__: list[str] = []
