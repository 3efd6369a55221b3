"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Business API (texto e imagem)
"""

__all__: list[str] = []
