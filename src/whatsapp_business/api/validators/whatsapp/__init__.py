"""Validadores de conformidade para mensagens WhatsApp/Meta.

Cada validador recebe uma string e a devolve inalterada quando válida,
ou levanta ValidationError com mensagem fixa. Os predicados `is_valid_*`
são puros e nunca levantam.

Uso:
    from whatsapp_business.api.validators.whatsapp import validate_phone_number

    to = validate_phone_number("5215551234567")
"""

from whatsapp_business.api.validators.whatsapp.limits import (
    MAX_TEMPLATE_NAME_LENGTH,
    MAX_TEXT_LENGTH,
    MIN_TEXT_LENGTH,
)
from whatsapp_business.api.validators.whatsapp.phone import (
    is_valid_phone_number,
    validate_phone_number,
)
from whatsapp_business.api.validators.whatsapp.template import (
    is_valid_language_code,
    is_valid_template_name,
    validate_language_code,
    validate_template_name,
)
from whatsapp_business.api.validators.whatsapp.text import (
    is_valid_message_text,
    validate_message_text,
)
from whatsapp_business.utils.errors import ValidationError

__all__ = [
    "MAX_TEMPLATE_NAME_LENGTH",
    "MAX_TEXT_LENGTH",
    "MIN_TEXT_LENGTH",
    "ValidationError",
    "is_valid_language_code",
    "is_valid_message_text",
    "is_valid_phone_number",
    "is_valid_template_name",
    "validate_language_code",
    "validate_message_text",
    "validate_phone_number",
    "validate_template_name",
]
