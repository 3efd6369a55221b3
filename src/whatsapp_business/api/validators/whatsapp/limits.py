"""Limites e padrões de formato impostos pela API Meta/WhatsApp."""

from __future__ import annotations

import re

MIN_TEXT_LENGTH = 1
MAX_TEXT_LENGTH = 4096
MAX_TEMPLATE_NAME_LENGTH = 512

# [+][código do país][código de área][número], separadores "-", "." ou espaço.
# Cada um dos cinco grupos exige ao menos um dígito: mínimo de 5, máximo de 25.
PHONE_NUMBER_PATTERN = re.compile(
    r"\+?[0-9]{1,4}?[-. ]?\(?[0-9]{1,4}?\)?[-. ]?[0-9]{1,4}[-. ]?[0-9]{1,4}[-. ]?[0-9]{1,9}"
)
TEMPLATE_NAME_PATTERN = re.compile(r"[a-z0-9_]+(\.[a-z0-9_]+)*")
LANGUAGE_CODE_PATTERN = re.compile(r"[a-z]{2}_[A-Z]{2}")

PHONE_NUMBER_ERROR = (
    "Invalid phone number format. "
    "Expected format: [+][country code][area code][phone number]"
)
MESSAGE_TEXT_ERROR = (
    f"Message text must be between {MIN_TEXT_LENGTH} and {MAX_TEXT_LENGTH} characters"
)
TEMPLATE_NAME_ERROR = (
    r"Template name must match pattern ^[a-z0-9_]+(\.[a-z0-9_]+)*$ "
    f"and be at most {MAX_TEMPLATE_NAME_LENGTH} characters"
)
LANGUAGE_CODE_ERROR = "Language code must be in format 'xx_YY'"
