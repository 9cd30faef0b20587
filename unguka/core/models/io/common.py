"""
Shared field constraints for the API I/O schemas.
"""

from __future__ import annotations

RWANDA_PHONE_PATTERN = r"^(07[2-8]\d{7}|\+2507[2-8]\d{7})$"
INTERNATIONAL_PHONE_PATTERN = r"^\+?[1-9]\d{7,14}$"
EMAIL_PATTERN = r"^\S+@\S+\.\S+$"
REGISTRATION_NUMBER_PATTERN = r"^CF\d{5}$"
NATIONAL_ID_PATTERN = r"^\d{16}$"
PICTURE_URL_PATTERN = r"(?i)^\S+\.(jpg|jpeg|png|gif|webp)$"
