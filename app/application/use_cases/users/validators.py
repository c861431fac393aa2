"""Common validation helpers for user use cases."""

from app.domain.exceptions import ValidationError


def normalize_email(email: str) -> str:
    """Return ``email`` stripped and lower-cased or raise ``ValidationError``."""

    normalized = email.strip().lower()
    if normalized.count("@") != 1:
        raise ValidationError("El correo electrónico no es válido")

    local_part, domain = normalized.split("@", 1)
    if not local_part or not domain:
        raise ValidationError("El correo electrónico no es válido")

    return normalized


def normalize_name(name: str) -> str:
    normalized = " ".join(name.split())
    if not normalized:
        raise ValidationError("El nombre es obligatorio")
    return normalized
