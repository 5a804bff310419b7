"""Validação de assinatura do webhook Meta (HMAC SHA-256)."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass

SIGNATURE_HEADER = "x-hub-signature-256"
_SIGNATURE_PREFIX = "sha256="


@dataclass(slots=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    skipped: bool = False
    error: str | None = None

    @property
    def validated(self) -> bool:
        """True apenas quando a assinatura foi de fato conferida."""
        return self.valid and not self.skipped


def compute_signature(raw_body: bytes, secret: str) -> str:
    """Calcula o header esperado (formato `sha256=<hex>`) para um corpo."""
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return f"{_SIGNATURE_PREFIX}{digest}"


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Valida a assinatura do webhook.

    Sem app secret configurado a validação é ignorada (skipped).
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = headers.get(SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    if not signature.startswith(_SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="invalid_signature_format")

    if not hmac.compare_digest(compute_signature(raw_body, secret), signature):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
