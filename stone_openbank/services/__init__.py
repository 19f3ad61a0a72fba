from stone_openbank.services.pix import (
    IDEMPOTENCY_KEY_HEADER,
    IDEMPOTENCY_KEY_MAX_SIZE,
    PIXService,
)

__all__ = ['IDEMPOTENCY_KEY_HEADER', 'IDEMPOTENCY_KEY_MAX_SIZE', 'PIXService']
