from typing import TYPE_CHECKING, Optional

from requests import Request

from stone_openbank.common.enums import HTTPMethod
from stone_openbank.common.exceptions import InvalidIdempotencyKeyException
from stone_openbank.common.result import APIResult
from stone_openbank.dto.pix import (
    AllPixEntries,
    ConfirmPendingPaymentInput,
    CreateDynamicQRCodeInput,
    CreatePendingPaymentInput,
    GetQRCodeInput,
    PendingPaymentOutput,
    PIXInvoiceOutput,
    PIXOutboundOutput,
    QRCode,
)

if TYPE_CHECKING:
    from stone_openbank.client import OpenbankClient

IDEMPOTENCY_KEY_HEADER = 'x-stone-idempotency-key'
IDEMPOTENCY_KEY_MAX_SIZE = 72

OUTBOUND_PIX_PAYMENTS_PATH = '/api/v1/pix/outbound_pix_payments'
OUTBOUND_PIX_PAYMENT_PATH = '/api/v1/pix/outbound_pix_payments/{pix_id}'
CONFIRM_PIX_PAYMENT_PATH = '/api/v1/pix/outbound_pix_payments/{pix_id}/actions/confirm'
BRCODES_PATH = '/api/v1/pix/outbound_pix_payments/brcodes'
PIX_PAYMENT_INVOICES_PATH = '/api/v1/pix_payment_invoices'
PIX_ENTRIES_PATH = '/api/v1/pix/{account_id}/entries'


def set_idempotency_key(request: Request, idempotency_key: str) -> None:
    """
    Attaches the idempotency header to a request that was not sent yet.

    Raises:
        InvalidIdempotencyKeyException: The key takes more than
            IDEMPOTENCY_KEY_MAX_SIZE bytes once UTF-8 encoded.
    """
    if len(idempotency_key.encode('utf-8')) > IDEMPOTENCY_KEY_MAX_SIZE:
        raise InvalidIdempotencyKeyException(max_size=IDEMPOTENCY_KEY_MAX_SIZE)
    request.headers[IDEMPOTENCY_KEY_HEADER] = idempotency_key


class PIXService:
    """
    PIX endpoints of the Openbank API.

    Every method is a single round trip: nothing is retried here, safe
    retries of create and confirm calls depend on reusing the same
    idempotency key.
    """

    def __init__(self, client: 'OpenbankClient') -> None:
        self.client = client

    def get_outbound_pix(
        self, pix_id: str, *, timeout: Optional[float] = None
    ) -> APIResult[PIXOutboundOutput]:
        """Retrieves the details of an outbound PIX payment."""
        path = self.client.build_path(OUTBOUND_PIX_PAYMENT_PATH, pix_id=pix_id)
        request = self.client.new_api_request(HTTPMethod.GET, path)

        response, pix = self.client.do(request, PIXOutboundOutput, timeout=timeout)
        return APIResult(value=pix, response=response)

    def get_qrcode_data(
        self, qrcode_input: GetQRCodeInput, *, timeout: Optional[float] = None
    ) -> APIResult[QRCode]:
        """
        Decodes a BR-code through the API.

        The BR-code is not checked locally, a malformed one comes back as an
        APIException.
        """
        request = self.client.new_api_request(
            HTTPMethod.GET, BRCODES_PATH, qrcode_input
        )

        response, qrcode = self.client.do(request, QRCode, timeout=timeout)
        return APIResult(value=qrcode, response=response)

    def create_dynamic_qrcode(
        self,
        invoice_input: CreateDynamicQRCodeInput,
        idempotency_key: str,
        *,
        timeout: Optional[float] = None,
    ) -> APIResult[PIXInvoiceOutput]:
        """Creates a dynamic PIX QR-code to receive a payment."""
        request = self.client.new_api_request(
            HTTPMethod.POST, PIX_PAYMENT_INVOICES_PATH, invoice_input
        )
        set_idempotency_key(request, idempotency_key)

        response, invoice = self.client.do(request, PIXInvoiceOutput, timeout=timeout)
        return APIResult(value=invoice, response=response)

    def get_entries(
        self,
        account_id: str,
        idempotency_key: str,
        *,
        timeout: Optional[float] = None,
    ) -> APIResult[AllPixEntries]:
        """Lists the PIX keys registered for an account."""
        path = self.client.build_path(PIX_ENTRIES_PATH, account_id=account_id)
        request = self.client.new_api_request(HTTPMethod.GET, path)
        set_idempotency_key(request, idempotency_key)

        response, entries = self.client.do(request, AllPixEntries, timeout=timeout)
        return APIResult(value=entries, response=response)

    def create_pending_payment(
        self,
        payment: CreatePendingPaymentInput,
        idempotency_key: str,
        *,
        timeout: Optional[float] = None,
    ) -> APIResult[PendingPaymentOutput]:
        """Creates a pending payment, it only moves money after confirm_pending_payment."""
        request = self.client.new_api_request(
            HTTPMethod.POST, OUTBOUND_PIX_PAYMENTS_PATH, payment
        )
        set_idempotency_key(request, idempotency_key)

        response, pending_payment = self.client.do(
            request, PendingPaymentOutput, timeout=timeout
        )
        return APIResult(value=pending_payment, response=response)

    def confirm_pending_payment(
        self,
        confirmation: ConfirmPendingPaymentInput,
        idempotency_key: str,
        pix_id: str,
        *,
        timeout: Optional[float] = None,
    ) -> APIResult[None]:
        """Confirms a pending payment. The API answers with no body."""
        path = self.client.build_path(CONFIRM_PIX_PAYMENT_PATH, pix_id=pix_id)
        request = self.client.new_api_request(HTTPMethod.POST, path, confirmation)
        set_idempotency_key(request, idempotency_key)

        response, _ = self.client.do(request, timeout=timeout)
        return APIResult(value=None, response=response)
