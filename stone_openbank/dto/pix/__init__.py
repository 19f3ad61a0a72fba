from stone_openbank.dto.pix.accounts import (
    Account,
    Customer,
    Entity,
    Institution,
    TargetOrSourceAccount,
)
from stone_openbank.dto.pix.entries import AllPixEntries, BeneficiaryAccount, PixEntry
from stone_openbank.dto.pix.invoice import CreateDynamicQRCodeInput, PIXInvoiceOutput
from stone_openbank.dto.pix.outbound import PIXOutboundOutput
from stone_openbank.dto.pix.pending_payment import (
    ConfirmPendingPaymentInput,
    CreatePendingPaymentInput,
    PendingPaymentOutput,
)
from stone_openbank.dto.pix.qrcode import (
    GetQRCodeInput,
    QRCode,
    QRCodeDynamic,
    QRCodeStatic,
)

__all__ = [
    'Account',
    'AllPixEntries',
    'BeneficiaryAccount',
    'ConfirmPendingPaymentInput',
    'CreateDynamicQRCodeInput',
    'CreatePendingPaymentInput',
    'Customer',
    'Entity',
    'GetQRCodeInput',
    'Institution',
    'PendingPaymentOutput',
    'PIXInvoiceOutput',
    'PIXOutboundOutput',
    'PixEntry',
    'QRCode',
    'QRCodeDynamic',
    'QRCodeStatic',
    'TargetOrSourceAccount',
]
