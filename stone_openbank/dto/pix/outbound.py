from typing import Optional

from stone_openbank.dto import OpenbankBaseModel
from stone_openbank.dto.pix.accounts import TargetOrSourceAccount


class PIXOutboundOutput(OpenbankBaseModel):
    """
    Read-only view of an outbound PIX payment.

    This endpoint has been seen returning timestamps in more than one format,
    so they are kept as the raw strings the API sends.
    """

    id: str
    account_id: str
    amount: int
    created_at: Optional[str] = None
    description: Optional[str] = None
    end_to_end_id: Optional[str] = None
    fee: Optional[int] = None
    refunded_amount: Optional[int] = None
    transaction_id: Optional[str] = None
    status: str
    source: Optional[TargetOrSourceAccount] = None
    target: Optional[TargetOrSourceAccount] = None
    created_by: Optional[str] = None
    failed_at: Optional[str] = None
    failure_reason_code: Optional[str] = None
    failure_reason_description: Optional[str] = None
    key: Optional[str] = None
    money_reserved_at: Optional[str] = None
    request_id: Optional[str] = None
    settled_at: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[str] = None
