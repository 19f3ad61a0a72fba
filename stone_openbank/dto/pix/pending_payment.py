from datetime import datetime
from typing import Optional

from stone_openbank.dto import OpenbankBaseModel
from stone_openbank.dto.pix.accounts import TargetOrSourceAccount


class CreatePendingPaymentInput(OpenbankBaseModel):
    account_id: Optional[str] = None
    amount: Optional[int] = None  # cents
    description: Optional[str] = None
    transaction_id: Optional[str] = None
    key: Optional[str] = None
    source: Optional[TargetOrSourceAccount] = None


class PendingPaymentOutput(OpenbankBaseModel):
    id: str
    account_id: str
    amount: int
    created_at: datetime
    created_by: Optional[str] = None
    description: Optional[str] = None
    transaction_id: Optional[str] = None
    key: Optional[str] = None
    end_to_end_id: Optional[str] = None
    failed_at: Optional[datetime] = None
    failure_reason_code: Optional[str] = None
    failure_reason_description: Optional[str] = None
    money_reserved_at: Optional[datetime] = None
    refunded_amount: Optional[int] = None
    request_id: Optional[str] = None
    settled_at: Optional[datetime] = None
    # open set, see PixPaymentStatus for the values known today
    status: str
    source: Optional[TargetOrSourceAccount] = None
    target: Optional[TargetOrSourceAccount] = None


class ConfirmPendingPaymentInput(OpenbankBaseModel):
    amount: int
    description: str = ''
    add_target_to_contacts: bool = False
