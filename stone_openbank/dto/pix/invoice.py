from datetime import datetime
from typing import Optional

from stone_openbank.dto import OpenbankBaseModel
from stone_openbank.dto.pix.accounts import Customer


class CreateDynamicQRCodeInput(OpenbankBaseModel):
    # this endpoint takes the amount as a string, e.g. '10.50'
    amount: str
    account_id: str
    key: str
    transaction_id: str
    customer: Optional[Customer] = None
    request_for_payer: Optional[str] = None


class PIXInvoiceOutput(OpenbankBaseModel):
    id: str
    account_id: str
    participant_ispb: Optional[str] = None
    key: Optional[str] = None
    key_type: Optional[str] = None
    transaction_id: Optional[str] = None
    amount: int
    additional_information: Optional[str] = None
    request_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    last_updated_by: Optional[str] = None
    qr_code_content: Optional[str] = None
    qr_code_image: Optional[str] = None
