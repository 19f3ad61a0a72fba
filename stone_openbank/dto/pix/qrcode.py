from typing import Optional

from pydantic import Field, model_validator

from stone_openbank.common.enums import QRCodeType
from stone_openbank.dto import OpenbankBaseModel
from stone_openbank.dto.pix.accounts import Customer


class GetQRCodeInput(OpenbankBaseModel):
    brcode: str
    owner_account: Optional[str] = None
    date: Optional[str] = Field(default=None, alias='payment_date')


class QRCodeStatic(OpenbankBaseModel):
    key: Optional[str] = None
    type: Optional[str] = None
    transaction_id: Optional[str] = None
    amount: Optional[int] = None


class QRCodeDynamic(OpenbankBaseModel):
    created_at: Optional[str] = None
    requested_at: Optional[str] = None
    expiration: Optional[int] = None  # seconds
    key: Optional[str] = None
    customer: Optional[Customer] = None
    revision: Optional[int] = None
    request_for_payer: Optional[str] = None
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    amount: Optional[int] = None


class QRCode(OpenbankBaseModel):
    """Decoded BR-code, `type` tells which of static or dynamic is filled."""

    type: str
    static: Optional[QRCodeStatic] = None
    dynamic: Optional[QRCodeDynamic] = None

    @model_validator(mode='after')
    def keep_payload_matching_type(self) -> 'QRCode':
        if self.type == QRCodeType.STATIC.value:
            self.dynamic = None
        elif self.type == QRCodeType.DYNAMIC.value:
            self.static = None
        return self

    @property
    def is_static(self) -> bool:
        return self.type == QRCodeType.STATIC.value

    @property
    def is_dynamic(self) -> bool:
        return self.type == QRCodeType.DYNAMIC.value
