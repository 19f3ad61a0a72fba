from datetime import datetime
from typing import Any, Optional, Union

from pydantic import Field

from stone_openbank.dto import OpenbankBaseModel
from stone_openbank.dto.pix.accounts import Account, Entity


class BeneficiaryAccount(Account):
    created_at: Optional[datetime] = None


class PixEntry(OpenbankBaseModel):
    id: str
    key: str
    key_type: Optional[str] = None
    key_status: Optional[str] = None
    account_id: Optional[str] = None
    participant_ispb: Optional[str] = None
    beneficiary_account: Optional[BeneficiaryAccount] = None
    beneficiary_entity: Optional[Entity] = None


class AllPixEntries(OpenbankBaseModel):
    # opaque, handed back to the caller as received
    cursor: Optional[Union[str, dict[str, Any]]] = None
    data: list[PixEntry] = Field(default_factory=list)
