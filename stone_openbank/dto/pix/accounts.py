from typing import Optional

from stone_openbank.dto import OpenbankBaseModel


class Account(OpenbankBaseModel):
    account_code: Optional[str] = None
    branch_code: Optional[str] = None
    account_type: Optional[str] = None


class Entity(OpenbankBaseModel):
    document: Optional[str] = None
    document_type: Optional[str] = None
    name: Optional[str] = None


class Institution(OpenbankBaseModel):
    ispb: Optional[str] = None
    name: Optional[str] = None


class TargetOrSourceAccount(OpenbankBaseModel):
    """Party of a PIX payment, the same shape is used for source and target."""

    account: Optional[Account] = None
    entity: Optional[Entity] = None
    institution: Optional[Institution] = None


class Customer(OpenbankBaseModel):
    name: Optional[str] = None
    document: Optional[str] = None
    document_type: Optional[str] = None
