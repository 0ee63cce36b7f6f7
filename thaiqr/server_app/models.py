from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from thaiqr.generation import ThaiQRGeneratorInput
from thaiqr.history import HistoryItem, HistorySource
from thaiqr.parsing.payload import ThaiQRData


class DecodeRequest(BaseModel):
    payload: str
    source: HistorySource = HistorySource.TEXT


class GeneratorInputModel(BaseModel):
    aid: str = ""
    biller_id: str = ""
    reference1: str = ""
    reference2: Optional[str] = None
    amount: Optional[float] = None
    merchant_name: Optional[str] = None
    merchant_city: Optional[str] = None

    def to_input(self) -> ThaiQRGeneratorInput:
        return ThaiQRGeneratorInput(**self.model_dump())

    @classmethod
    def from_input(cls, data: ThaiQRGeneratorInput) -> "GeneratorInputModel":
        return cls(
            aid=data.aid,
            biller_id=data.biller_id,
            reference1=data.reference1,
            reference2=data.reference2,
            amount=data.amount,
            merchant_name=data.merchant_name,
            merchant_city=data.merchant_city,
        )


class SubTagModel(BaseModel):
    tag: str
    length: int
    value: str
    description: str


class FieldModel(BaseModel):
    tag: str
    length: int
    value: str
    description: str
    sub_tags: Optional[List[SubTagModel]] = None


class DecodedModel(BaseModel):
    version: str
    type: str
    merchant_id: Optional[str] = None
    merchant_name: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    reference: Optional[str] = None
    checksum: Optional[str] = None
    checksum_valid: Optional[bool] = None
    raw_data: str
    parsed_fields: List[FieldModel] = Field(default_factory=list)

    @classmethod
    def from_data(cls, data: ThaiQRData) -> "DecodedModel":
        fields: Dict[str, Any] = data.as_dict()
        # JSON has no NaN; a non-numeric amount is reported as null.
        if fields["amount"] is not None and math.isnan(fields["amount"]):
            fields["amount"] = None
        return cls(**fields)


class DecodeResponse(BaseModel):
    history_id: str
    data: DecodedModel


class ValidateResponse(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    qr_string: str
    qr_code_image: Optional[str] = None
    history_id: Optional[str] = None


class HistoryItemModel(BaseModel):
    id: str
    data: DecodedModel
    timestamp: datetime
    source: HistorySource

    @classmethod
    def from_item(cls, item: HistoryItem) -> "HistoryItemModel":
        return cls(
            id=item.id,
            data=DecodedModel.from_data(item.data),
            timestamp=item.timestamp,
            source=item.source,
        )
