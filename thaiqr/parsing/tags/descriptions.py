"""
Static tag description tables for Thai QR (EMVCo merchant-presented) payloads.

All tables are read-only mappings built once at import time.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_MERCHANT_ACCOUNT = "Merchant Account Information"
_UNRESERVED = "Unreserved Templates"

_fields: dict[str, str] = {
    "00": "Payload Format Indicator",
    "01": "Point of Initiation Method",
    "02": f"{_MERCHANT_ACCOUNT} (Visa)",
    "03": f"{_MERCHANT_ACCOUNT} (Mastercard)",
    "04": f"{_MERCHANT_ACCOUNT} (EMV)",
    "05": f"{_MERCHANT_ACCOUNT} (Discover)",
    "06": f"{_MERCHANT_ACCOUNT} (JCB)",
    "07": f"{_MERCHANT_ACCOUNT} (Union Pay)",
    "08": f"{_MERCHANT_ACCOUNT} (American Express)",
}
_fields.update({f"{tag:02d}": _MERCHANT_ACCOUNT for tag in range(9, 15)})
_fields.update({
    "15": f"{_MERCHANT_ACCOUNT} (PromptPay)",
    "29": f"{_MERCHANT_ACCOUNT} (PromptPay)",
    "30": _MERCHANT_ACCOUNT,
    "52": "Merchant Category Code",
    "53": "Transaction Currency",
    "54": "Transaction Amount",
    "55": "Tip or Convenience Indicator",
    "56": "Value of Convenience Fee Fixed",
    "57": "Value of Convenience Fee Percentage",
    "58": "Country Code",
    "59": "Merchant Name",
    "60": "Merchant City",
    "61": "Postal Code",
    "62": "Additional Data Field Template",
    "63": "CRC",
    "64": "Merchant Information - Language Template",
    "65": "RFU for EMVCo",
})
_fields.update({f"{tag:02d}": _UNRESERVED for tag in range(80, 100)})

# Top-level tag -> description.
FIELD_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(_fields)

_CARD_NETWORK = {
    "00": "Globally Unique Identifier",
    "01": "Payment Network Specific",
    "02": "Merchant Identifier",
    "03": "Merchant Category Code",
}

_PROMPTPAY = {
    "00": "Globally Unique Identifier",
    "01": "Payment Network Specific",
    "02": "Mobile Number",
    "03": "National ID",
    "04": "eWallet ID",
}

# Parent tag -> sub-tag -> description.
SUB_TAG_DESCRIPTIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    # Visa
    "02": MappingProxyType({
        **_CARD_NETWORK,
        "04": "Transaction Currency",
        "05": "Transaction Amount",
        "06": "Country Code",
        "07": "Merchant Name",
        "08": "Merchant City",
    }),
    # Mastercard
    "03": MappingProxyType({
        **_CARD_NETWORK,
        "04": "Transaction Currency",
        "05": "Transaction Amount",
    }),
    # EMV
    "04": MappingProxyType(dict(_CARD_NETWORK)),
    "15": MappingProxyType(dict(_PROMPTPAY)),
    "29": MappingProxyType(dict(_PROMPTPAY)),
    "30": MappingProxyType({
        **_CARD_NETWORK,
        "04": "Transaction Type",
        "05": "Additional Data",
        "06": "Terminal ID",
        "07": "Store ID",
        "08": "Loyalty Program",
        "09": "Merchant Category",
    }),
    "62": MappingProxyType({
        "01": "Bill Number",
        "02": "Mobile Number",
        "03": "Store Label",
        "04": "Loyalty Number",
        "05": "Reference Label",
        "06": "Customer Label",
        "07": "Terminal Label",
        "08": "Purpose of Transaction",
        "09": "Additional Consumer Data Request",
        "10": "Merchant Tax ID",
        "11": "Merchant Channel",
    }),
    "64": MappingProxyType({
        "00": "Language Preference",
        "01": "Merchant Name - Alternate Language",
        "02": "Merchant City - Alternate Language",
    }),
    "80": MappingProxyType({
        "00": "Globally Unique Identifier",
        "01": "Context Specific Data",
        "02": "Context Specific Data",
        "03": "Context Specific Data",
    }),
    "81": MappingProxyType({
        "00": "Globally Unique Identifier",
        "01": "Context Specific Data",
    }),
})

_generic: dict[str, str] = {
    "00": "Globally Unique Identifier",
    "01": "Payment Network Specific / Context Data",
    "02": "Merchant/Account Identifier",
    "03": "Category/Classification Code",
    "04": "Transaction Type/Currency",
    "05": "Amount/Reference Data",
    "06": "Country/Terminal Code",
    "07": "Name/Location Data",
    "08": "City/Additional Info",
    "09": "Additional Consumer Data",
}
_generic.update({f"{tag:02d}": "Reserved Data Element" for tag in range(10, 21)})

# Fallback when the parent has no table or no entry: common EMV sub-tag meanings.
GENERIC_SUB_TAG_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(_generic)

del _fields, _generic


def field_description(tag: str) -> str:
    return FIELD_DESCRIPTIONS.get(tag, f"Unknown field ({tag})")


def sub_tag_description(parent_tag: str, sub_tag: str) -> str:
    """
    Describe a sub-tag in the context of its parent field.

    Lookup order: the parent's own table, then the generic EMV table, then a
    plain ``"Sub-tag <code>"`` label.
    """
    parent = SUB_TAG_DESCRIPTIONS.get(parent_tag)
    if parent is not None and sub_tag in parent:
        return parent[sub_tag]
    return GENERIC_SUB_TAG_DESCRIPTIONS.get(sub_tag, f"Sub-tag {sub_tag}")
