from enum import Enum
from typing import Optional

from pydantic import StrictBool, StrictStr

from .base import ResponseModel

class Domain(str, Enum):
    """Integration environment a record belongs to"""
    TEST = "test"
    LIVE = "live"

class Currency(str, Enum):
    """Currencies supported by the API"""
    NGN = "NGN"
    GHS = "GHS"
    ZAR = "ZAR"
    KES = "KES"
    USD = "USD"
    XOF = "XOF"
    EGP = "EGP"

class Authorization(ResponseModel):
    """Reusable card or bank authorization attached to a customer"""
    authorization_code: Optional[StrictStr] = None
    bin: Optional[StrictStr] = None
    last4: Optional[StrictStr] = None
    exp_month: Optional[StrictStr] = None
    exp_year: Optional[StrictStr] = None
    channel: Optional[StrictStr] = None
    card_type: Optional[StrictStr] = None
    bank: Optional[StrictStr] = None
    country_code: Optional[StrictStr] = None
    brand: Optional[StrictStr] = None
    reusable: Optional[StrictBool] = None
    signature: Optional[StrictStr] = None
    account_name: Optional[StrictStr] = None
    receiver_bank_account_number: Optional[StrictStr] = None
    receiver_bank: Optional[StrictStr] = None
