"""Price ticker wire model."""

from pydantic import BaseModel, ConfigDict, StrictStr


class PriceTicker(BaseModel):
    """Symbol price ticker as returned by ``/fapi/v1/ticker/price``."""

    model_config = ConfigDict(extra="ignore")

    symbol: StrictStr | None = None
    price: StrictStr
    time: int | None = None
