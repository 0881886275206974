"""Pricing models for stay price breakdowns.

All amounts are whole Indian Rupees.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PriceBreakdown(BaseModel):
    """Price breakdown for a stay.

    total is always subtotal + cleaning_fee + service_fee.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "nights": 3,
                    "subtotal": 7500,
                    "cleaning_fee": 2500,
                    "service_fee": 975,
                    "total": 10975,
                }
            ]
        },
    )

    nights: int = Field(..., ge=0, description="Number of nights")
    subtotal: int = Field(..., ge=0, description="Nightly rate x nights, in INR")
    cleaning_fee: int = Field(..., ge=0, description="Cleaning fee in INR")
    service_fee: int = Field(..., ge=0, description="Marketplace service fee in INR")
    total: int = Field(..., ge=0, description="Total amount in INR")

    @model_validator(mode="after")
    def check_total(self) -> "PriceBreakdown":
        """Reject breakdowns whose total does not add up."""
        expected = self.subtotal + self.cleaning_fee + self.service_fee
        if self.total != expected:
            raise ValueError(f"total {self.total} != components sum {expected}")
        return self
