from datetime import date
from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.domain.contract_status import ContractStatus


class Customer(BaseModel):
    """Customer contact snapshot embedded in a contract."""

    model_config = ConfigDict(from_attributes=True)

    name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    address: str | None = None


class ContractBase(BaseModel):
    game_id: str | None = None
    customer_info: Customer | None = None
    start_date: date | None = None
    end_date: date | None = None
    payment_method: str | None = Field(None, max_length=50)
    shipment_method: str | None = Field(None, max_length=50)
    shipping_fee: float | None = Field(None, ge=0, description="Shipping fee, non-negative")
    late_fee: float | None = Field(None, ge=0, description="Late fee, non-negative")
    total_cost: float | None = Field(None, ge=0, description="Total cost, non-negative")

    @model_validator(mode="after")
    def validate_end_date_after_start_date(self):
        """Ensure end_date doesn't precede start_date."""
        if self.start_date is not None and self.end_date is not None:
            if self.end_date < self.start_date:
                raise ValueError(
                    f"end_date ({self.end_date}) cannot precede start_date ({self.start_date})"
                )
        return self


class Contract(ContractBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    status: ContractStatus


class ContractCreate(ContractBase):
    status: ContractStatus = ContractStatus.PENDING


class ContractReplace(ContractBase):
    """Whole-record replacement. Omitted fields are cleared."""

    status: ContractStatus
