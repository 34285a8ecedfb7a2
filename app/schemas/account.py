from pydantic import BaseModel, ConfigDict, Field


class AccountBase(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    contract_ids: list[str] = Field(default_factory=list)


class Account(AccountBase):
    model_config = ConfigDict(from_attributes=True)

    id: str


class AccountCreate(AccountBase):
    pass


class AccountReplace(AccountBase):
    pass
