"""Data models for SauceDemo and JSONPlaceholder entities."""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Represents a product listed in the SauceDemo catalog."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name, verbatim")
    price: Decimal = Field(ge=0, allow_inf_nan=False, description="Price in USD")


class Credentials(BaseModel):
    """Login credentials."""

    username: str
    password: str


class CheckoutInfo(BaseModel):
    """Customer information submitted on the first checkout step."""

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    postal_code: str = Field(alias="zip")

    model_config = ConfigDict(populate_by_name=True)


class PriceCheck(BaseModel):
    """Comparison between the computed and the displayed item total."""

    expected: Decimal = Field(description="Sum of the selected prices")
    actual: Decimal = Field(description="Item total shown on the overview step")
    tolerance: Decimal = Field(default=Decimal("0.01"), ge=0)

    @property
    def difference(self) -> Decimal:
        return abs(self.actual - self.expected)

    @property
    def matches(self) -> bool:
        return self.difference <= self.tolerance


class PurchaseReport(BaseModel):
    """Outcome of one purchase-flow run."""

    selected: list[Product] = Field(default_factory=list, description="Products driven through checkout")
    cart_names: list[str] = Field(default_factory=list, description="Names shown in the cart view")
    price_check: Optional[PriceCheck] = Field(None, description="Item total reconciliation")
    confirmation: Optional[str] = Field(None, description="Message shown after finishing")
    seed: Optional[int] = Field(None, description="Seed used for the random selection")

    @property
    def selected_names(self) -> list[str]:
        return [product.name for product in self.selected]


class NewPost(BaseModel):
    """Payload for creating or replacing a JSONPlaceholder post."""

    title: str
    body: str
    user_id: int = Field(alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class Post(NewPost):
    """A JSONPlaceholder post as returned by the API."""

    id: int
