"""Domain models.

Core business entities that represent the problem domain.
These models are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass, field, fields, replace
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Union

from config.constants import DEFAULT_PLEASE_NOTE, LISTING_DEFAULT_DETAILS, PRIMARY_DETAIL_FIELDS
from domain.exceptions import InvalidDetailFieldError


class Version(str, Enum):
    """Egg / eggless variant of a cake. UNSET renders as nothing."""

    EGG = "Egg"
    EGGLESS = "Eggless"
    UNSET = ""

    @classmethod
    def from_text(cls, text: Optional[str]) -> "Version":
        """Accept only the exact labels; anything else is unset."""
        if text == cls.EGG.value:
            return cls.EGG
        if text == cls.EGGLESS.value:
            return cls.EGGLESS
        return cls.UNSET


@dataclass(frozen=True)
class Amount:
    """A numeric quantity with its unit token.

    Recognized units are canonical ("g", "kg", "lb", "oz", "ml", "l");
    anything else is kept verbatim.
    """

    value: Decimal
    unit: str = ""

    def scale(self, factor: Union[int, Decimal]) -> "Amount":
        """Return a new Amount multiplied by the given factor."""
        return Amount(value=self.value * factor, unit=self.unit)


@dataclass(frozen=True)
class ProductDetails:
    """The key-value block of a product description.

    Immutable value object; edits produce a new record via ``with_field``.
    """

    cake_flavour: str = ""
    version: Version = Version.UNSET
    shape: str = ""
    servings: str = ""
    toppings: str = ""
    weight: str = ""
    country_of_origin: str = ""

    def __post_init__(self) -> None:
        """Coerce version text into the enum."""
        if not isinstance(self.version, Version):
            try:
                version = Version(self.version or "")
            except ValueError:
                raise ValueError(f"Invalid version: {self.version!r}") from None
            object.__setattr__(self, "version", version)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def listing_defaults(cls) -> "ProductDetails":
        """Pre-filled record for a brand new product."""
        return cls(**LISTING_DEFAULT_DETAILS)

    def get(self, name: str) -> str:
        """Get a field's text value (version as its label)."""
        if name not in self.field_names():
            raise InvalidDetailFieldError(f"Unknown product detail field: {name}")
        value = getattr(self, name)
        if isinstance(value, Version):
            return value.value
        return value

    def with_field(self, name: str, value: str) -> "ProductDetails":
        """Return a copy with one field replaced."""
        if name not in self.field_names():
            raise InvalidDetailFieldError(f"Unknown product detail field: {name}")
        if name == "version":
            return replace(self, version=Version.from_text(value))
        return replace(self, **{name: value})

    def is_empty(self) -> bool:
        """True when no field carries visible text."""
        return not any(self.get(name).strip() for name in self.field_names())

    def has_primary_fields(self) -> bool:
        """True when flavour, weight, servings or toppings is set."""
        return any(getattr(self, name) for name in PRIMARY_DETAIL_FIELDS)


@dataclass(frozen=True)
class StructuredDescription:
    """Overview, details and please-note: the structured side of a description."""

    overview: str = ""
    details: ProductDetails = field(default_factory=ProductDetails)
    please_note: str = DEFAULT_PLEASE_NOTE


@dataclass(frozen=True)
class SizeVariant:
    """A purchasable size of a product (weight + price)."""

    weight: str
    price: Decimal
    discount_percent: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Variant price cannot be negative: {self.price}")

    def is_complete(self) -> bool:
        """A variant counts once it has a weight and a positive price."""
        return bool(self.weight) and self.price > 0


@dataclass(frozen=True)
class Subcategory:
    """A catalog subcategory; its name doubles as the cake flavour."""

    id: Union[int, str]
    name: str


def find_subcategory(
    subcategories: Iterable[Subcategory],
    subcategory_id: Union[int, str, None],
) -> Optional[Subcategory]:
    """Find a subcategory by id, tolerating int/str id mismatches."""
    if subcategory_id is None or subcategory_id == "":
        return None
    wanted = str(subcategory_id)
    for subcategory in subcategories:
        if str(subcategory.id) == wanted:
            return subcategory
    return None
