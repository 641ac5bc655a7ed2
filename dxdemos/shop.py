"""Storefront data model and a client for the fake store web API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Mapping

import requests

from .calculator import _format_float

BASE_URL = "https://fakestoreapi.com"

_DATETIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):?(\d{2}))"
)


def _get(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _int(data: Any, key: str) -> int:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"field `{key}` must not be negative, got {value!r}")
    return value


def _float(data: Any, key: str) -> float:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{key}` must be a number, got {value!r}")
    return float(value)


def _str(data: Any, key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got {value!r}")
    return value


def _list(data: Any, key: str) -> list:
    value = _get(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field `{key}` must be a list, got {value!r}")
    return value


def _parse_datetime(text: Any) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime."""
    if not isinstance(text, str):
        raise ValueError(f"expected a timestamp string, got {text!r}")
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
    fraction = match.group(7) or ""
    micros = int((fraction + "000000")[:6])
    if match.group(8):
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(match.group(10)), minutes=int(match.group(11)))
        tz = timezone(-offset if match.group(9) == "-" else offset)
    moment = datetime(year, month, day, hour, minute, second, micros, tzinfo=tz)
    return moment.astimezone(timezone.utc)


@dataclass
class Rating:
    rate: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rating:
        return cls(rate=_float(data, "rate"), count=_int(data, "count"))

    def __str__(self) -> str:
        if self.rate != self.rate or self.rate <= 0:
            rounded = 0
        else:
            rounded = int(Decimal(self.rate).to_integral_value(rounding=ROUND_HALF_UP))
        if rounded > 5:
            raise ValueError(f"rating {self.rate} is above five stars")
        stars = "★" * rounded + "☆" * (5 - rounded)
        return f"{stars} ({_format_float(self.rate)}) ({self.count} ratings)"


@dataclass
class Product:
    id: int = 0
    title: str = ""
    price: float = 0.0
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = field(default_factory=Rating)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Product:
        return cls(
            id=_int(data, "id"),
            title=_str(data, "title"),
            price=_float(data, "price"),
            description=_str(data, "description"),
            category=_str(data, "category"),
            image=_str(data, "image"),
            rating=Rating.from_dict(_get(data, "rating")),
        )


class Sort(Enum):
    DESCENDING = "desc"
    ASCENDING = "asc"

    def __str__(self) -> str:
        return self.value


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Size:
        """Parse a size name, ignoring case."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown size: {text!r}") from None


@dataclass
class FullName:
    firstname: str
    lastname: str

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> FullName:
        return cls(firstname=_str(data, "firstname"), lastname=_str(data, "lastname"))


@dataclass
class User:
    id: int
    email: str
    username: str
    password: str = field(repr=False)
    name: FullName
    phone: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return cls(
            id=_int(data, "id"),
            email=_str(data, "email"),
            username=_str(data, "username"),
            password=_str(data, "password"),
            name=FullName._from_dict(_get(data, "name")),
            phone=_str(data, "phone"),
        )


@dataclass
class ProductInCart:
    product_id: int
    quantity: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProductInCart:
        return cls(product_id=_int(data, "productId"), quantity=_int(data, "quantity"))


@dataclass
class Cart:
    id: int
    user_id: int
    data: str
    products: list[ProductInCart]
    date: datetime

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cart:
        return cls(
            id=_int(data, "id"),
            user_id=_int(data, "userId"),
            data=_str(data, "data"),
            products=[ProductInCart.from_dict(item) for item in _list(data, "products")],
            date=_parse_datetime(_get(data, "date")),
        )


def _as_list(payload: Any) -> list:
    if not isinstance(payload, list):
        raise ValueError(f"expected a list, got {type(payload).__name__}")
    return payload


class StoreClient:
    """Fetches products, users and carts from the store API."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str) -> Any:
        response = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout)
        return response.json()

    def fetch_user_carts(self, user_id: int) -> list[Cart]:
        payload = self._request(
            "GET", f"/carts/user/{user_id}?startdate=2019-12-10&enddate=2023-01-01"
        )
        return [Cart.from_dict(item) for item in _as_list(payload)]

    def fetch_user(self, user_id: int) -> User:
        return User.from_dict(self._request("GET", f"/users/{user_id}"))

    def fetch_product(self, product_id: int) -> Product:
        return Product.from_dict(self._request("GET", f"/products/{product_id}"))

    def fetch_products(self, count: int, sort: Sort) -> list[Product]:
        payload = self._request("GET", f"/products/?sort={sort}&limit={count}")
        return [Product.from_dict(item) for item in _as_list(payload)]

    def most_recent_cart(self, user: User) -> Cart | None:
        """The user's cart with the latest date; the last one wins a tie."""
        latest: Cart | None = None
        for cart in self.fetch_user_carts(user.id):
            if latest is None or cart.date >= latest.date:
                latest = cart
        return latest

    def update_cart(self, cart: Cart) -> Cart:
        """Send the cart to the store and return the stored version."""
        return Cart.from_dict(self._request("PUT", f"/carts/{cart.id}"))

    def product_for(self, item: ProductInCart) -> Product:
        return self.fetch_product(item.product_id)