"""Tests for the validation engine over whole records."""

from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from tagcheck.enums import FailureReason
from tagcheck.errors import ConstraintConfigError
from tagcheck.engine.validator import has_suffix, validate
from tagcheck.models.options import ValidationOptions


def tags(validation=None, regexp=None, tag_name="validation"):
    extra = {}
    if validation is not None:
        extra[tag_name] = validation
    if regexp is not None:
        extra[tag_name + "_regexp"] = regexp
    return extra


class Customer(BaseModel):
    first_name: str = Field(default="", json_schema_extra=tags("req lenmin:5 lenmax:25"))
    last_name: str = Field(default="", json_schema_extra=tags("req lenmin:2 lenmax:50"))
    age: int = Field(default=0, json_schema_extra=tags("req valmin:18 valmax:150"))
    price: int = Field(default=0, json_schema_extra=tags("req valmin:0 valmax:9999"))
    post_code: str = Field(default="", json_schema_extra=tags("req", "^[0-9][0-9]-[0-9][0-9][0-9]$"))
    email: str = Field(default="", json_schema_extra=tags("req email"))
    below_zero: int = Field(default=0, json_schema_extra=tags("valmin:-6 valmax:-2"))
    discount_price: int = Field(default=0, json_schema_extra=tags("valmin:0 valmax:8000"))
    country: str = Field(default="", json_schema_extra=tags(regexp="^[A-Z][A-Z]$"))
    county: str = Field(default="", json_schema_extra=tags("lenmax:40"))


class TaggedCustomer(BaseModel):
    first_name: str = Field(default="", json_schema_extra=tags("req lenmin:5 lenmax:25", tag_name="mytag"))
    last_name: str = Field(default="", json_schema_extra=tags("req lenmin:2 lenmax:50", tag_name="mytag"))
    age: int = Field(default=0, json_schema_extra=tags("req valmin:18 valmax:150", tag_name="mytag"))
    price: int = Field(default=0, json_schema_extra=tags("req valmin:0 valmax:9999", tag_name="mytag"))
    post_code: str = Field(
        default="", json_schema_extra=tags("req", "^[0-9][0-9]-[0-9][0-9][0-9]$", tag_name="mytag")
    )
    email: str = Field(default="", json_schema_extra=tags("req email", tag_name="mytag"))
    below_zero: int = Field(default=0, json_schema_extra=tags("valmin:-6 valmax:-2", tag_name="mytag"))
    discount_price: int = Field(default=0, json_schema_extra=tags("valmin:0 valmax:8000", tag_name="mytag"))
    country: str = Field(default="", json_schema_extra=tags(regexp="^[A-Z][A-Z]$", tag_name="mytag"))
    county: str = Field(default="", json_schema_extra={"validation": "req", "mytag": "lenmax:40"})


INVALID = dict(
    first_name="123456789012345678901234567890",
    last_name="b",
    age=15,
    price=0,
    post_code="AA123",
    email="invalidEmail",
    below_zero=8,
    discount_price=9999,
    country="Tokelau",
    county="",
)

INVALID_FAILURES = {
    "first_name": FailureReason.FAIL_LEN_MAX,
    "last_name": FailureReason.FAIL_LEN_MIN,
    "age": FailureReason.FAIL_VAL_MIN,
    "post_code": FailureReason.FAIL_REGEXP,
    "email": FailureReason.FAIL_EMAIL,
    "below_zero": FailureReason.FAIL_VAL_MAX,
    "discount_price": FailureReason.FAIL_VAL_MAX,
    "country": FailureReason.FAIL_REGEXP,
}


def test_default_values():
    valid, failures = validate(Customer())

    assert valid is False
    assert failures == {
        "first_name": FailureReason.FAIL_EMPTY,
        "last_name": FailureReason.FAIL_EMPTY,
        "age": FailureReason.FAIL_ZERO,
        "post_code": FailureReason.FAIL_EMPTY,
        "email": FailureReason.FAIL_EMPTY,
        "below_zero": FailureReason.FAIL_VAL_MAX,
        "country": FailureReason.FAIL_REGEXP,
    }


def test_invalid_values():
    valid, failures = validate(Customer(**INVALID))

    assert valid is False
    assert failures == INVALID_FAILURES


def test_valid_values():
    customer = Customer(
        first_name="Johnny",
        last_name="Smith",
        age=35,
        price=0,
        post_code="43-155",
        email="john@example.com",
        below_zero=-4,
        discount_price=8000,
        country="GB",
        county="Enfield",
    )

    assert validate(customer) == (True, {})


def test_failure_codes_match_bit_values():
    _, failures = validate(Customer())

    assert failures["age"] == 256
    assert failures["first_name"] == 32


def test_field_restriction():
    options = ValidationOptions(restrict_fields={"first_name", "last_name"})

    valid, failures = validate(Customer(**INVALID), options)

    assert valid is False
    assert failures == {
        "first_name": FailureReason.FAIL_LEN_MAX,
        "last_name": FailureReason.FAIL_LEN_MIN,
    }


def test_restriction_to_valid_fields_passes():
    options = ValidationOptions(restrict_fields=["price", "county"])

    assert validate(Customer(**INVALID), options) == (True, {})


def test_restriction_and_overwritten_tags():
    options = ValidationOptions(
        restrict_fields={"first_name", "last_name"},
        overwrite_field_tags={"first_name": {"validation": "req lenmin:4 lenmax:100"}},
    )

    valid, failures = validate(Customer(**INVALID), options)

    assert valid is False
    assert failures == {"last_name": FailureReason.FAIL_LEN_MIN}


def test_empty_override_does_not_replace_metadata():
    options = ValidationOptions(overwrite_field_tags={"first_name": {"validation": ""}})

    _, failures = validate(Customer(**INVALID), options)

    assert failures["first_name"] == FailureReason.FAIL_LEN_MAX


def test_pattern_only_override_keeps_other_rules():
    options = ValidationOptions(
        overwrite_field_tags={"post_code": {"validation_regexp": "^[A-Z]+[0-9]+$"}}
    )

    _, failures = validate(Customer(**INVALID), options)
    assert "post_code" not in failures

    # "req" still comes from the field metadata
    _, failures = validate(Customer(**{**INVALID, "post_code": ""}), options)
    assert failures["post_code"] == FailureReason.FAIL_EMPTY


def test_overwritten_tag_name():
    options = ValidationOptions(overwrite_tag_name="mytag")

    valid, failures = validate(TaggedCustomer(**INVALID), options)

    assert valid is False
    assert failures == INVALID_FAILURES


def test_default_key_ignored_when_tag_name_overwritten():
    # county carries "req" under the default key only
    options = ValidationOptions(overwrite_tag_name="mytag")

    _, failures = validate(TaggedCustomer(**{**INVALID, "county": ""}), options)

    assert "county" not in failures


def test_default_tag_name_ignores_custom_key():
    _, failures = validate(TaggedCustomer(**INVALID))

    assert failures == {"county": FailureReason.FAIL_EMPTY}


def test_overrides_use_active_tag_name():
    options = ValidationOptions(
        overwrite_tag_name="mytag",
        overwrite_field_tags={"age": {"mytag": "valmin:10", "validation": "valmin:99"}},
    )

    _, failures = validate(TaggedCustomer(**INVALID), options)

    assert "age" not in failures


class Product(BaseModel):
    name: str = Field(default="", json_schema_extra=tags("req"))
    labels: List[str] = Field(default_factory=list, json_schema_extra=tags("req lenmin:3"))
    weight: float = Field(default=0.0, json_schema_extra=tags("req valmin:1"))
    active: bool = Field(default=False, json_schema_extra=tags("req"))
    note: Optional[str] = Field(default=None, json_schema_extra=tags("req"))
    stock: int = 0


def test_non_scalar_fields_are_skipped():
    valid, failures = validate(Product(name="lamp"))

    assert valid is True
    assert failures == {}


class Order(BaseModel):
    contact_email: str = Field(default="", json_schema_extra=tags("req"))
    unit_price: int = 0
    total_price: int = Field(default=10, json_schema_extra=tags("valmin:10"))
    BillingEmail: str = ""
    ListPrice: int = 0


def test_suffix_conventions_off_by_default():
    order = Order(contact_email="nope", unit_price=-1, BillingEmail="x", ListPrice=-5)

    assert validate(order) == (True, {})


def test_suffix_conventions():
    order = Order(contact_email="nope", unit_price=-1, total_price=50, BillingEmail="x", ListPrice=-5)
    options = ValidationOptions(validate_when_suffix=True)

    valid, failures = validate(order, options)

    assert valid is False
    assert failures == {
        "contact_email": FailureReason.FAIL_EMAIL,
        "unit_price": FailureReason.FAIL_VAL_MIN,
        "BillingEmail": FailureReason.FAIL_EMAIL,
        "ListPrice": FailureReason.FAIL_VAL_MIN,
    }


def test_price_convention_keeps_declared_bounds():
    options = ValidationOptions(validate_when_suffix=True)

    _, failures = validate(Order(contact_email="a@b.com", total_price=5, BillingEmail="b@c.org"), options)

    assert failures == {"total_price": FailureReason.FAIL_VAL_MIN}


def test_price_convention_allows_zero_under_req():
    class Invoice(BaseModel):
        net_price: int = Field(default=0, json_schema_extra=tags("req"))

    assert validate(Invoice()) == (False, {"net_price": FailureReason.FAIL_ZERO})
    assert validate(Invoice(), ValidationOptions(validate_when_suffix=True)) == (True, {})


@pytest.mark.parametrize("name, suffix, expected", [
    ("Email", "Email", True),
    ("ContactEmail", "Email", True),
    ("email", "Email", True),
    ("contact_email", "Email", True),
    ("female", "Email", False),
    ("emails", "Email", False),
    ("DiscountPrice", "Price", True),
    ("unit_price", "Price", True),
    ("priceless", "Price", False),
])
def test_has_suffix(name, suffix, expected):
    assert has_suffix(name, suffix) is expected


def test_record_is_not_modified():
    customer = Customer(**INVALID)
    before = customer.model_dump()

    validate(customer, ValidationOptions(validate_when_suffix=True))

    assert customer.model_dump() == before


def test_malformed_pattern_raises():
    class Broken(BaseModel):
        code: str = Field(default="abc", json_schema_extra=tags(regexp="[unclosed"))

    with pytest.raises(ConstraintConfigError) as exc_info:
        validate(Broken())

    assert exc_info.value.field_name == "code"


def test_malformed_override_pattern_raises():
    options = ValidationOptions(overwrite_field_tags={"country": {"validation_regexp": "(GB"}})

    with pytest.raises(ConstraintConfigError):
        validate(Customer(**INVALID), options)


def test_malformed_pattern_on_skipped_field_is_not_compiled():
    options = ValidationOptions(
        restrict_fields={"age"},
        overwrite_field_tags={"country": {"validation_regexp": "(GB"}},
    )

    assert validate(Customer(age=30), options) == (True, {})


def test_ill_formed_numbers_do_not_fail_records():
    class Loose(BaseModel):
        code: str = Field(default="", json_schema_extra=tags("lenmin:abc lenmax:"))
        count: int = Field(default=-3, json_schema_extra=tags("valmin:x"))

    assert validate(Loose()) == (True, {})
