import pytest

from shopsys.product import Product


def test_describe_format():
    product = Product(7, "Pen", 2.5, 3, "shop@example.com")
    assert product.describe() == (
        "ID: 7, Name: Pen, Price: $2.5, Quantity: 3, Seller: shop@example.com"
    )


def test_describe_uses_six_significant_digits():
    product = Product(1, "Lamp", 1234567.0, 1, "shop@example.com")
    assert "Price: $1.23457e+06," in product.describe()


def test_describe_whole_price_has_no_decimal_point():
    product = Product(2, "Mug", 40.0, 1, "shop@example.com")
    assert "Price: $40," in product.describe()


def test_default_seller_is_empty():
    product = Product(1, "Pen", 2.5, 3)
    assert product.seller_name == ""
    assert product.describe().endswith("Seller: ")


@pytest.mark.parametrize("price", [0.5, 3.0, 99.99])
def test_line_total_of_one_is_price(price):
    assert Product(1, "x", price, 1).line_total() == price


def test_line_total_of_zero_quantity_is_zero():
    assert Product(1, "x", 12.5, 0).line_total() == 0


def test_line_total_scales_with_quantity():
    single = Product(1, "x", 3.25, 1).line_total()
    assert Product(1, "x", 3.25, 4).line_total() == pytest.approx(single * 4)


def test_equality_by_fields():
    assert Product(1, "Pen", 2.5, 3, "a@example.com") == Product(1, "Pen", 2.5, 3, "a@example.com")
    assert Product(1, "Pen", 2.5, 3, "a@example.com") != Product(1, "Pen", 2.5, 4, "a@example.com")