import io

import pytest

from shopsys.cart import Cart
from shopsys.product import Product


def _cart(*products):
    cart = Cart()
    for product in products:
        cart.add_item(product)
    return cart


def test_view_empty_cart():
    out = io.StringIO()
    Cart().view(out)
    assert out.getvalue() == "Cart is empty.\n"


def test_view_lists_items():
    first = Product(1, "Pen", 2.5, 3, "s@example.com")
    second = Product(2, "Ink", 4.0, 1, "s@example.com")
    out = io.StringIO()
    _cart(first, second).view(out)
    assert out.getvalue() == first.describe() + "\n" + second.describe() + "\n"


def test_total_empty_is_zero():
    assert Cart().total() == 0


def test_total_is_sum_of_line_totals():
    first = Product(1, "Pen", 2.5, 3)
    second = Product(2, "Ink", 4.0, 2)
    cart = _cart(first, second)
    assert cart.total() == pytest.approx(first.line_total() + second.line_total())


def test_remove_item_removes_first_match_only():
    first = Product(1, "Pen", 2.5, 3)
    second = Product(2, "Pen", 9.0, 1)
    cart = _cart(first, second)
    removed = cart.remove_item("Pen")
    assert removed is first
    assert list(cart) == [second]


def test_remove_missing_item_raises():
    cart = _cart(Product(1, "Pen", 2.5, 3))
    with pytest.raises(KeyError):
        cart.remove_item("Ink")
    assert len(cart) == 1


def test_clear_empties_cart():
    cart = _cart(Product(1, "Pen", 2.5, 3))
    cart.clear()
    assert len(cart) == 0


def test_checkout_with_enough_payment():
    cart = _cart(Product(1, "Mug", 50.0, 1))
    out = io.StringIO()
    assert cart.checkout(io.StringIO("50\n"), out) is True
    assert "Cart Total: Rs. 50\n" in out.getvalue()
    assert out.getvalue().endswith("Payment successful. Thank you for shopping!\n")
    assert len(cart) == 0


def test_checkout_rejects_invalid_and_negative_amounts():
    cart = _cart(Product(1, "Mug", 50.0, 1))
    out = io.StringIO()
    assert cart.checkout(io.StringIO("abc\n-5\n100\n"), out) is True
    assert out.getvalue().count("Invalid input. Enter a valid amount: ") == 2


def test_checkout_cancelled_keeps_items():
    cart = _cart(Product(1, "Mug", 50.0, 1))
    out = io.StringIO()
    assert cart.checkout(io.StringIO("10\nn\n"), out) is False
    assert "Sorry, payment is less than total bill.\n" in out.getvalue()
    assert out.getvalue().endswith("Checkout cancelled.\n")
    assert len(cart) == 1


def test_checkout_remove_item_then_pay():
    cart = _cart(Product(1, "Lamp", 40.0, 1), Product(2, "Mug", 20.0, 1))
    out = io.StringIO()
    assert cart.checkout(io.StringIO("30\ny\nLamp\n30\n"), out) is True
    text = out.getvalue()
    assert "Lamp removed from cart.\n" in text
    assert "Updated Cart Total: Rs. 20\n" in text
    assert len(cart) == 0


def test_checkout_remove_unknown_item():
    cart = _cart(Product(1, "Mug", 50.0, 1))
    out = io.StringIO()
    assert cart.checkout(io.StringIO("10\ny\nZed\n10\nn\n"), out) is False
    assert "Item not found in cart.\n" in out.getvalue()
    assert len(cart) == 1


def test_checkout_raises_on_end_of_input():
    cart = _cart(Product(1, "Mug", 50.0, 1))
    with pytest.raises(EOFError):
        cart.checkout(io.StringIO(""), io.StringIO())