# shopsys

A small console shopping system. Customers browse a product catalog, fill a
cart and check out with a printed receipt. Sellers add products, change stock
and remove their listings.

## Installing

    pip install .

## Running

    shopsys

The program works in the current directory and keeps its state in plain text
files there:

- `users.txt`, `customers.txt`, `sellers.txt`: registered accounts, one per
  line as `email password name contact address`
- `products.txt`: the catalog, one product per line as
  `id name price quantity seller`
- `orders.txt`: every receipt produced at checkout, appended

The catalog is read from `products.txt` at start-up and written back when the
program exits. Input ending (end of file) is treated like choosing Exit.

### Main menu

Both choices first ask for name, contact, address, email and password.

1. Login: the email and password are checked against `customers.txt` first,
   then `sellers.txt`, and the matching session starts.
2. Register: the email may hold only lower-case letters, digits, `.`, `_` and
   exactly one `@` that is neither first nor last. It must not already be in
   `users.txt`. You then choose 1 for customer or 2 for seller; the account is
   appended to `users.txt` and to `customers.txt` or `sellers.txt`.

0 exits and saves the catalog.

### Customers

1. View all products in `products.txt`.
2. Add a product to the cart by ID; the quantity must be between 1 and what
   is in stock.
3. View the cart with line totals and the overall total.
4. Check out: stock of each ordered product is reduced, the receipt is printed
   and appended to `orders.txt`, and totals above 10000 get 10% off. The
   receipt step then sets each ordered product's stock to the quantity that
   was ordered.
5. List the products within a price range (the minimum must be at least 2).

0 logs out.

### Sellers

1. Add a product; its ID must not already be in the catalog. It is appended
   to `products.txt` at once.
2. Set a product's quantity (only your own products); the catalog is saved.
3. Remove one of your products by name; this is saved when the program exits.
4. List your own products.

0 logs out.

## Using it from Python

    from shopsys.product import Product
    from shopsys.catalog import Catalog
    from shopsys.accounts import is_valid_email_format

    catalog = Catalog("shopdata")          # directory holding products.txt
    catalog.add_product(Product(1, "Pen", 25.0, 10, "seller@example.com"))
    for product in catalog.products_in_range(2, 100):
        print(product.describe())

    is_valid_email_format("someone@example.com")  # True

Modules:

- `shopsys.product`: `Product`, with `describe()` and `line_total()`.
- `shopsys.catalog`: `Catalog` (load, save, find, add, remove, update and
  reduce stock, price and seller filters, receipts) and the errors
  `CatalogError`, `InsufficientStockError`, `ProductNotFoundError`.
- `shopsys.cart`: `Cart`, with an interactive `checkout(stdin, out)` that
  asks for payment and lets items be removed until the payment covers the
  total.
- `shopsys.users`: `Customer` (with its own `Cart`, and `buy_product`, which
  takes stock from a `product.txt` file of `id name price quantity` records)
  and `Seller`, which manages its products through a `Catalog`.
- `shopsys.accounts`: account file helpers `validate_login`,
  `is_valid_email_format`, `is_email_unique`, `save_user`,
  `load_user_details` (returns a `UserDetails` or `None`) and
  `apply_discount`.
- `shopsys.cli`: `run(directory, stdin, out)` drives a whole session over any
  input and output streams; `handle_customer_session` and
  `handle_seller_session` run one menu each; `main()` is the `shopsys`
  command.

## What it does not do

Passwords are stored and compared as plain text; there is no hashing. Names,
contacts, addresses and product names are stored as single whitespace-separated
words, so values containing spaces do not read back as written. There is no
locking, so two copies running on the same directory can overwrite each
other's files.

## Tests

    pip install ".[test]"
    pytest