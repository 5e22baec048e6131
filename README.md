# dineflow

`dineflow` is the core of a restaurant ordering system, in plain Python. It
covers:

- **Domain objects** (`dineflow.domain`): `Price`, `URL` and `Timestamp`
  (`shared`); `User`, `Role` and `Password` (`user`); `Table` (`table`);
  `Category` and `Menu` (`menu`); `Order` and `OrderPricing` (`order`);
  `Transaction`, `OrderStatus`, `PaymentStatus`, `Payment`, `QueueCode`,
  `OrderQuery`, `TransactionQuery`, `TransactionRules` and `PaymentResult`
  (`transaction`).
- **Repository and gateway interfaces**: the protocols `UserRepository`,
  `TableRepository`, `CategoryRepository`, `MenuRepository`,
  `OrderRepository`, `TransactionRepository` and `PaymentGateway`. Storage
  and payment providers plug in through these.
- **Application layer** (`dineflow.application`): request dataclasses that
  check their fields on construction and raise `RequestValidationError`
  (`requests`); response dataclasses and `to_dict` for JSON-ready output
  (`responses`); the `unit_of_work` context manager (`unit_of_work`); and the
  services `CategoryService`, `MenuService`, `OrderService`, `TableService`,
  `UserService` and `TransactionService`.

## The order workflow

A transaction moves through these order statuses, one step at a time:

```
pending -> preparing -> ready_to_serve -> delivering -> served
```

Each step belongs to one `TransactionService` method:

| Method              | Required status  |
|---------------------|------------------|
| `start_cooking`     | `pending`        |
| `finish_cooking`    | `preparing`      |
| `start_delivering`  | `ready_to_serve` |
| `finish_delivering` | `delivering`     |

If the transaction is in any other status, the method raises
`InvalidOrderStatusError`. `create_transaction`, `hook_transaction`,
`start_cooking` and `finish_delivering` run inside `unit_of_work`: it calls
`begin()` on the transaction manager given to the service, then
`commit_or_rollback(tx, None)` on success or `commit_or_rollback(tx, error)`
on failure. If the manager has no `begin` and `commit_or_rollback` methods,
`unit_of_work` raises `InvalidTransactionError`.

`get_transaction_by_id` reports the longest cooking time of the order lines
as `estimate_time` (for example `"45m0s"`), and `is_delayed` from
`TransactionRules.get_order_delay_status`.

## Examples

Price an order line:

```python
from decimal import Decimal

from dineflow.domain.order import OrderPricing
from dineflow.domain.shared import Price

pricing = OrderPricing()
line = pricing.calculate_price(Price.from_schema(Decimal("25000")), 2)
str(line)  # "50000"
```

If the quantity is zero or negative, `calculate_price` raises
`InvalidQuantityError`.

Read a queue code:

```python
from dineflow.domain.transaction import QueueCode

code = QueueCode.parse("Q0005")
code.valid           # True
code.queue_number()  # 5
```

Hash and check a password:

```python
from dineflow.domain.user import Password

password = "password"
stored = Password.from_plain(password)
stored.verify(password)  # True
```

`Password.from_plain` raises `ValueError` for passwords shorter than eight
characters. A password that does not match raises `PasswordMismatchError`.

## Errors

Every domain failure is a subclass of `DomainError`, defined in
`dineflow.domain.errors`. Its message says what failed, for example
`"menu not found"` or `"invalid order status"`. Repositories signal a missing
record with `RecordNotFoundError`; `TableService.get_table_by_id` turns it
into `TableNotFoundError`, and `UserService.register` treats it as "email not
yet taken".

## What the package does not do

- It stores nothing. You supply objects that implement the repository
  protocols.
- It talks to no payment provider. You supply a `PaymentGateway`.
- It does not issue access tokens itself. `UserService` is given an object
  with a `generate_access_token(user_id, role)` method and returns what that
  method gives.
- It has no HTTP server, no command-line program and no paginated
  transaction listings.