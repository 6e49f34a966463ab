"""
Service Example — per-user sessions and a retried order placement.

Run: uv run python examples/service_example.py
"""

import asyncio

from kungfu import Ok, Error

from storefront import StorefrontService, ProductId, AddressId, PaymentMethodId
from storefront import ops as O
from examples._infra import banner, run


async def main() -> None:
    service = StorefrontService()

    banner("Two shoppers at once")
    await asyncio.gather(
        service.execute("alice", O.AddToCart(ProductId("smartwatch"))),
        service.execute("bob", O.AddToCart(ProductId("hoodie"))),
        service.execute("alice", O.AddToCart(ProductId("speaker"))),
    )
    for user in ("alice", "bob"):
        match await service.execute(user, O.CartTotal()):
            case Ok(total):
                print(f"  {user}: {total}")
            case Error(err):
                print(f"  {user}: {err}")

    banner("Placing with a request token")
    await service.execute("alice", O.SelectAddress(AddressId(1)))
    await service.execute("alice", O.SelectPayment(PaymentMethodId(0)))
    for attempt in (1, 2):
        match await service.execute("alice", O.PlaceOrder(request_token="tap-1")):
            case Ok(order):
                print(f"  attempt {attempt}: {order.id.value} {order.total}")
            case Error(err):
                print(f"  attempt {attempt}: {err}")

    match await service.execute("alice", O.ListOrders()):
        case Ok(orders):
            print(f"  orders on file: {len(orders)}")
        case Error(err):
            print(f"  {err}")


if __name__ == "__main__":
    run(main)
