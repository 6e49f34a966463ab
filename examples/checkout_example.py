"""
Checkout Example — one session from browsing to a placed order.

Run: uv run python examples/checkout_example.py
"""

from kungfu import Ok, Error

from storefront import Session, ProductId, AddressId, PaymentMethodId
from storefront import events as EV
from examples._infra import banner, run


def on_order(event: EV.OrderPlaced) -> None:
    print(f"  [event] order {event.order.id.value} placed")


async def main() -> None:
    session = Session("alice")
    session.subscribe(EV.OrderPlaced, on_order)

    banner("Catalog")
    for product in session.featured_products():
        print(f"  {product.name:<12} {product.price}")

    banner("Cart")
    for slug in ("sneakers", "tshirt", "tshirt"):
        match session.add_to_cart(ProductId(slug)):
            case Ok(True):
                print(f"  added {slug}")
            case Ok(False):
                print(f"  {slug} already in cart")
            case Error(err):
                print(f"  {err}")
    print(f"  total: {session.cart_total()}")

    banner("Checkout")
    match session.place_order():
        case Error(err):
            print(f"  too early: {err}")
        case Ok(_):
            pass
    session.select_address(AddressId(0))
    session.select_payment(PaymentMethodId(0))
    print(f"  state: {session.checkout_state().name}")

    match session.place_order():
        case Ok(order):
            print(f"  {order.id.value}: {order.total} to {order.address}")
        case Error(err):
            print(f"  failed: {err}")

    print(f"  cart lines left: {len(session.cart_lines())}")
    print(f"  state: {session.checkout_state().name}")


if __name__ == "__main__":
    run(main)
