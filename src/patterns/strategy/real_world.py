"""Strategy, real world: payment methods in a tiny order controller.

The controller routes fake HTTP requests. Paying for an order picks a
`PaymentMethod` strategy from the URL; credit card and PayPal render
different forms and validate the return request differently.
"""

from __future__ import annotations

import hashlib
import json
import re
from abc import ABC, abstractmethod
from typing import Any

import httpx

_ORDERS_RE = re.compile(r"^/orders?$")
_PAYMENT_RE = re.compile(r"^/order/([0-9]+?)/payment/([a-z]+?)(/return)?$")


class PaymentError(Exception):
    pass


class UnknownPaymentMethodError(PaymentError):
    pass


class Order:
    def __init__(self, id: int, attributes: dict[str, Any]) -> None:
        self.id = id
        self.status = "new"
        self.email: str = attributes.get("email", "")
        self.product: str = attributes.get("product", "")
        self.total: float = float(attributes.get("total", 0))

    def complete(self) -> None:
        self.status = "completed"
        print(f"Order: #{self.id} is now {self.status}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "email": self.email,
            "product": self.product,
            "total": self.total,
        }


class OrderStore:
    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}

    def create(self, attributes: dict[str, Any]) -> Order:
        order = Order(len(self._orders), attributes)
        self._orders[order.id] = order
        return order

    def get(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def all(self) -> list[Order]:
        return list(self._orders.values())


class PaymentMethod(ABC):
    @abstractmethod
    def get_payment_form(self, order: Order) -> str:
        ...

    @abstractmethod
    def validate_return(self, order: Order, data: dict[str, str]) -> bool:
        ...


class CreditCardPayment(PaymentMethod):
    store_secret_key = "swordfish"

    @classmethod
    def payment_key(cls, order: Order) -> str:
        return hashlib.md5(f"{order.id}{cls.store_secret_key}".encode("utf-8")).hexdigest()

    def get_payment_form(self, order: Order) -> str:
        return_url = f"https://our-website.com/order/{order.id}/payment/cc/return"
        return (
            '<form action="https://my-credit-card-processor.com/charge" method="POST">\n'
            f'    <input type="hidden" id="email" value="{order.email}">\n'
            f'    <input type="hidden" id="total" value="{order.total}">\n'
            f'    <input type="hidden" id="returnURL" value="{return_url}">\n'
            '    <input type="text" id="cardholder-name">\n'
            '    <input type="text" id="credit-card">\n'
            '    <input type="text" id="expiration-date">\n'
            '    <input type="text" id="ccv-number">\n'
            '    <input type="submit" value="Pay">\n'
            "</form>"
        )

    def validate_return(self, order: Order, data: dict[str, str]) -> bool:
        print("CreditCardPayment: ...validating... ", end="")
        if data.get("key") != self.payment_key(order):
            raise PaymentError("Payment key is wrong.")
        if data.get("success", "").lower() in ("", "0", "false"):
            raise PaymentError("Payment failed.")
        try:
            total = float(data.get("total", "0"))
        except ValueError:
            total = 0.0
        if total < order.total:
            raise PaymentError("Payment amount is wrong.")
        print("Done!")
        return True


class PayPalPayment(PaymentMethod):
    def get_payment_form(self, order: Order) -> str:
        return_url = f"https://our-website.com/order/{order.id}/payment/paypal/return"
        return (
            '<form action="https://paypal.com/payment" method="POST">\n'
            f'    <input type="hidden" id="email" value="{order.email}">\n'
            f'    <input type="hidden" id="total" value="{order.total}">\n'
            f'    <input type="hidden" id="returnURL" value="{return_url}">\n'
            '    <input type="submit" value="Pay on PayPal">\n'
            "</form>"
        )

    def validate_return(self, order: Order, data: dict[str, str]) -> bool:
        print("PayPalPayment: ...validating... ", end="")
        print("Done!")
        return True


class PaymentFactory:
    _methods: dict[str, type[PaymentMethod]] = {
        "cc": CreditCardPayment,
        "paypal": PayPalPayment,
    }

    @classmethod
    def get_payment_method(cls, id: str) -> PaymentMethod:
        try:
            return cls._methods[id]()
        except KeyError:
            raise UnknownPaymentMethodError(f"Unknown Payment Method: {id}") from None


class OrderController:
    def __init__(self, store: OrderStore | None = None) -> None:
        self.store = store or OrderStore()

    def post(self, url: str, data: dict[str, Any]) -> Order | None:
        print(f"Controller: POST request to {url} with {json.dumps(data)}")
        path = httpx.URL(url).path
        if _ORDERS_RE.match(path):
            return self.post_new_order(data)
        print("Controller: 404 page")
        return None

    def get(self, url: str) -> None:
        print(f"Controller: GET request to {url}")
        parsed = httpx.URL(url)
        data = dict(parsed.params)

        if _ORDERS_RE.match(parsed.path):
            self.get_all_orders()
            return

        match = _PAYMENT_RE.match(parsed.path)
        order = self.store.get(int(match.group(1))) if match else None
        if match is None or order is None:
            print("Controller: 404 page")
            return

        method = PaymentFactory.get_payment_method(match.group(2))
        if match.group(3) is None:
            self.get_payment(method, order)
        else:
            self.get_payment_return(method, order, data)

    def post_new_order(self, data: dict[str, Any]) -> Order:
        order = self.store.create(data)
        print(f"Controller: Created the order #{order.id}.")
        return order

    def get_all_orders(self) -> None:
        print("Controller: Here's all orders:")
        for order in self.store.all():
            print(json.dumps(order.to_dict(), indent=4))

    def get_payment(self, method: PaymentMethod, order: Order) -> None:
        print("Controller: here's the payment form:")
        print(method.get_payment_form(order))

    def get_payment_return(self, method: PaymentMethod, order: Order, data: dict[str, str]) -> None:
        try:
            if method.validate_return(order, data):
                print("Controller: Thanks for your order!")
                order.complete()
        except PaymentError as exc:
            print(f"Controller: got an exception ({exc})")


def main() -> None:
    controller = OrderController()

    print("Client: Let's create some orders")
    controller.post("/orders", {"email": "me@example.com", "product": "ABC Cat food (XL)", "total": 9.95})
    controller.post("/orders", {"email": "me@example.com", "product": "XYZ Cat litter (XXL)", "total": 19.95})

    print("\nClient: List my orders, please")
    controller.get("/orders")

    print("\nClient: I'd like to pay for the second, show me the payment form")
    controller.get("/order/1/payment/paypal")

    print("\nClient: ...pushes the Pay button...")
    print("\nClient: Oh, I'm redirected to the PayPal.")
    print("\nClient: ...pays on the PayPal...")
    print("\nClient: Alright, I'm back with you, guys.")
    controller.get("/order/1/payment/paypal/return?key=c55a3964833a4b0fa4469ea94a057152&success=true&total=19.95")

    print("\nClient: And the first one by card, with a forged key:")
    controller.get("/order/0/payment/cc/return?key=forged&success=true&total=9.95")


if __name__ == "__main__":
    main()
