"""State, real world: the lifecycle of an invoice.

    draft -> open -> paid | void | uncollectable
    uncollectable -> paid | void

Each state only implements the transitions it allows; anything else raises
`InvalidStateTransitionError`.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any


class InvalidStateTransitionError(Exception):
    pass


class InvoiceState:
    name = ""

    def __init__(self, invoice: "Invoice") -> None:
        self.invoice = invoice

    def _refuse(self, action: str) -> None:
        raise InvalidStateTransitionError(f"Cannot {action} invoice in {self.name} state")

    def finalize(self) -> None:
        self._refuse("finalize")

    def pay(self) -> None:
        self._refuse("pay")

    def cancel(self) -> None:
        self._refuse("cancel")

    def void(self) -> None:
        self._refuse("void")

    def _move(self, verb: str, target: type["InvoiceState"]) -> None:
        print(
            f"Invoice #{self.invoice.id} {verb} - changing from "
            f"{self.name.capitalize()} to {target.name.capitalize()}"
        )
        self.invoice.set_state(target(self.invoice))


class DraftInvoiceState(InvoiceState):
    name = "draft"

    def finalize(self) -> None:
        self._move("finalized", OpenInvoiceState)


class OpenInvoiceState(InvoiceState):
    name = "open"

    def pay(self) -> None:
        self._move("paid", PaidInvoiceState)

    def void(self) -> None:
        self._move("voided", VoidInvoiceState)

    def cancel(self) -> None:
        self._move("cancelled", UncollectableInvoiceState)


class PaidInvoiceState(InvoiceState):
    name = "paid"


class VoidInvoiceState(InvoiceState):
    name = "void"


class UncollectableInvoiceState(InvoiceState):
    name = "uncollectable"

    def pay(self) -> None:
        self._move("paid", PaidInvoiceState)

    def void(self) -> None:
        self._move("voided", VoidInvoiceState)


class Invoice:
    def __init__(self, id: int, amount: float) -> None:
        self.id = id
        self.amount = amount
        self.created_at = datetime.now()
        self.state: InvoiceState = DraftInvoiceState(self)

    def set_state(self, state: InvoiceState) -> None:
        self.state = state

    @property
    def state_name(self) -> str:
        return self.state.name

    def finalize(self) -> None:
        self.state.finalize()

    def pay(self) -> None:
        self.state.pay()

    def cancel(self) -> None:
        self.state.cancel()

    def void(self) -> None:
        self.state.void()

    def info(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "state": self.state_name,
            "created_at": f"{self.created_at:%Y-%m-%d %H:%M:%S}",
        }


def main() -> None:
    print("=== Invoice State Pattern Demo ===\n")
    invoice = Invoice(1001, 1500.00)
    print(f"Created invoice: {json.dumps(invoice.info())}\n")

    print("--- Scenario 1: Draft -> Open -> Paid ---")
    invoice.finalize()
    print(f"Current state: {invoice.state_name}")
    invoice.pay()
    print(f"Current state: {invoice.state_name}")
    try:
        invoice.pay()
    except InvalidStateTransitionError as exc:
        print(f"Expected error: {exc}")

    print("\n--- Scenario 2: Draft -> Open -> Void ---")
    invoice2 = Invoice(1002, 750.00)
    invoice2.finalize()
    invoice2.void()
    print(f"Invoice 2 state: {invoice2.state_name}")

    print("\n--- Scenario 3: Draft -> Open -> Uncollectable -> Paid ---")
    invoice3 = Invoice(1003, 2000.00)
    invoice3.finalize()
    invoice3.cancel()
    print(f"Invoice 3 state: {invoice3.state_name}")
    invoice3.pay()
    print(f"Invoice 3 final state: {invoice3.state_name}")

    print("\n--- Scenario 4: Draft -> Open -> Uncollectable -> Void ---")
    invoice4 = Invoice(1004, 500.00)
    invoice4.finalize()
    invoice4.cancel()
    invoice4.void()
    print(f"Invoice 4 final state: {invoice4.state_name}")

    print("\n--- Error Scenario: Invalid transition ---")
    invoice5 = Invoice(1005, 300.00)
    try:
        invoice5.pay()
    except InvalidStateTransitionError as exc:
        print(f"Expected error: {exc}")

    print("\n--- State Information ---")
    for number, item in enumerate([invoice, invoice2, invoice3, invoice4, invoice5], start=1):
        print(f"Invoice {number}: {json.dumps(item.info())}")


if __name__ == "__main__":
    main()
