"""Interpreter, real world: evaluating boolean expressions over named variables.

Expressions form a tree of `VariableExp`, `AndExp` and `OrExp` nodes that
interpret themselves against a `Context` holding the variable values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UndefinedVariableError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No exist variable: {self.name}"


class Context:
    def __init__(self) -> None:
        self._variables: dict[str, bool] = {}

    def look_up(self, name: str) -> bool:
        if name not in self._variables:
            raise UndefinedVariableError(name)
        return self._variables[name]

    def assign(self, variable: "VariableExp", value: bool) -> None:
        self._variables[variable.name] = value


class AbstractExp(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> bool:
        ...


class VariableExp(AbstractExp):
    def __init__(self, name: str) -> None:
        self.name = name

    def interpret(self, context: Context) -> bool:
        return context.look_up(self.name)

    def __str__(self) -> str:
        return self.name


class AndExp(AbstractExp):
    def __init__(self, first: AbstractExp, second: AbstractExp) -> None:
        self.first = first
        self.second = second

    def interpret(self, context: Context) -> bool:
        return self.first.interpret(context) and self.second.interpret(context)

    def __str__(self) -> str:
        return f"({self.first} ∧ {self.second})"


class OrExp(AbstractExp):
    def __init__(self, first: AbstractExp, second: AbstractExp) -> None:
        self.first = first
        self.second = second

    def interpret(self, context: Context) -> bool:
        return self.first.interpret(context) or self.second.interpret(context)

    def __str__(self) -> str:
        return f"({self.first} ∨ {self.second})"


def _fmt(value: bool) -> str:
    return "true" if value else "false"


def main() -> None:
    context = Context()
    a = VariableExp("A")
    b = VariableExp("B")
    c = VariableExp("C")

    exp: AbstractExp = AndExp(a, OrExp(b, c))
    context.assign(a, True)
    context.assign(b, True)
    context.assign(c, False)
    print(
        f"boolean expression A ∧ (B ∨ C) = {_fmt(exp.interpret(context))}, "
        "with variables A=true, B=true, C=false"
    )

    exp = OrExp(b, AndExp(a, OrExp(b, c)))
    context.assign(a, False)
    context.assign(b, False)
    context.assign(c, True)
    print(
        f"boolean expression B ∨ (A ∧ (B ∨ C)) = {_fmt(exp.interpret(context))}, "
        "with variables A=false, B=false, C=true"
    )

    try:
        OrExp(b, VariableExp("D")).interpret(context)
    except UndefinedVariableError as exc:
        print(f"UndefinedVariableError: {exc}")


if __name__ == "__main__":
    main()
