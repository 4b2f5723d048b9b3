"""Prototype, conceptual: shallow versus deep copies of an object graph.

`copy.copy` and `copy.deepcopy` are Python's prototype protocol. The
prototype below carries a primitive, a list of components and a component
that points back at its owner, which `__deepcopy__` has to re-wire onto the
clone.
"""

from __future__ import annotations

import copy


class SelfReferencingEntity:
    def __init__(self) -> None:
        self.parent: "Prototype | None" = None

    def set_parent(self, parent: "Prototype") -> None:
        self.parent = parent


class Prototype:
    def __init__(
        self,
        primitive: int,
        components: list[object],
        circular_reference: SelfReferencingEntity,
    ) -> None:
        self.primitive = primitive
        self.components = components
        self.circular_reference = circular_reference

    def __copy__(self) -> "Prototype":
        # Nested objects are shared, but the list itself is a new list.
        new = self.__class__(self.primitive, list(self.components), self.circular_reference)
        new.__dict__.update({k: v for k, v in self.__dict__.items() if k not in new.__dict__})
        return new

    def __deepcopy__(self, memo: dict[int, object]) -> "Prototype":
        # Registering the clone in memo before copying children makes the
        # back reference resolve to the clone, not to a second copy.
        new = self.__class__.__new__(self.__class__)
        memo[id(self)] = new
        new.primitive = self.primitive
        new.components = copy.deepcopy(self.components, memo)
        new.circular_reference = copy.deepcopy(self.circular_reference, memo)
        return new


def build_prototype() -> Prototype:
    entity = SelfReferencingEntity()
    prototype = Prototype(245, [1, {1, 2, 3}, [1, 2, 3]], entity)
    entity.set_parent(prototype)
    return prototype


def main() -> None:
    prototype = build_prototype()

    shallow = copy.copy(prototype)
    shallow.components.append("another object")
    if prototype.components[-1] == "another object":
        print("Adding elements to `shallow`'s components list adds it to `prototype`'s components list.")
    else:
        print("Adding elements to `shallow`'s components list doesn't add it to `prototype`'s components list.")

    shallow.components[1].add(4)
    if 4 in prototype.components[1]:
        print("Changing objects in the `shallow`'s components list changes that object in `prototype`'s list.")
    else:
        print("Changing objects in the `shallow`'s components list doesn't change that object in `prototype`'s list.")

    deep = copy.deepcopy(prototype)
    deep.components.append("one more object")
    if prototype.components[-1] == "one more object":
        print("Adding elements to `deep`'s components list adds it to `prototype`'s components list.")
    else:
        print("Adding elements to `deep`'s components list doesn't add it to `prototype`'s components list.")

    deep.components[1].add(10)
    if 10 in prototype.components[1]:
        print("Changing objects in the `deep`'s components list changes that object in `prototype`'s list.")
    else:
        print("Changing objects in the `deep`'s components list doesn't change that object in `prototype`'s list.")

    print(
        f"id(deep.circular_reference.parent): {id(deep.circular_reference.parent)}\n"
        f"id(deep.circular_reference.parent.circular_reference.parent): "
        f"{id(deep.circular_reference.parent.circular_reference.parent)}\n"
        f"Deep copy's back reference points at the deep copy: {deep.circular_reference.parent is deep}"
    )


if __name__ == "__main__":
    main()
