from copy import deepcopy
from dataclasses import FrozenInstanceError


class Freezable:
    """Mixin that gives the mutable geometry types a read-only form.

    freeze() returns a deep copy whose fields (and nested geometry values)
    reject assignment with FrozenInstanceError. clone() always returns a
    mutable deep copy, whether the source is frozen or not.
    """

    def __setattr__(self, name, value):
        if self.__dict__.get("_frozen", False):
            raise FrozenInstanceError(
                f"cannot assign to field {name!r} of a frozen {type(self).__name__}")
        object.__setattr__(self, name, value)

    @property
    def is_frozen(self) -> bool:
        return self.__dict__.get("_frozen", False)

    def _check_writable(self) -> None:
        # For mutators that change container contents rather than assigning fields
        if self.is_frozen:
            raise FrozenInstanceError(f"cannot modify a frozen {type(self).__name__}")

    def freeze(self):
        if self.is_frozen:
            return self
        frozen = deepcopy(self)
        for name, value in list(vars(frozen).items()):
            if isinstance(value, Freezable):
                object.__setattr__(frozen, name, value.freeze())
        object.__setattr__(frozen, "_frozen", True)
        return frozen

    def clone(self):
        copy = deepcopy(self)
        copy.__dict__.pop("_frozen", None)
        for name, value in list(vars(copy).items()):
            if isinstance(value, Freezable) and value.is_frozen:
                object.__setattr__(copy, name, value.clone())
        return copy
