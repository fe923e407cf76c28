from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar, Dict

from .role import Role
from .validation import UNKNOWN_NAME, as_int, normalize_name, trimmed

Normalizer = Callable[[Any], Any]


@dataclass
class Record:
    """Fields shared by every person on file.

    Each assignment, including the ones made by ``__init__``, runs through the
    normalizer registered for the field in ``NORMALIZERS``. ``id`` is fixed once
    set and ``role`` comes from the variant class, so neither can change after
    construction.
    """

    id: int
    name: str = UNKNOWN_NAME
    telephone: str = ""
    email: str = ""

    ROLE: ClassVar[Role]
    NORMALIZERS: ClassVar[Dict[str, Normalizer]] = {
        "id": as_int,
        "name": normalize_name,
        "telephone": trimmed,
        "email": trimmed,
    }

    def __post_init__(self) -> None:
        if type(self) is Record:
            raise TypeError("Record is abstract; build a variant with create()")

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "id" and "id" in self.__dict__:
            raise AttributeError("id is fixed at creation")
        normalize = self.NORMALIZERS.get(key)
        if normalize is not None:
            value = normalize(value)
        super().__setattr__(key, value)

    @property
    def role(self) -> Role:
        return self.ROLE

    def update(self, **changes: Any) -> None:
        known = {f.name for f in fields(self)}
        for key, value in changes.items():
            if key not in known:
                raise AttributeError(f"{type(self).__name__} has no field {key!r}")
            setattr(self, key, value)
