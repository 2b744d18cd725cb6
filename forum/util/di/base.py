"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["identity", "persistence"]


class ProviderSelectionError(LookupError):
    """No provider matches the requested component and flavour."""


class ProviderBase(Provider):
    """Every forum provider derives from this.

    A provider that sets ``__mock_component__`` is a component base: its
    subclasses are the interchangeable implementations, told apart by
    ``__is_mock__``. Providers without it are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
