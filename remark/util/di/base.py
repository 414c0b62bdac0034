"""Base class shared by remark's dishka providers.

Swappable infrastructure declares the component it stands for, so a test
container can pick the in-memory or the PostgreSQL variant by name.
"""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence"]

# Every component a test container may unmock
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all remark providers.

    Attributes:
        __mock_component__: Component a provider family implements (None if never swapped)
        __is_mock__: True for the in-memory test variant
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this is a component base with swappable implementations."""
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        component = cls.__mock_component__
        if component is not None and component not in COMPONENTS:
            raise TypeError(f"{cls.__name__} declares unknown component {component!r}")
