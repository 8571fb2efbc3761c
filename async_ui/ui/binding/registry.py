"""
TypeRegistry - dispatch table keyed by a component's runtime type.

Lookup walks the instance's MRO and returns the implementation registered for
the most specific class. Unregistered types get the default implementation.
"""
from typing import Any, Callable, Dict, Optional, Type

from loguru import logger


class TypeRegistry:
    """
    Type-indexed function table.

    Usage:
        setters = TypeRegistry("setter_fns", default=lambda widget: {})

        @setters.register(QLabel)
        def _label_setters(widget):
            ...

        setters(label)  # dispatches on type(label).__mro__
    """

    def __init__(self, name: str, default: Callable[..., Any]):
        self.name = name
        self._default = default
        self._impls: Dict[Type, Callable[..., Any]] = {}
        self._cache: Dict[Type, Callable[..., Any]] = {}

    def register(self, *types: Type):
        """Decorator registering the function for each of the given types."""
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            for cls in types:
                self._impls[cls] = func
                logger.trace(f"{self.name}: registered {cls.__name__} -> {func.__name__}")
            self._cache.clear()
            return func
        return decorator

    def resolve(self, cls: Type) -> Optional[Callable[..., Any]]:
        """Implementation for cls, or None when no class in its MRO is registered."""
        if cls in self._cache:
            return self._cache[cls]
        impl = None
        for base in cls.__mro__:
            if base in self._impls:
                impl = self._impls[base]
                break
        self._cache[cls] = impl
        return impl

    def __call__(self, obj: Any, *args, **kwargs):
        impl = self.resolve(type(obj)) or self._default
        return impl(obj, *args, **kwargs)
