"""Handler lookup for AcceptLib.

A visitor may implement any subset of ``enter_<Type>``, ``visit_<Type>`` and
``exit_<Type>``. Handlers can also be bound explicitly, without relying on
method names, by subclassing ``Visitor`` and decorating methods::

    class Counter(Visitor):
        @on_visit(Book)
        def count_book(self, book, context):
            ...

Lookup never fails: an absent handler resolves to ``NOOP``.
"""

from typing import Any, Callable, Dict, Optional, Tuple, Union

from .._common.config import DispatchConfig, Phase


Handler = Callable[[Any, Any], Any]
TypeKey = Union[type, str]

HANDLES_ATTR = "__accept_handles__"

DEFAULT_CONFIG = DispatchConfig()


def NOOP(obj: Any, context: Any) -> None:
    """Stand-in for handlers the visitor does not implement."""
    return None


def _register(phase: Phase, types: Tuple[TypeKey, ...]) -> Callable:
    if not types:
        raise TypeError(f"on_{phase.value}() needs at least one type")

    def decorator(func):
        handles = list(getattr(func, HANDLES_ATTR, ()))
        handles.extend((phase.value, key) for key in types)
        setattr(func, HANDLES_ATTR, handles)
        return func

    return decorator


def on_enter(*types: TypeKey) -> Callable:
    """Bind the decorated method as the enter handler for ``types``."""
    return _register(Phase.ENTER, types)


def on_visit(*types: TypeKey) -> Callable:
    """Bind the decorated method as the visit handler for ``types``."""
    return _register(Phase.VISIT, types)


def on_exit(*types: TypeKey) -> Callable:
    """Bind the decorated method as the exit handler for ``types``."""
    return _register(Phase.EXIT, types)


class Visitor:
    """Optional base class for visitors with an explicit handler table.

    The table maps ``(phase, type)`` to a method name and is built once per
    class, when the class is created. Tables of base visitor classes are
    inherited and may be overridden. Convention-named methods keep working
    alongside the table.
    """

    _handler_table: Dict[Tuple[str, TypeKey], str] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        table: Dict[Tuple[str, TypeKey], str] = {}
        for base in reversed(cls.__mro__[1:]):
            table.update(vars(base).get("_handler_table", {}))
        for attr_name, member in vars(cls).items():
            for phase_value, key in getattr(member, HANDLES_ATTR, ()):
                table[(phase_value, key)] = attr_name
        cls._handler_table = table

    @classmethod
    def handler_table(cls) -> Dict[Tuple[str, TypeKey], str]:
        """Return a copy of the registration table for inspection."""
        return dict(cls._handler_table)


def find_handler(visitor: Any,
                 phase: Union[Phase, str],
                 klass: type,
                 config: Optional[DispatchConfig] = None) -> Handler:
    """Find the handler for ``phase`` and ``klass`` on ``visitor``.

    Args:
        visitor: Any object; a Visitor subclass adds its registration table
        phase: Phase or its string value ('enter', 'visit', 'exit')
        klass: Type from the dispatch chain
        config: Dispatch configuration (defaults to DispatchConfig())

    Returns:
        Bound handler taking (obj, context), or NOOP
    """
    config = config or DEFAULT_CONFIG
    phase = Phase(phase)
    name = config.name_for(klass)

    if config.use_registry:
        table = getattr(type(visitor), "_handler_table", None)
        if table:
            attr_name = table.get((phase.value, klass)) or table.get((phase.value, name))
            if attr_name is not None:
                return getattr(visitor, attr_name)

    found = getattr(visitor, config.handler_name(phase, name), None)
    if callable(found):
        return found
    return NOOP
