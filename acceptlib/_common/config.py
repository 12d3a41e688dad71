"""Configuration system for AcceptLib.

This module defines how users tune dispatch: which value marks the neutral
(mainline) context, how handler names are formed, and whether explicit
registration tables are consulted before the naming convention.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class Phase(Enum):
    """The three handler phases a visitor may implement.

    The value is the prefix used by the naming convention
    (``enter_Box``, ``visit_Box``, ``exit_Box``).
    """
    ENTER = "enter"
    VISIT = "visit"
    EXIT = "exit"


@dataclass
class DispatchConfig:
    """Complete configuration for handler dispatch.

    The defaults reproduce the plain convention: ``None`` as the neutral
    context, ``{phase}_{name}`` handler names and the class ``__name__`` as
    the type name.
    """

    # Context passed during the mainline enter/visit/exit pass
    neutral_context: Any = None

    # Handler naming convention
    handler_template: str = "{phase}_{name}"
    type_name: Optional[Callable[[type], str]] = None  # Override for class names

    # Consult per-visitor registration tables before the naming convention
    use_registry: bool = True

    @classmethod
    def convention_only(cls) -> 'DispatchConfig':
        """Create config that resolves handlers by name only.

        Returns:
            DispatchConfig ignoring registration tables
        """
        return cls(use_registry=False)

    def name_for(self, klass: type) -> str:
        """Return the type name used to build handler names for ``klass``."""
        if self.type_name is not None:
            return self.type_name(klass)
        return klass.__name__

    def handler_name(self, phase: Phase, name: str) -> str:
        """Build the handler attribute name for a phase and type name.

        Args:
            phase: Phase (or its string value)
            name: Type name as returned by name_for()

        Returns:
            Attribute name to probe on the visitor
        """
        phase_value = phase.value if isinstance(phase, Phase) else str(phase)
        return self.handler_template.format(phase=phase_value, name=name)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.handler_template, str):
            errors.append("handler_template must be a string")
        else:
            if "{phase}" not in self.handler_template:
                errors.append("handler_template must contain '{phase}'")
            if "{name}" not in self.handler_template:
                errors.append("handler_template must contain '{name}'")

        if self.type_name is not None and not callable(self.type_name):
            errors.append("type_name must be callable")

        return errors
