# tabular/messages.py
"""
Mensajes de validación: hojas (error, warning, info) y compuestos.

Un compuesto agrupa mensajes, incluidos otros compuestos, y expone el texto
aplanado de sus hojas filtrado por nivel.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional


class MessageLevel(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Message(ABC):
    """Contrato común de hojas y compuestos."""

    @abstractmethod
    def add(self, message: Optional["Message"]) -> "Message":
        pass

    @abstractmethod
    def remove(self, message: Optional["Message"]) -> "Message":
        pass

    @abstractmethod
    def clear(self) -> "Message":
        pass

    @property
    @abstractmethod
    def text(self) -> str:
        pass

    @property
    @abstractmethod
    def messages(self) -> List["Message"]:
        """Hijos directos."""
        pass

    @property
    @abstractmethod
    def is_composite(self) -> bool:
        pass

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def has_level(self, level: MessageLevel) -> bool:
        pass

    @property
    def texts(self) -> List["Message"]:
        """Hojas no vacías, aplanadas en orden."""
        return flatten(self)

    @property
    def is_error(self) -> bool:
        return self.has_level(MessageLevel.ERROR)

    @property
    def is_warning(self) -> bool:
        return self.has_level(MessageLevel.WARNING)

    @property
    def is_info(self) -> bool:
        return self.has_level(MessageLevel.INFO)

    @property
    def faults(self) -> str:
        return self._joined(MessageLevel.ERROR)

    @property
    def warnings(self) -> str:
        return self._joined(MessageLevel.WARNING)

    @property
    def infos(self) -> str:
        return self._joined(MessageLevel.INFO)

    def _joined(self, level: MessageLevel) -> str:
        return " ".join(leaf.text for leaf in flatten(self) if leaf.has_level(level))

    def __str__(self) -> str:
        return self.text


class LeafMessage(Message):
    """Mensaje concreto; las subclases solo indican su nivel."""

    level: MessageLevel = MessageLevel.INFO

    def __init__(self, text: Optional[str] = None):
        self._text = text

    def add(self, message: Optional[Message]) -> Message:
        # una hoja solo guarda un texto: se reemplaza
        if message is not None:
            self._text = message.text
        return self

    def remove(self, message: Optional[Message]) -> Message:
        return self.clear()

    def clear(self) -> Message:
        self._text = None
        return self

    @property
    def text(self) -> str:
        return self._text or ""

    @property
    def messages(self) -> List[Message]:
        return [] if self.is_empty else [self]

    @property
    def is_composite(self) -> bool:
        return False

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    def has_level(self, level: MessageLevel) -> bool:
        return self.level is level

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.text!r}>"


class ErrorMessage(LeafMessage):
    level = MessageLevel.ERROR


class WarningMessage(LeafMessage):
    level = MessageLevel.WARNING


class InfoMessage(LeafMessage):
    level = MessageLevel.INFO


class Messages(Message):
    """Compuesto que colecciona mensajes; contenedor por defecto."""

    def __init__(self):
        self._messages: List[Message] = []

    def add(self, message: Optional[Message]) -> Message:
        if message is not None:
            self._messages.append(message)
        return self

    def append(self, level: MessageLevel, text: str) -> "Messages":
        """Añade una hoja del nivel indicado."""
        self._messages.append(LEVELS[level](text))
        return self

    def remove(self, message: Optional[Message]) -> Message:
        if message is not None and message in self._messages:
            self._messages.remove(message)
        return self

    def clear(self) -> Message:
        self._messages.clear()
        return self

    @property
    def text(self) -> str:
        return " ".join(message.text for message in self._messages)

    @property
    def messages(self) -> List[Message]:
        return list(self._messages)

    @property
    def is_composite(self) -> bool:
        return True

    @property
    def is_empty(self) -> bool:
        return not self._messages

    def has_level(self, level: MessageLevel) -> bool:
        return any(message.has_level(level) for message in self._messages)

    def __repr__(self) -> str:
        return f"<Messages {self._messages!r}>"


LEVELS = {
    MessageLevel.ERROR: ErrorMessage,
    MessageLevel.WARNING: WarningMessage,
    MessageLevel.INFO: InfoMessage,
}


def flatten(message: Message) -> List[Message]:
    """Aplana el árbol dejando solo mensajes concretos."""
    if not message.is_composite:
        return message.messages

    leaves: List[Message] = []
    for child in message.messages:
        leaves.extend(flatten(child))
    return leaves
