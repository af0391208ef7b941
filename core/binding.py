import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal


class Subscription:
    """A registered change listener. ``cancel`` stops delivery and unregisters it."""

    def __init__(self, callback: Callable[[Any], None],
                 unobserve: Optional[Callable[["Subscription"], None]] = None):
        self._callback = callback
        self._unobserve = unobserve
        self.active = True

    def notify(self, value):
        if self.active:
            self._callback(value)

    __call__ = notify

    def cancel(self, *_args):
        # Extra arguments let this be connected directly to QObject.destroyed.
        if not self.active:
            return
        self.active = False
        if self._unobserve is None:
            return
        try:
            self._unobserve(self)
        except RuntimeError as exc:
            # The owner's C++ object can be deleted before the observer's.
            logging.debug(f"Observer already detached from its owner: {exc}")


class Binding:
    """Two-way access to a value owned elsewhere.

    The owner keeps the storage. A component reads through ``get`` and writes through
    ``set``; neither side holds a copy. ``observe``, when given, registers a callback
    that the owner invokes after the value changes, and ``unobserve`` removes it again.
    """

    def __init__(self, getter: Callable[[], Any], setter: Callable[[Any], None],
                 observe: Optional[Callable[[Callable[[Any], None]], Any]] = None,
                 unobserve: Optional[Callable[[Subscription], Any]] = None):
        self._getter = getter
        self._setter = setter
        self._observe = observe
        self._unobserve = unobserve

    def get(self):
        return self._getter()

    def set(self, value):
        self._setter(value)

    @property
    def value(self):
        return self._getter()

    @value.setter
    def value(self, value):
        self._setter(value)

    @property
    def is_observable(self) -> bool:
        return self._observe is not None

    def observe(self, callback: Callable[[Any], None]) -> Optional[Subscription]:
        """Registers ``callback`` for change notifications.

        Returns a Subscription whose ``cancel`` detaches the callback, or None when the
        owner offers no notifications. A cancelled subscription never calls back, even
        if the owner has no way to unregister it.
        """
        if self._observe is None:
            return None
        subscription = Subscription(callback, self._unobserve)
        self._observe(subscription)
        return subscription

    @classmethod
    def constant(cls, value) -> "Binding":
        """A read-only binding, useful for previews. Writes are dropped."""
        def _discard(new_value):
            logging.debug(f"Constant binding ignored write of {new_value!r} (stays {value!r})")

        return cls(lambda: value, _discard)

    @classmethod
    def from_attribute(cls, obj, name: str) -> "Binding":
        return cls(lambda: getattr(obj, name), lambda v: setattr(obj, name, v))


class RatingState(QObject):
    """Owns a rating integer and announces changes to it."""

    # Parameters: new rating (int)
    rating_changed = Signal(int)

    def __init__(self, rating: int = 0, parent=None):
        super().__init__(parent)
        self._rating = rating

    @property
    def rating(self) -> int:
        return self._rating

    @rating.setter
    def rating(self, value: int):
        if value == self._rating:
            return
        self._rating = value
        logging.debug(f"RatingState changed to {value}")
        self.rating_changed.emit(value)

    def set_rating(self, value: int):
        self.rating = value

    def binding(self) -> Binding:
        return Binding(
            lambda: self._rating,
            self.set_rating,
            observe=lambda sub: self.rating_changed.connect(sub.notify),
            unobserve=lambda sub: self.rating_changed.disconnect(sub.notify),
        )
