"""
Bounded-length counter made of letter/numeral groups.

Groups are stored least significant first in a fixed array of slots with an
explicit length. Incrementing carries from slot 0 upward; when the most
significant group rolls over the counter grows by one group, and at full
length it wraps back to the single group A1.
"""

import threading
from dataclasses import asdict, dataclass
from typing import Optional

from ..config.defaults import CounterParams
from ..config.validation import ConfigValidator
from ..digits import CompositeDigit, increment
from ..errors import ConfigurationError, CounterParseError
from ..logging.config import get_counter_logger, log_counter_advance, log_parse_fallback
from .parser import format_groups, parse_groups

logger = get_counter_logger(__name__)


@dataclass(frozen=True)
class AdvanceResult:
    """Outcome of a single counter advance."""

    previous: str
    current: str

    # Wrapped from the largest value back to A1
    overflow: bool = False
    # A new most significant group was added
    grew: bool = False


class Number:
    """
    Counter value such as "B3-A1-Z9".

    All public operations hold the instance lock, so a Number may be shared
    between threads. The lock is reentrant because advance() runs the
    shared increment loop, which calls back into is_valid() and
    is_maximum().
    """

    def __init__(self, text: str = "", params: Optional[CounterParams] = None):
        """
        Create a counter from text, or at the minimum value A1.

        Unparseable text falls back to A1 and logs a warning, unless
        params.strict_parse is set, in which case the parse error is raised.

        Args:
            text: Counter text, most significant group first
            params: Counter shape and parsing policy

        Raises:
            ConfigurationError: If params fail counter validation
            CounterParseError: If text is rejected and strict_parse is set
        """
        self.params = params or CounterParams()
        errors = ConfigValidator.validate_counter_params(asdict(self.params))
        if errors:
            raise ConfigurationError(
                "; ".join(f"{error.field}: {error.message}" for error in errors),
                errors=errors,
            )

        self.logger = logger
        self._lock = threading.RLock()
        self._slots = [CompositeDigit() for _ in range(self.params.max_groups)]
        self._length = 1
        self._overflowed = False

        if not text:
            return

        try:
            self._load(parse_groups(text, self.params.max_groups, self.params.separator))
        except CounterParseError as e:
            if self.params.strict_parse:
                raise
            log_parse_fallback(
                self.logger,
                text=text,
                reason=str(e),
                context={"error": type(e).__name__},
            )

    @classmethod
    def parse(cls, text: str, params: Optional[CounterParams] = None) -> "Number":
        """
        Create a counter from text, raising on any parse problem.

        Unlike the constructor this also rejects empty text.

        Raises:
            CounterParseError: If the text is not a valid counter value
        """
        number = cls(params=params)
        number._load(parse_groups(text, number.params.max_groups, number.params.separator))
        return number

    def _load(self, groups: list[CompositeDigit]) -> None:
        with self._lock:
            for index, digit in enumerate(reversed(groups)):
                self._slots[index] = digit
            self._length = len(groups)

    @property
    def max_groups(self) -> int:
        return self.params.max_groups

    @property
    def overflowed(self) -> bool:
        """Whether the most recent advance wrapped back to the minimum."""
        with self._lock:
            return self._overflowed

    def is_valid(self) -> bool:
        with self._lock:
            return all(digit.is_valid() for digit in self._slots[:self._length])

    def is_maximum(self) -> bool:
        """Full length with the most significant group at Z9."""
        with self._lock:
            return (self._length == self.max_groups
                    and self._slots[self._length - 1].is_maximum())

    def set_minimum(self) -> None:
        with self._lock:
            self._length = 1
            self._slots[0].set_minimum()

    def identifier(self) -> str:
        with self._lock:
            return format_groups(reversed(self._slots[:self._length]), self.params.separator)

    def advance_raw(self) -> bool:
        """Carry chain from the least significant group upward."""
        with self._lock:
            for index in range(self._length):
                if not increment(self._slots[index]):
                    return False
                if index < self._length - 1:
                    continue

                if self._length == self.max_groups:
                    self._length = 1
                    self._slots[0].set_minimum()
                    return True

                self._length += 1
                self._slots[self._length - 1].set_minimum()
                return False
            return False

    def advance(self) -> AdvanceResult:
        """
        Increment the counter by one.

        Returns:
            AdvanceResult with the values before and after, and whether the
            counter grew or wrapped
        """
        with self._lock:
            previous = self.identifier()
            length_before = self._length
            overflow = increment(self)
            self._overflowed = overflow
            result = AdvanceResult(
                previous=previous,
                current=self.identifier(),
                overflow=overflow,
                grew=self._length > length_before,
            )

        log_counter_advance(
            self.logger,
            previous=result.previous,
            current=result.current,
            overflow=result.overflow,
            grew=result.grew,
        )
        return result

    def reset(self) -> None:
        """Return to the minimum value A1."""
        with self._lock:
            self.set_minimum()
            self._overflowed = False

    def __len__(self) -> int:
        with self._lock:
            return self._length

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"Number({self.identifier()!r})"
