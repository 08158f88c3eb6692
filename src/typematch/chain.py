# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Fluent runtime type discrimination.

A chain wraps one subject and dispatches it to the handler of the first
clause whose type it is an instance of::

    from typematch import match

    (
        match(animal, Dog, lambda dog: dog.bark())
        .match_else(Cat, lambda cat: cat.meow())
        .match_null(lambda: print("nobody home"))
        .otherwise(lambda other: print(f"unknown: {other!r}"))
    )

:meth:`TypeMatchChain.match` always tests, even after an earlier clause
matched; :meth:`~TypeMatchChain.match_else` and
:meth:`~TypeMatchChain.match_null` skip once the chain is resolved, which
gives "first match wins" for every clause after the entry point.
"""

from __future__ import annotations

from typing import Self

from ._guards import is_instance_of, require_present
from ._types import MatchHandler, NullHandler
from .errors import InvalidArgumentError
from .logging import StructuredLogger, get_logger

__all__ = ["TypeMatchChain", "match"]

logger: StructuredLogger = get_logger(__name__, context={"component": "typematch"})

_TARGET_REQUIRED = "Target type cannot be None."
_HANDLER_REQUIRED = "Match handler cannot be None."
_ERROR_REQUIRED = "Error cannot be None."
_ERROR_NOT_RAISABLE = "Error must be an exception instance or class."


def _type_name(target: object) -> str:
    if isinstance(target, tuple):
        return " | ".join(_type_name(item) for item in target)
    return getattr(target, "__qualname__", repr(target))


class TypeMatchChain[S]:
    """Ordered sequence of type tests against a single subject.

    Chains are cheap, single-use and not thread-safe: build one per value,
    call clauses in order, and drop it after the terminal call.
    """

    __slots__ = ("_resolved", "_subject")

    def __init__(self, subject: S) -> None:
        super().__init__()
        self._subject = subject
        self._resolved = False

    @classmethod
    def of[T](
        cls, subject: S, target: type[T], handler: MatchHandler[T]
    ) -> TypeMatchChain[S]:
        """Start a chain for ``subject`` and run its first type test."""

        _ = require_present(target, _TARGET_REQUIRED)
        _ = require_present(handler, _HANDLER_REQUIRED)
        return cls(subject).match(target, handler)

    @property
    def subject(self) -> S:
        """The wrapped value, never modified by the chain."""

        return self._subject

    @property
    def resolved(self) -> bool:
        """Whether a clause has already handled the subject."""

        return self._resolved

    def match[T](self, target: type[T], handler: MatchHandler[T]) -> Self:
        """Dispatch to ``handler`` when the subject is an instance of ``target``.

        Unlike :meth:`match_else` this does not consult :attr:`resolved`; a
        matching clause fires even on a chain that already matched. A None
        subject never matches a type clause, not even ``object``; handle it
        with :meth:`match_null`.

        Raises:
            InvalidArgumentError: If ``target`` or ``handler`` is None.
        """

        _ = require_present(target, _TARGET_REQUIRED)
        _ = require_present(handler, _HANDLER_REQUIRED)
        if self._subject is not None and is_instance_of(self._subject, target):
            self._resolved = True
            logger.debug(
                "typematch.clause_matched",
                event="typematch.clause_matched",
                context={
                    "clause": "match",
                    "target": _type_name(target),
                    "subject_type": type(self._subject).__qualname__,
                },
            )
            handler(self._subject)
        return self

    def match_else[T](self, target: type[T], handler: MatchHandler[T]) -> Self:
        """Like :meth:`match`, but skipped once the chain is resolved.

        Raises:
            InvalidArgumentError: If ``target`` or ``handler`` is None, even
                when the chain is already resolved.
        """

        _ = require_present(target, _TARGET_REQUIRED)
        _ = require_present(handler, _HANDLER_REQUIRED)
        if self._resolved:
            return self
        return self.match(target, handler)

    def match_null(self, handler: NullHandler) -> Self:
        """Call ``handler()`` when the subject is None and nothing matched yet."""

        _ = require_present(handler, _HANDLER_REQUIRED)
        if self._resolved or self._subject is not None:
            return self
        self._resolved = True
        logger.debug(
            "typematch.null_matched",
            event="typematch.null_matched",
            context={"clause": "match_null"},
        )
        handler()
        return self

    def otherwise(self, handler: MatchHandler[S]) -> None:
        """Terminal clause passing the unnarrowed subject when nothing matched."""

        _ = require_present(handler, _HANDLER_REQUIRED)
        if self._resolved:
            return
        logger.debug(
            "typematch.fallback",
            event="typematch.fallback",
            context={
                "clause": "otherwise",
                "subject_type": type(self._subject).__qualname__,
            },
        )
        handler(self._subject)

    def or_throw(self, error: BaseException | type[BaseException]) -> None:
        """Terminal clause raising ``error`` verbatim when nothing matched.

        Raises:
            InvalidArgumentError: If ``error`` is None or cannot be raised.
        """

        _ = require_present(error, _ERROR_REQUIRED)
        if not _is_raisable(error):
            raise InvalidArgumentError(_ERROR_NOT_RAISABLE)
        if self._resolved:
            return
        logger.debug(
            "typematch.unresolved_raise",
            event="typematch.unresolved_raise",
            context={
                "clause": "or_throw",
                "error_type": _type_name(
                    error if isinstance(error, type) else type(error)
                ),
            },
        )
        raise error

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(subject={self._subject!r}, "
            f"resolved={self._resolved})"
        )


def _is_raisable(error: object) -> bool:
    if isinstance(error, BaseException):
        return True
    return isinstance(error, type) and issubclass(error, BaseException)


def match[S, T](
    subject: S, target: type[T], handler: MatchHandler[T]
) -> TypeMatchChain[S]:
    """Start a :class:`TypeMatchChain` for ``subject``.

    The first type test runs immediately; continue the chain with
    :meth:`~TypeMatchChain.match_else`, :meth:`~TypeMatchChain.match_null`
    and finish it with :meth:`~TypeMatchChain.otherwise` or
    :meth:`~TypeMatchChain.or_throw`.

    Args:
        subject: The value to discriminate.
        target: The first candidate type.
        handler: Called with ``subject`` if it is an instance of ``target``.

    Returns:
        The chain, resolved when the first test matched.

    Raises:
        InvalidArgumentError: If ``target`` or ``handler`` is None.

    Example::

        match(42, str, print).or_throw(TypeError("expected text"))
    """

    return TypeMatchChain.of(subject, target, handler)
