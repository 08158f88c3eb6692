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

"""Type guards and argument checks used by match chains.

Example usage::

    from typematch import is_instance_of

    if is_instance_of(response, SuccessResponse):
        print(response.data)  # type narrowed
"""

from __future__ import annotations

from typing import TypeGuard

from .errors import InvalidArgumentError


def is_instance_of[T](value: object, type_: type[T]) -> TypeGuard[T]:
    """Type guard that checks if a value is an instance of a type.

    This is a thin wrapper around ``isinstance()`` that provides proper type
    narrowing through ``TypeGuard``. Subclass instances match their parents.

    Args:
        value: The value to check.
        type_: The type to check against.

    Returns:
        True if value is an instance of type_, False otherwise.

    Example::

        def process(item: str | int) -> str:
            if is_instance_of(item, str):
                return item.upper()  # type is narrowed to str
            return str(item)
    """
    return isinstance(value, type_)


def require_present[T](value: T | None, message: str) -> T:
    """Return ``value`` unchanged, rejecting ``None``.

    Args:
        value: The argument to check.
        message: Error message used when the argument is missing.

    Returns:
        The value, with None removed from its type.

    Raises:
        InvalidArgumentError: If value is None.
    """
    if value is None:
        raise InvalidArgumentError(message)
    return value


__all__ = [
    "is_instance_of",
    "require_present",
]
