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

"""Base exception hierarchy for :mod:`typematch`.

Exception hierarchy::

    TypeMatchError
    └── InvalidArgumentError (also a ValueError)

Errors passed to :meth:`~typematch.TypeMatchChain.or_throw` are raised as-is
and never wrapped in this hierarchy.
"""

from __future__ import annotations


class TypeMatchError(Exception):
    """Base class for all typematch exceptions.

    Catch this to handle any library-specific failure while letting user
    exceptions raised from handlers or ``or_throw`` propagate normally.

    Example::

        try:
            match(value, str, on_text).otherwise(None)
        except TypeMatchError as e:
            logger.error("Bad match chain: %s", e)
    """


class InvalidArgumentError(TypeMatchError, ValueError):
    """Raised when a chain operation receives an absent or unusable argument.

    A missing target type, handler, or error value is reported before the
    chain inspects its resolved state, so the error surfaces even on chains
    that already matched. No handler runs when this is raised.

    Example::

        try:
            match(value, None, on_text)
        except InvalidArgumentError as e:
            print(e)  # Target type cannot be None.

    Note:
        This exception also inherits from ``ValueError``, so it can be caught
        by handlers expecting standard argument errors.
    """


__all__ = [
    "InvalidArgumentError",
    "TypeMatchError",
]
