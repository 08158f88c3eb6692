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

Replace ``isinstance`` ladders with a readable chain::

    from typematch import match

    match(shape, Circle, draw_circle).match_else(
        Square, draw_square
    ).otherwise(draw_unknown)

Modules
-------
- **chain**: :class:`TypeMatchChain` and the :func:`match` entry point
- **errors**: :class:`TypeMatchError` and :class:`InvalidArgumentError`
- **logging**: structured logging helpers and :func:`configure_logging`
"""

from __future__ import annotations

from ._guards import is_instance_of, require_present
from ._types import MatchHandler, NullHandler
from .chain import TypeMatchChain, match
from .errors import InvalidArgumentError, TypeMatchError
from .logging import configure_logging, get_logger

__all__ = [
    "InvalidArgumentError",
    "MatchHandler",
    "NullHandler",
    "TypeMatchChain",
    "TypeMatchError",
    "configure_logging",
    "get_logger",
    "is_instance_of",
    "match",
    "require_present",
]
