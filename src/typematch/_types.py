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

"""Handler protocols accepted by match chains.

Plain functions and lambdas satisfy these protocols; they exist so chain
signatures can describe what each clause passes to its handler.
"""

from __future__ import annotations

from typing import Protocol

__all__ = ["MatchHandler", "NullHandler"]


class MatchHandler[T](Protocol):
    """Callable invoked with the subject once it matched a clause's type."""

    def __call__(self, value: T, /) -> object: ...


class NullHandler(Protocol):
    """Callable invoked without arguments when the subject is ``None``."""

    def __call__(self) -> object: ...
