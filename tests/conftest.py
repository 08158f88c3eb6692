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

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest


@dataclass(slots=True)
class Recorder:
    """Collects ``(label, args)`` pairs from handlers built with :meth:`handler`."""

    calls: list[tuple[str, tuple[object, ...]]] = field(default_factory=list)

    def handler(self, label: str) -> Callable[..., None]:
        def record(*args: object) -> None:
            self.calls.append((label, args))

        return record

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.calls]


@pytest.fixture
def recorder() -> Recorder:
    """Return an empty handler call recorder."""

    return Recorder()
