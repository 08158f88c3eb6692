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

"""Property-based tests for match chain dispatch."""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from typematch import TypeMatchChain, match

# Candidate clause types, none of which is a subclass of another.
_DISJOINT_TYPES: tuple[type, ...] = (int, float, str, bytes, list, dict, tuple)

_subjects = st.one_of(
    st.integers(),
    st.floats(allow_nan=False),
    st.text(),
    st.binary(),
    st.lists(st.integers(), max_size=3),
    st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
    st.tuples(st.integers()),
)


def _run_chain(
    subject: object, targets: list[type]
) -> tuple[list[tuple[int, object]], list[object], TypeMatchChain[object]]:
    fired: list[tuple[int, object]] = []
    fallback: list[object] = []

    def clause(index: int):  # noqa: ANN202
        return lambda value: fired.append((index, value))

    chain: TypeMatchChain[object] = match(subject, targets[0], clause(0))
    for index, target in enumerate(targets[1:], start=1):
        _ = chain.match_else(target, clause(index))
    chain.otherwise(fallback.append)
    return fired, fallback, chain


@given(_subjects, st.permutations(_DISJOINT_TYPES))
@settings(max_examples=200)
def test_only_the_matching_clause_fires(
    subject: object, targets: list[type]
) -> None:
    """Exactly one clause fires, with the subject itself, and no fallback."""

    fired, fallback, chain = _run_chain(subject, targets)

    expected = targets.index(type(subject))
    assert fired == [(expected, subject)]
    assert fired[0][1] is subject
    assert fallback == []
    assert chain.resolved is True


@given(_subjects, st.lists(st.sampled_from(_DISJOINT_TYPES), min_size=1, max_size=4))
@settings(max_examples=200)
def test_first_listed_match_wins(subject: object, targets: list[type]) -> None:
    """Duplicates and supertypes after the first hit never fire."""

    fired, _, _ = _run_chain(subject, [*targets, object, type(subject)])

    first = next(
        index
        for index, target in enumerate([*targets, object])
        if isinstance(subject, target)
    )
    assert [index for index, _ in fired] == [first]


@given(_subjects)
@settings(max_examples=100)
def test_fallback_receives_unmatched_subject_once(subject: object) -> None:
    targets = [t for t in _DISJOINT_TYPES if t is not type(subject)]

    fired, fallback, chain = _run_chain(subject, targets)

    assert fired == []
    assert len(fallback) == 1
    assert fallback[0] is subject
    assert chain.resolved is False


@given(_subjects, st.text())
@settings(max_examples=100)
def test_or_throw_raises_given_error_unchanged(subject: object, message: str) -> None:
    error = LookupError(message)
    raised: BaseException | None = None

    try:
        match(subject, set, lambda _: None).match_else(
            frozenset, lambda _: None
        ).or_throw(error)
    except LookupError as exc:
        raised = exc

    assert raised is error


@given(
    st.lists(
        st.sampled_from((*_DISJOINT_TYPES, object, type(None))), min_size=1, max_size=5
    )
)
@settings(max_examples=100)
def test_null_clause_resolves_none_subject(targets: list[type]) -> None:
    fired: list[str] = []

    chain = match(None, targets[0], lambda _: fired.append("type"))
    for target in targets[1:]:
        _ = chain.match_else(target, lambda _: fired.append("type"))
    chain.match_null(lambda: fired.append("null")).otherwise(
        lambda _: fired.append("other")
    )

    assert fired == ["null"]
    assert chain.resolved is True
