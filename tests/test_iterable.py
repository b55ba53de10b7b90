import random

import pytest

from tagged_ufs import DuplicateElement, IterableDisjointSets, IterableTag, TaggedDisjointSets, UnknownElement


class Counter:
    def __init__(self, count: int) -> None:
        self.count = count

    def merge(self, other: "Counter") -> "Counter":
        self.count += other.count
        return self


class Oracle:
    """Naive partition kept as a list of member lists."""

    def __init__(self) -> None:
        self.sets = []

    def make_set(self, element):
        if self.find(element) is not None:
            raise DuplicateElement(element)
        self.sets.append([element])

    def find(self, element):
        for members in self.sets:
            if element in members:
                return members
        return None

    def unite(self, left, right):
        left_set = self.find(left)
        right_set = self.find(right)
        if left_set is None:
            raise UnknownElement(left)
        if right_set is None:
            raise UnknownElement(right)
        if left_set is right_set:
            return False
        self.sets.remove(right_set)
        left_set.extend(right_set)
        return True


def test_iterable_tag_merges_members_and_user_tag():
    left = IterableTag.singleton("a", Counter(1))
    right = IterableTag(["b", "c"], Counter(2))
    merged = left.merge(right)
    assert merged is left
    assert list(merged) == ["a", "b", "c"]
    assert len(merged) == 3
    assert "c" in merged
    assert merged.tag.count == 3


def test_iterable_tag_works_in_plain_tagged_sets():
    sets = TaggedDisjointSets()
    for element in "abcd":
        sets.make_set(element, IterableTag.singleton(element))
    sets.unite("a", "c")
    sets.unite("d", "a")
    assert sorted(sets.find("c")) == ["a", "c", "d"]
    assert list(sets.find("b")) == ["b"]


def test_handle_iterates_members_and_exposes_user_tag():
    sets = IterableDisjointSets()
    sets.make_set(0, Counter(10))
    sets.make_set(1, Counter(20))
    sets.make_set(2, Counter(30))
    sets.unite(0, 1)
    handle = sets.find(1)
    assert sorted(handle) == [0, 1]
    assert 0 in handle
    assert 2 not in handle
    assert handle.tag.count == 30
    assert len(handle) == 2
    # restartable
    assert sorted(handle) == sorted(handle)


def test_groups_cover_universe_once():
    sets = IterableDisjointSets()
    for element in range(10):
        sets.make_set(element)
    for left, right in [(0, 9), (1, 8), (9, 8), (4, 5)]:
        sets.unite(left, right)
    groups = sets.groups()
    flattened = sorted(element for group in groups for element in group)
    assert flattened == list(range(10))
    assert len(groups) == len(sets) == 6


def test_duplicate_make_set_keeps_members_intact():
    sets = IterableDisjointSets()
    sets.make_set("x")
    with pytest.raises(DuplicateElement):
        sets.make_set("x")
    assert list(sets.find("x")) == ["x"]


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("union_by", ["size", "rank"])
def test_matches_oracle_on_random_operations(seed, union_by):
    rng = random.Random(seed)
    sets = IterableDisjointSets(union_by=union_by)
    oracle = Oracle()

    for _ in range(rng.randint(0, 40)):
        element = rng.randrange(32)
        if oracle.find(element) is not None:
            with pytest.raises(DuplicateElement):
                sets.make_set(element, Counter(1))
            continue
        sets.make_set(element, Counter(1))
        oracle.make_set(element)

    for _ in range(rng.randint(0, 40)):
        left, right = rng.randrange(32), rng.randrange(32)
        try:
            expected = oracle.unite(left, right)
        except UnknownElement:
            with pytest.raises(UnknownElement):
                sets.unite(left, right)
        else:
            assert sets.unite(left, right) is expected

    assert len(sets) == len(oracle.sets)
    for _ in range(40):
        x, y = rng.randrange(32), rng.randrange(32)
        expected_x = oracle.find(x)
        if expected_x is None:
            with pytest.raises(UnknownElement):
                sets.find(x)
            continue
        handle = sets.find(x)
        assert sorted(handle) == sorted(expected_x)
        assert len(handle) == len(expected_x)
        assert handle.tag.count == len(expected_x)
        expected_y = oracle.find(y)
        if expected_y is not None:
            assert (handle == sets.find(y)) == (expected_x is expected_y)

    seen = [element for handle in sets for element in handle]
    assert sorted(seen) == sorted(x for members in oracle.sets for x in members)
