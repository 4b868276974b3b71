import pytest

from aocsolver.triplets import all_triplets, next_triplet, triplet_hash


def test_first_and_last_hash():
    assert triplet_hash("AAA") == 0
    assert triplet_hash("ZZZ") == 26 * 26 * 26 - 1


def test_next_carries():
    assert next_triplet("AAZ") == "ABA"
    assert next_triplet("AZZ") == "BAA"
    assert next_triplet("AAA") == "AAB"


def test_next_after_last_overflows():
    with pytest.raises(OverflowError):
        next_triplet("ZZZ")


def test_invalid_names_rejected():
    with pytest.raises(ValueError):
        triplet_hash("aaa")
    with pytest.raises(ValueError):
        triplet_hash("AAAA")


def test_all_triplets_hash_matches_position():
    names = list(all_triplets())
    assert len(names) == 26 ** 3
    assert all(triplet_hash(name) == index for index, name in enumerate(names))


def test_next_matches_enumeration():
    names = list(all_triplets())
    assert all(next_triplet(a) == b for a, b in zip(names, names[1:]))